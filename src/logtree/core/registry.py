"""Registry of writer constructors keyed by writer type name."""

import threading

from logtree.core.ports import WriterConstructor


class WriterRegistry:
    """Maps writer type names to constructors.

    Registrations are additive: a name can be registered once and is never
    replaced. All operations are safe to call from several threads.

    Example:
        ```python
        registry = WriterRegistry()
        registry.register("memory", lambda attrs: MemoryWriter())
        registry.lookup("memory")
        ```
    """

    def __init__(self) -> None:
        self._constructors: dict[str, WriterConstructor] = {}
        self._lock = threading.Lock()

    def register(self, name: str, constructor: WriterConstructor) -> bool:
        """Register a constructor under a writer type name.

        Args:
            name: Element name used for this writer in configurations.
            constructor: Callable taking the element attributes.

        Returns:
            True if registered, False if the name was already taken. The
            existing constructor stays in effect.

        Raises:
            TypeError: If constructor is not callable.
        """
        if not callable(constructor):
            raise TypeError("constructor must be callable")
        with self._lock:
            if name in self._constructors:
                return False
            self._constructors[name] = constructor
            return True

    def is_registered(self, name: str) -> bool:
        """Return True if a constructor is registered under name."""
        with self._lock:
            return name in self._constructors

    def lookup(self, name: str) -> WriterConstructor | None:
        """Return the constructor for name, or None if unregistered."""
        with self._lock:
            return self._constructors.get(name)

    def registered(self) -> set[str]:
        """Return a snapshot of all registered names."""
        with self._lock:
            return set(self._constructors)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._constructors)
