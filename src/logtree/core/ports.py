"""Capability interfaces for writers.

A writer declares what it can do by implementing one or more of these
protocols. The tree builder and the router check capabilities with
isinstance() at configuration time; nothing is dispatched by type name
on the write path.
"""

from collections.abc import Callable, Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class Writer(Protocol):
    """Sink that accepts byte payloads."""

    def write(self, data: bytes) -> int:
        """Write a payload and return the number of bytes accepted.

        Raises:
            OSError: If the underlying storage or stream fails.
        """
        ...


@runtime_checkable
class Flusher(Protocol):
    """Writer that holds pending output until flushed."""

    def flush(self) -> None:
        """Emit anything pending downstream."""
        ...


@runtime_checkable
class Adder(Protocol):
    """Writer that can own child writers."""

    def add(self, writer: Writer) -> None:
        """Append a child writer."""
        ...


@runtime_checkable
class Closer(Protocol):
    """Writer that holds resources which must be released."""

    def close(self) -> None:
        """Release held resources."""
        ...


# Constructor registered under a writer type name. Receives the node's
# attributes and raises ValueError (or OSError) when they are unusable.
WriterConstructor = Callable[[Mapping[str, str]], Writer]
