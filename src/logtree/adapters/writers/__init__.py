"""Built-in writers and their configuration names."""

from logtree.adapters.writers.buffer import BufferWriter
from logtree.adapters.writers.console import ConsoleWriter
from logtree.adapters.writers.memory import MemoryWriter
from logtree.adapters.writers.rotate import RotatingFileWriter
from logtree.adapters.writers.smtp import SMTPWriter
from logtree.core.composite import CompositeWriter
from logtree.core.ports import WriterConstructor
from logtree.core.registry import WriterRegistry

# Writer type names understood by a default registry
BUILTIN_WRITERS: dict[str, WriterConstructor] = {
    "buffer": BufferWriter.from_attrs,
    "rotate": RotatingFileWriter.from_attrs,
    "console": ConsoleWriter.from_attrs,
    "smtp": SMTPWriter.from_attrs,
    "mail": SMTPWriter.from_attrs,
}


def register_builtins(registry: WriterRegistry) -> WriterRegistry:
    """Register every built-in writer that is not already registered.

    Returns:
        The same registry, for chaining.
    """
    for name, constructor in BUILTIN_WRITERS.items():
        registry.register(name, constructor)
    return registry


def create_default_registry() -> WriterRegistry:
    """Return a fresh registry holding the built-in writers."""
    return register_builtins(WriterRegistry())


__all__ = [
    "BUILTIN_WRITERS",
    "BufferWriter",
    "CompositeWriter",
    "ConsoleWriter",
    "MemoryWriter",
    "RotatingFileWriter",
    "SMTPWriter",
    "create_default_registry",
    "register_builtins",
]
