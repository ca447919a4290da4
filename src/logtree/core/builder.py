"""Turns a configuration tree into a live writer tree."""

from logtree.core.errors import (
    LogConfigError,
    NotAContainerError,
    UnknownWriterTypeError,
    WriterConstructionError,
)
from logtree.core.models import ConfigNode
from logtree.core.ports import Adder, Writer
from logtree.core.registry import WriterRegistry


def build_writer(node: ConfigNode, registry: WriterRegistry) -> Writer:
    """Build the writer described by node and, recursively, its children.

    Children are built in document order and added to their parent in that
    order. Any failure aborts the whole build; writers constructed so far
    are simply dropped.

    Args:
        node: Configuration node naming a registered writer type.
        registry: Registry to resolve writer type names against.

    Returns:
        The constructed writer with all children attached.

    Raises:
        UnknownWriterTypeError: If node.name is not registered.
        WriterConstructionError: If the constructor rejects node.attrs.
        NotAContainerError: If node has children but the writer has no add().
    """
    constructor = registry.lookup(node.name)
    if constructor is None:
        raise UnknownWriterTypeError(node.name)

    try:
        writer = constructor(dict(node.attrs))
    except LogConfigError:
        raise
    except (ValueError, OSError) as e:
        raise WriterConstructionError(node.name, str(e)) from e

    if not isinstance(writer, Writer):
        raise WriterConstructionError(
            node.name, f"constructor returned {type(writer).__name__}, not a writer"
        )

    if not node.children:
        return writer

    if not isinstance(writer, Adder):
        raise NotAContainerError(node.name)

    for child in node.children.values():
        writer.add(build_writer(child, registry))
    return writer
