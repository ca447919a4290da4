"""Writer composition core: configuration model, registry, builder, router."""

from logtree.core.builder import build_writer
from logtree.core.composite import CompositeWriter
from logtree.core.containers import ContainerSet
from logtree.core.errors import (
    ConfigParseError,
    ConfigShapeError,
    InvalidFlagError,
    LogConfigError,
    NotAContainerError,
    UnknownWriterTypeError,
    WriterConstructionError,
)
from logtree.core.formatting import LogFlag, format_line, parse_flags
from logtree.core.logger import Logger
from logtree.core.models import ROOT_NAME, SEVERITIES, ConfigNode, node
from logtree.core.ports import Adder, Closer, Flusher, Writer, WriterConstructor
from logtree.core.registry import WriterRegistry
from logtree.core.router import LevelRouter, NullWriter
from logtree.core.sizes import parse_size

__all__ = [
    "ROOT_NAME",
    "SEVERITIES",
    "Adder",
    "Closer",
    "CompositeWriter",
    "ConfigNode",
    "ConfigParseError",
    "ConfigShapeError",
    "ContainerSet",
    "Flusher",
    "InvalidFlagError",
    "LevelRouter",
    "LogConfigError",
    "LogFlag",
    "Logger",
    "NotAContainerError",
    "NullWriter",
    "UnknownWriterTypeError",
    "Writer",
    "WriterConstructionError",
    "WriterConstructor",
    "WriterRegistry",
    "build_writer",
    "format_line",
    "node",
    "parse_flags",
    "parse_size",
]
