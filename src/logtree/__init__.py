"""logtree - route leveled log records through configurable writer trees.

Writers are assembled from a declarative configuration::

    import logtree

    logtree.init_from_xml_file("logs.xml")
    logtree.info("service started")
    logtree.flush()

Custom writer types are registered by name before ``init``::

    logtree.register("memory", MemoryWriter.from_attrs)
"""

from logtree.adapters.config import parse_xml_file, parse_xml_string
from logtree.adapters.logging import WriterHandler
from logtree.adapters.writers import (
    BufferWriter,
    ConsoleWriter,
    MemoryWriter,
    RotatingFileWriter,
    SMTPWriter,
    create_default_registry,
    register_builtins,
)
from logtree.core import (
    SEVERITIES,
    CompositeWriter,
    ConfigNode,
    ConfigParseError,
    ConfigShapeError,
    InvalidFlagError,
    LevelRouter,
    LogConfigError,
    LogFlag,
    Logger,
    NotAContainerError,
    NullWriter,
    UnknownWriterTypeError,
    WriterConstructionError,
    WriterRegistry,
    build_writer,
    node,
    parse_size,
)
from logtree.runtime import (
    broadcast,
    broadcastf,
    close,
    critical,
    criticalf,
    debug,
    debugf,
    error,
    errorf,
    fatal,
    flush,
    get_logger,
    get_registry,
    get_router,
    info,
    infof,
    init,
    init_from_xml_file,
    init_from_xml_string,
    is_registered,
    panic,
    register,
    registered,
    trace,
    tracef,
    warn,
    warnf,
)

__version__ = "0.2.0"

__all__ = [
    "SEVERITIES",
    "BufferWriter",
    "CompositeWriter",
    "ConfigNode",
    "ConfigParseError",
    "ConfigShapeError",
    "ConsoleWriter",
    "InvalidFlagError",
    "LevelRouter",
    "LogConfigError",
    "LogFlag",
    "Logger",
    "MemoryWriter",
    "NotAContainerError",
    "NullWriter",
    "RotatingFileWriter",
    "SMTPWriter",
    "UnknownWriterTypeError",
    "WriterConstructionError",
    "WriterHandler",
    "WriterRegistry",
    "broadcast",
    "broadcastf",
    "build_writer",
    "close",
    "create_default_registry",
    "critical",
    "criticalf",
    "debug",
    "debugf",
    "error",
    "errorf",
    "fatal",
    "flush",
    "get_logger",
    "get_registry",
    "get_router",
    "info",
    "infof",
    "init",
    "init_from_xml_file",
    "init_from_xml_string",
    "is_registered",
    "node",
    "panic",
    "parse_size",
    "parse_xml_file",
    "parse_xml_string",
    "register",
    "register_builtins",
    "registered",
    "trace",
    "tracef",
    "warn",
    "warnf",
]
