"""Process-level facade over a default registry and router."""

from logtree.runtime.default import (
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

__all__ = [
    "broadcast",
    "broadcastf",
    "close",
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
    "panic",
    "register",
    "registered",
    "trace",
    "tracef",
    "warn",
    "warnf",
]
