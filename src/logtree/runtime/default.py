"""Process-wide default router and the convenience logging functions.

Until one of the ``init`` functions succeeds every severity discards its
output. The convenience functions never raise on write failures; those are
reported through the ``logtree`` logger of the standard logging module.
"""

import atexit
import logging
import os

from logtree.adapters.config.xml import parse_xml_file, parse_xml_string
from logtree.adapters.writers import create_default_registry
from logtree.core.logger import Logger
from logtree.core.models import SEVERITIES, ConfigNode
from logtree.core.ports import WriterConstructor
from logtree.core.registry import WriterRegistry
from logtree.core.router import LevelRouter

logger = logging.getLogger("logtree")

_registry = create_default_registry()
_router = LevelRouter(_registry)


def get_registry() -> WriterRegistry:
    """Return the default writer registry."""
    return _registry


def get_router() -> LevelRouter:
    """Return the default router."""
    return _router


def register(name: str, constructor: WriterConstructor) -> bool:
    """Register a writer constructor with the default registry.

    Returns:
        False if name is already registered.
    """
    return _registry.register(name, constructor)


def is_registered(name: str) -> bool:
    """Return True if name is registered with the default registry."""
    return _registry.is_registered(name)


def registered() -> set[str]:
    """Return the names registered with the default registry."""
    return _registry.registered()


def init(root: ConfigNode) -> None:
    """Configure the default router from a ConfigNode tree.

    Raises:
        LogConfigError: If the configuration is rejected. The previous
            configuration then stays active.
    """
    _router.configure(root)


def init_from_xml_string(text: str | bytes) -> None:
    """Configure the default router from an XML document."""
    init(parse_xml_string(text))


def init_from_xml_file(path: str | os.PathLike[str]) -> None:
    """Configure the default router from an XML file."""
    init(parse_xml_file(path))


def get_logger(severity: str) -> Logger:
    """Return the default router's logger for severity."""
    return _router.logger(severity)


def flush() -> None:
    """Flush every writer tree of the default router.

    Raises:
        Exception: The first failure raised by a writer, after every tree
            was flushed.
    """
    _router.flush()


def close() -> None:
    """Flush, release and detach every writer tree of the default router."""
    _router.close()


def _emit(severity: str, message: str) -> None:
    try:
        # stacklevel 3: _emit -> public function -> application code
        _router.logger(severity).output(message, stacklevel=3)
    except Exception:
        logger.warning("failed to write %s record", severity, exc_info=True)


def _join(values: tuple[object, ...]) -> str:
    return " ".join(str(v) for v in values)


def _format(fmt: str, args: tuple[object, ...]) -> str:
    return fmt % args if args else fmt


def trace(*values: object) -> None:
    """Write the space separated values to the trace tree."""
    _emit("trace", _join(values))


def tracef(fmt: str, *args: object) -> None:
    """Write ``fmt % args`` to the trace tree."""
    _emit("trace", _format(fmt, args))


def debug(*values: object) -> None:
    """Write the space separated values to the debug tree."""
    _emit("debug", _join(values))


def debugf(fmt: str, *args: object) -> None:
    """Write ``fmt % args`` to the debug tree."""
    _emit("debug", _format(fmt, args))


def info(*values: object) -> None:
    """Write the space separated values to the info tree."""
    _emit("info", _join(values))


def infof(fmt: str, *args: object) -> None:
    """Write ``fmt % args`` to the info tree."""
    _emit("info", _format(fmt, args))


def warn(*values: object) -> None:
    """Write the space separated values to the warn tree."""
    _emit("warn", _join(values))


def warnf(fmt: str, *args: object) -> None:
    """Write ``fmt % args`` to the warn tree."""
    _emit("warn", _format(fmt, args))


def error(*values: object) -> None:
    """Write the space separated values to the error tree."""
    _emit("error", _join(values))


def errorf(fmt: str, *args: object) -> None:
    """Write ``fmt % args`` to the error tree."""
    _emit("error", _format(fmt, args))


def critical(*values: object) -> None:
    """Write the space separated values to the critical tree."""
    _emit("critical", _join(values))


def criticalf(fmt: str, *args: object) -> None:
    """Write ``fmt % args`` to the critical tree."""
    _emit("critical", _format(fmt, args))


def broadcast(*values: object) -> None:
    """Write the same record to all six severities."""
    message = _join(values)
    for severity in SEVERITIES:
        _emit(severity, message)


def broadcastf(fmt: str, *args: object) -> None:
    """Write ``fmt % args`` to all six severities."""
    message = _format(fmt, args)
    for severity in SEVERITIES:
        _emit(severity, message)


def fatal(*values: object) -> None:
    """Write a critical record, flush everything and exit with status 1."""
    _emit("critical", _join(values))
    _flush_quietly()
    raise SystemExit(1)


def panic(*values: object) -> None:
    """Write a critical record, flush everything and raise RuntimeError."""
    message = _join(values)
    _emit("critical", message)
    _flush_quietly()
    raise RuntimeError(message)


def _flush_quietly() -> None:
    try:
        _router.flush()
    except Exception:
        logger.warning("failed to flush log writers", exc_info=True)


atexit.register(_flush_quietly)
