"""Binds the severity sections of a configuration to loggers.

A configuration root looks like::

    <logs>
        <debug prefix="[DEBUG]" flag="date|time|shortfile">
            <buffer size="10">
                <rotate dir="/var/log/app" size="5M" />
            </buffer>
        </debug>
        <info>
            <console output="stdout" foreground="green" />
        </info>
    </logs>

Each severity section becomes a CompositeWriter over the section's writer
nodes. Severities without a section write to a null writer.
"""

import logging
import threading
from collections.abc import Mapping

from logtree.core.builder import build_writer
from logtree.core.composite import CompositeWriter
from logtree.core.containers import ContainerSet
from logtree.core.errors import ConfigShapeError
from logtree.core.formatting import LogFlag, parse_flags
from logtree.core.logger import Logger
from logtree.core.models import ROOT_NAME, SEVERITIES, ConfigNode
from logtree.core.registry import WriterRegistry

logger = logging.getLogger(__name__)

_SECTION_ATTRS = frozenset({"prefix", "flag"})


class NullWriter:
    """Writer that discards everything."""

    def write(self, data: bytes) -> int:
        return len(data)


class LevelRouter:
    """Owns the six severity loggers and the writer trees behind them.

    Example:
        ```python
        router = LevelRouter(create_default_registry())
        router.configure(parse_xml_file("logs.xml"))
        router.logger("info").print("service started")
        router.flush()
        ```
    """

    def __init__(self, registry: WriterRegistry) -> None:
        """Initialize the router with every severity discarding output.

        Args:
            registry: Registry used to resolve writer type names.
        """
        self.registry = registry
        self._lock = threading.Lock()
        self._containers = ContainerSet()
        self._loggers: dict[str, Logger] = _discarding_loggers()
        self._bound: tuple[str, ...] = ()

    def configure(self, root: ConfigNode) -> None:
        """Replace the active configuration with the one described by root.

        The new writer trees are fully built before anything is touched. On
        any failure the active configuration stays in place. On success the
        new loggers are installed first, then the superseded trees are
        flushed and closed outside the lock.

        Raises:
            LogConfigError: If root is malformed or any writer fails to build.
        """
        sections = _validate_root(root)
        loggers = _discarding_loggers()
        containers = ContainerSet()
        for severity, section in sections.items():
            bound = self._bind_section(section)
            loggers[severity] = bound
            containers.add(bound.writer)
        bound_names = tuple(s for s in SEVERITIES if s in sections)

        with self._lock:
            previous = self._containers
            self._containers = containers
            self._loggers = loggers
            self._bound = bound_names
        _release(previous)
        logger.debug("configured severities: %s", ", ".join(bound_names) or "none")

    def logger(self, severity: str) -> Logger:
        """Return the logger bound to severity.

        Raises:
            KeyError: If severity is not one of SEVERITIES.
        """
        with self._lock:
            return self._loggers[severity]

    def bound(self) -> tuple[str, ...]:
        """Severities that have a configured writer tree."""
        with self._lock:
            return self._bound

    def flush(self) -> None:
        """Flush every bound writer tree.

        Raises:
            Exception: The first failure raised by a writer, after every tree
                was flushed.
        """
        with self._lock:
            containers = self._containers
        containers.flush()

    def close(self) -> None:
        """Flush and release every writer tree and discard further output."""
        with self._lock:
            previous = self._containers
            self._containers = ContainerSet()
            self._loggers = _discarding_loggers()
            self._bound = ()
        try:
            previous.close()
        finally:
            previous.clear()

    def _bind_section(self, section: ConfigNode) -> Logger:
        flags = LogFlag.STD
        if "flag" in section.attrs:
            flags = parse_flags(section.attrs["flag"])
        root = CompositeWriter()
        for child in section.children.values():
            root.add(build_writer(child, self.registry))
        return Logger(root, prefix=section.attrs.get("prefix", ""), flags=flags)


def _discarding_loggers() -> dict[str, Logger]:
    null = NullWriter()
    return {severity: Logger(null) for severity in SEVERITIES}


def _validate_root(root: ConfigNode) -> Mapping[str, ConfigNode]:
    """Check the root shape and map each severity to its section."""
    if root.name != ROOT_NAME:
        raise ConfigShapeError(
            f"root element must be <{ROOT_NAME}>, got <{root.name}>"
        )
    if root.attrs:
        raise ConfigShapeError(f"<{ROOT_NAME}> does not accept attributes")
    if len(root.children) > len(SEVERITIES):
        raise ConfigShapeError(
            f"at most {len(SEVERITIES)} severity sections are allowed, "
            f"got {len(root.children)}"
        )

    sections: dict[str, ConfigNode] = {}
    for name, section in root.children.items():
        severity = name.lower()
        if severity not in SEVERITIES:
            raise ConfigShapeError(f"unknown severity section <{name}>")
        if severity in sections:
            raise ConfigShapeError(f"severity [{severity}] is configured twice")
        unknown = set(section.attrs) - _SECTION_ATTRS
        if unknown:
            raise ConfigShapeError(
                f"<{name}> has unknown attributes: {', '.join(sorted(unknown))}"
            )
        if not section.children:
            raise ConfigShapeError(f"<{name}> must contain at least one writer")
        sections[severity] = section
    return sections


def _release(containers: ContainerSet) -> None:
    """Flush and close a superseded configuration."""
    try:
        containers.close()
    except Exception:
        logger.warning("failed to release superseded writers", exc_info=True)
    finally:
        containers.clear()
