"""Python logging handler adapter for logtree.

This adapter bridges Python's standard library logging module to a
LevelRouter, so records emitted through ``logging`` end up in the writer
tree configured for their severity.
"""

import logging

from logtree.core.router import LevelRouter


def severity_for(levelno: int) -> str:
    """Map a logging level number onto a routing severity.

    Levels below DEBUG go to "trace"; anything between two standard levels
    goes to the lower one.
    """
    if levelno >= logging.CRITICAL:
        return "critical"
    if levelno >= logging.ERROR:
        return "error"
    if levelno >= logging.WARNING:
        return "warn"
    if levelno >= logging.INFO:
        return "info"
    if levelno >= logging.DEBUG:
        return "debug"
    return "trace"


class WriterHandler(logging.Handler):
    """Logging handler that writes records through a LevelRouter.

    The router's logger adds its own prefix and header flags; the handler's
    formatter only shapes the message part (default: ``%(message)s``).

    Example:
        ```python
        from logtree import WriterHandler, get_router

        logging.getLogger().addHandler(WriterHandler(get_router()))
        ```
    """

    def __init__(self, router: LevelRouter, level: int = logging.NOTSET) -> None:
        """Initialize the handler.

        Args:
            router: Router whose severity loggers receive the records.
            level: Minimum level handled.
        """
        super().__init__(level)
        self.router = router

    def emit(self, record: logging.LogRecord) -> None:
        """Write the formatted record to the logger for its severity."""
        try:
            message = self.format(record)
            log = self.router.logger(severity_for(record.levelno))
            log.output(message, caller=(record.pathname, record.lineno))
        except Exception:
            self.handleError(record)

    def flush(self) -> None:
        """Flush every writer tree of the router."""
        self.acquire()
        try:
            self.router.flush()
        finally:
            self.release()
