"""Per-severity logger that renders lines and hands them to a writer."""

import sys
from datetime import datetime

from logtree.core.formatting import LogFlag, format_line
from logtree.core.ports import Writer

_FILE_FLAGS = LogFlag.LONGFILE | LogFlag.SHORTFILE


class Logger:
    """Formats messages with a prefix and header flags and writes them.

    Write failures propagate to the caller. The runtime convenience functions
    are the place where such failures are reported instead of raised.
    """

    def __init__(
        self,
        writer: Writer,
        prefix: str = "",
        flags: LogFlag = LogFlag.STD,
    ) -> None:
        """Initialize the logger.

        Args:
            writer: Destination of every rendered line.
            prefix: Literal text written at the start of each line.
            flags: Header fields to include (default: date and time).
        """
        self.writer = writer
        self.prefix = prefix
        self.flags = flags

    def output(
        self,
        message: str,
        stacklevel: int = 1,
        caller: tuple[str, int] | None = None,
    ) -> int:
        """Render message as one line and write it.

        Args:
            message: The message body.
            stacklevel: How many frames above the caller of output() the
                logging call site is. Only used with file flags.
            caller: Explicit (filename, lineno) of the call site. When given,
                the stack is not inspected.

        Returns:
            Number of bytes accepted by the writer.
        """
        if caller is None and self.flags & _FILE_FLAGS:
            caller = _find_caller(stacklevel + 1)
        line = format_line(self.prefix, self.flags, message, datetime.now(), caller)
        return self.writer.write(line.encode("utf-8"))

    def print(self, *values: object, stacklevel: int = 1) -> int:
        """Write the space separated str() of values."""
        return self.output(" ".join(str(v) for v in values), stacklevel + 1)

    def printf(self, fmt: str, *args: object, stacklevel: int = 1) -> int:
        """Write ``fmt % args``."""
        message = fmt % args if args else fmt
        return self.output(message, stacklevel + 1)


def _find_caller(depth: int) -> tuple[str, int]:
    """Return (filename, lineno) of the frame depth levels above this one."""
    try:
        frame = sys._getframe(depth)
    except ValueError:
        return "???", 0
    return frame.f_code.co_filename, frame.f_lineno
