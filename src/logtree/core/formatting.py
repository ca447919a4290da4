"""Output flags and log line rendering."""

import enum
import os
import re
from datetime import datetime, timezone

from logtree.core.errors import InvalidFlagError


class LogFlag(enum.IntFlag):
    """Header fields written in front of each log line."""

    NONE = 0
    DATE = 1
    TIME = 2
    MICROSECONDS = 4
    LONGFILE = 8
    SHORTFILE = 16
    UTC = 32
    STD = DATE | TIME


_FLAG_TOKENS = {
    "date": LogFlag.DATE,
    "time": LogFlag.TIME,
    "microseconds": LogFlag.MICROSECONDS,
    "longfile": LogFlag.LONGFILE,
    "shortfile": LogFlag.SHORTFILE,
    "utc": LogFlag.UTC,
    "std": LogFlag.STD,
}

_TOKEN_SEPARATOR = re.compile(r"[|,]")


def parse_flags(text: str) -> LogFlag:
    """Parse a flag expression such as ``"date|time|shortfile"``.

    Tokens are separated by ``|`` or ``,`` and matched case-insensitively.
    An empty or blank expression yields no flags.

    Raises:
        InvalidFlagError: On an unrecognised token.
    """
    flags = LogFlag.NONE
    for raw in _TOKEN_SEPARATOR.split(text):
        token = raw.strip().lower()
        if not token:
            continue
        if token not in _FLAG_TOKENS:
            raise InvalidFlagError(raw.strip())
        flags |= _FLAG_TOKENS[token]
    return flags


def format_line(
    prefix: str,
    flags: LogFlag,
    message: str,
    now: datetime,
    caller: tuple[str, int] | None = None,
) -> str:
    """Render one log line.

    Args:
        prefix: Literal text written first.
        flags: Header fields to include.
        message: The message body.
        now: Timestamp of the record. Converted to UTC when flags has UTC.
        caller: (filename, line) of the logging call, used by file flags.

    Returns:
        The line, always ending with a newline.
    """
    parts = [prefix]
    if flags & (LogFlag.DATE | LogFlag.TIME | LogFlag.MICROSECONDS):
        if flags & LogFlag.UTC:
            now = now.astimezone(timezone.utc)
        if flags & LogFlag.DATE:
            parts.append(now.strftime("%Y/%m/%d "))
        if flags & (LogFlag.TIME | LogFlag.MICROSECONDS):
            parts.append(now.strftime("%H:%M:%S"))
            if flags & LogFlag.MICROSECONDS:
                parts.append(f".{now.microsecond:06d}")
            parts.append(" ")
    if flags & (LogFlag.SHORTFILE | LogFlag.LONGFILE):
        filename, lineno = caller or ("???", 0)
        if flags & LogFlag.SHORTFILE:
            filename = os.path.basename(filename)
        parts.append(f"{filename}:{lineno}: ")
    parts.append(message)
    if not message.endswith("\n"):
        parts.append("\n")
    return "".join(parts)
