"""Standard stream writer with optional ANSI colours."""

import sys
from collections.abc import Mapping
from typing import TextIO

# ANSI SGR colour offsets; foreground = 30 + n, background = 40 + n
COLORS = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "default": 9,
}

OUTPUTS = ("stdout", "stderr")

_RESET = "\033[0m"


class ConsoleWriter:
    """Writes payloads to stdout or stderr.

    The stream is looked up on ``sys`` at every write, so redirections of
    sys.stdout/sys.stderr made after construction are honoured.
    """

    def __init__(
        self,
        output: str = "stderr",
        foreground: str = "default",
        background: str = "default",
    ) -> None:
        """Initialize the writer.

        Args:
            output: "stdout" or "stderr".
            foreground: Text colour name (see COLORS).
            background: Background colour name (see COLORS).

        Raises:
            ValueError: On an unknown output or colour name.
        """
        if output not in OUTPUTS:
            raise ValueError(f"output must be one of {OUTPUTS}, got [{output}]")
        self.output = output
        self.foreground = _color(foreground, "foreground")
        self.background = _color(background, "background")
        self._start = _sgr(self.foreground, self.background)

    @classmethod
    def from_attrs(cls, attrs: Mapping[str, str]) -> "ConsoleWriter":
        """Construct from ``output``, ``foreground`` and ``background``."""
        return cls(
            output=attrs.get("output", "stderr"),
            foreground=attrs.get("foreground", "default"),
            background=attrs.get("background", "default"),
        )

    @property
    def stream(self) -> TextIO:
        return getattr(sys, self.output)

    def write(self, data: bytes) -> int:
        text = data.decode("utf-8", errors="replace")
        if self._start:
            text = f"{self._start}{text}{_RESET}"
        self.stream.write(text)
        return len(data)

    def flush(self) -> None:
        self.stream.flush()


def _color(name: str, attribute: str) -> str:
    key = name.strip().lower()
    if key not in COLORS:
        raise ValueError(f"unknown {attribute} colour [{name}]")
    return key


def _sgr(foreground: str, background: str) -> str:
    """Escape sequence selecting the colours, empty when both are default."""
    codes = []
    if foreground != "default":
        codes.append(str(30 + COLORS[foreground]))
    if background != "default":
        codes.append(str(40 + COLORS[background]))
    if not codes:
        return ""
    return f"\033[{';'.join(codes)}m"
