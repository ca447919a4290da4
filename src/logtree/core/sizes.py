"""Parsing of human readable byte sizes such as ``5M`` or ``512KiB``."""

import re

_SIZE_RE = re.compile(
    r"^\s*(?P<number>\d+(?:\.\d+)?)\s*(?:(?P<unit>[kmgtp])(?:i?b)?|b)?\s*$",
    re.IGNORECASE,
)

# Powers of 1024 per unit letter
_UNIT_EXPONENTS = {"": 0, "k": 1, "m": 2, "g": 3, "t": 4, "p": 5}


def parse_size(expression: str) -> int:
    """Convert a size expression to a number of bytes.

    Accepts a whole byte count ("1024", "1024B") or a number followed by a
    unit letter K, M, G, T or P, optionally suffixed with "B" or "iB"
    ("5M", "1.5GB", "512KiB"). Units are case-insensitive powers of 1024.
    Fractional byte counts without a unit letter are rejected.

    Args:
        expression: The size expression.

    Returns:
        Size in bytes, always >= 1.

    Raises:
        ValueError: If the expression is malformed or not positive.
    """
    match = _SIZE_RE.match(expression)
    if match is None:
        raise ValueError(f"invalid size expression [{expression}]")
    number = match.group("number")
    unit = (match.group("unit") or "").lower()
    if not unit and "." in number:
        raise ValueError(f"fractional byte count [{expression}]")
    exponent = _UNIT_EXPONENTS[unit]
    size = int(float(number) * 1024**exponent)
    if size < 1:
        raise ValueError(f"size must be positive, got [{expression}]")
    return size
