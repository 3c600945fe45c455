"""Hex color parsing and RGB conversion."""

from __future__ import annotations

import re

# Accepted user input: 3 or 6 hex digits, no leading "#"
HEX_PATTERN = re.compile(r"^([0-9A-F]{3}){1,2}$", re.IGNORECASE)

_SHORTHAND_LENGTH = 3
_MAX_CHANNEL = 255


def is_valid_hex(value: str) -> bool:
    """Check whether a user-supplied value is a 3- or 6-digit hex color."""
    return HEX_PATTERN.match(value.strip()) is not None


def normalize_hex(value: str) -> str:
    """Normalize a hex color to six upper-case digits without "#".

    Shorthand values are expanded digit by digit, so "36f" becomes "3366FF".

    Args:
        value: Hex color, optionally prefixed with "#".

    Returns:
        The six-digit hex string.

    Raises:
        ValueError: If the value is not a 3- or 6-digit hex color.
    """
    digits = value.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if not HEX_PATTERN.match(digits):
        msg = f"Invalid hex color: {value!r}"
        raise ValueError(msg)
    if len(digits) == _SHORTHAND_LENGTH:
        digits = "".join(ch * 2 for ch in digits)
    return digits.upper()


def parse_hex(value: str) -> tuple[int, int, int]:
    """Split a hex color into its red, green and blue bytes."""
    digits = normalize_hex(value)
    return (
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def hex_to_rgb(value: str) -> str:
    """Convert a hex color to a space-separated decimal triple.

    This is the value format CSS expects inside ``rgb(var(...) / <alpha>)``.

    Examples:
        >>> hex_to_rgb("#3366FF")
        '51 102 255'
    """
    r, g, b = parse_hex(value)
    return f"{r} {g} {b}"


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format RGB channels as a lower-case ``#rrggbb`` string."""
    for channel in (r, g, b):
        if not 0 <= channel <= _MAX_CHANNEL:
            msg = f"RGB channel out of range: {channel}"
            raise ValueError(msg)
    return f"#{r:02x}{g:02x}{b:02x}"
