"""
Color parsing
=============

Turns human-readable color descriptions into :class:`ColorRGB` values.

Accepted inputs
---------------
- Hex strings: ``"#FF5733"``, ``"FF5733"``, ``"0xFF5733"``
- Named colors (case-insensitive): ``"red"``, ``"Gold"``, ``"light_purple"``
- RGB triples: ``(255, 87, 51)``, ``"255, 87, 51"``, ``"rgb(255, 87, 51)"``
- Existing :class:`ColorRGB` instances, returned unchanged

Every failure raises :class:`ColorParseError` carrying the offending input.
"""
from __future__ import annotations
import re
from typing import Any, Optional, Tuple

import numpy as np

from ..errors import ColorParseError
from ..types.color_types import CHANNEL_MAX, CHANNEL_MIN
from .named import NAMED_COLORS
from .rgb import ColorRGB

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{6}")
_RGB_TRIPLE = re.compile(
    r"rgb\s*\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)"
    r"|(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})",
    re.IGNORECASE,
)
_CHANNEL_NAMES = ("Red", "Green", "Blue")


def from_hex(hex_string: str) -> ColorRGB:
    """Parse ``#RRGGBB``, ``RRGGBB`` or ``0xRRGGBB``."""
    cleaned = hex_string.strip()
    cleaned = cleaned.removeprefix("#").removeprefix("0x").removeprefix("0X")
    if len(cleaned) != 6:
        raise ColorParseError(hex_string, "Invalid hex color format (expected #RRGGBB or RRGGBB)")
    if not _HEX_DIGITS.fullmatch(cleaned):
        raise ColorParseError(hex_string, "Invalid hex color value")
    return ColorRGB.from_int(int(cleaned, 16))


def from_rgb(r: Any, g: Any, b: Any) -> ColorRGB:
    """Build a color from three integer components in [0, 255]; nothing is clamped."""
    for name, component in zip(_CHANNEL_NAMES, (r, g, b)):
        if isinstance(component, bool) or not isinstance(component, (int, np.integer)):
            raise ColorParseError((r, g, b), f"{name} component is not an integer")
        if not CHANNEL_MIN <= component <= CHANNEL_MAX:
            raise ColorParseError((r, g, b), f"{name} component out of range 0-255")
    return ColorRGB((r, g, b))


def from_name(name: str) -> Optional[ColorRGB]:
    """Look up a named color; ``None`` if the name is unknown."""
    return NAMED_COLORS.get(name.strip().lower())


def parse_color(value: Any) -> ColorRGB:
    """
    Parse a single color from any supported representation.

    Strings are tried as a named color first, then as hex, then as an
    ``r, g, b`` triple.

    Raises:
        ColorParseError: if ``value`` matches none of the supported forms.
    """
    if isinstance(value, ColorRGB):
        return value

    if isinstance(value, str):
        named = from_name(value)
        if named is not None:
            return named

        stripped = value.strip()
        if "," not in stripped and (stripped.startswith(("#", "0x", "0X")) or len(stripped) == 6):
            try:
                return from_hex(stripped)
            except ColorParseError as e:
                raise ColorParseError(value, "Invalid color format") from e

        match = _RGB_TRIPLE.fullmatch(stripped)
        if match is not None:
            r, g, b = (int(group) for group in match.groups() if group is not None)
            try:
                return from_rgb(r, g, b)
            except ColorParseError as e:
                raise ColorParseError(value, "Invalid color format") from e

        raise ColorParseError(
            value,
            "Unrecognized color format (use a named color like 'red' or hex like '#FF5733')",
        )

    if isinstance(value, (tuple, list, np.ndarray)) and len(value) == 3:
        return from_rgb(*value)

    raise ColorParseError(value, "Unsupported color value")


def parse_colors(*values: Any) -> Tuple[ColorRGB, ...]:
    """Parse every value with :func:`parse_color`, preserving order."""
    return tuple(parse_color(v) for v in values)
