"""
Chromatext Color Classes
========================

Immutable 8-bit RGB colors plus the helpers that build them from
human-readable input.

>>> from chromatext.colors import ColorRGB, parse_color
>>> parse_color("#FF8000") == ColorRGB((255, 128, 0))
True
>>> parse_color("gold").value
(255, 170, 0)
"""

from .color_base import ColorBase
from .rgb import ColorRGB, RGB
from .named import NAMED_COLORS
from .parse import from_hex, from_rgb, from_name, parse_color, parse_colors


__all__ = [
    "ColorBase",
    "ColorRGB",
    "RGB",
    "NAMED_COLORS",
    "from_hex",
    "from_rgb",
    "from_name",
    "parse_color",
    "parse_colors",
]
