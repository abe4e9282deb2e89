from __future__ import annotations
from typing import TYPE_CHECKING, Tuple, Union

if TYPE_CHECKING:
    from ..colors.rgb import ColorRGB

Scalar = int | float
RGBTuple = Tuple[int, int, int]
ColorLike = Union["ColorRGB", str, RGBTuple]
Glyph = Tuple[str, "ColorRGB", bool]

CHANNEL_MIN = 0
CHANNEL_MAX = 255
