from .animation_style import AnimationStyle
from .color_types import Scalar, RGBTuple, ColorLike, Glyph

__all__ = ["AnimationStyle", "Scalar", "RGBTuple", "ColorLike", "Glyph"]
