from __future__ import annotations
from typing import ClassVar, Tuple
import numpy as np
from .color_base import ColorBase


class ColorRGB(ColorBase):
    """
    Immutable 8-bit RGB color.

    Channels are coerced to ``int`` and clamped to [0, 255] on construction.

    >>> ColorRGB((255, 128, 0)).hex
    '#FF8000'
    >>> ColorRGB((300, -5, 12)).value
    (255, 0, 12)
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "rgb"
    _type: ClassVar[type] = int
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)

    @property
    def red(self) -> int:
        return self._value[0]

    @property
    def green(self) -> int:
        return self._value[1]

    @property
    def blue(self) -> int:
        return self._value[2]

    @property
    def hex(self) -> str:
        return "#{:02X}{:02X}{:02X}".format(*self._value)

    def to_int(self) -> int:
        """Pack into a single ``0xRRGGBB`` integer."""
        r, g, b = self._value
        return (r << 16) | (g << 8) | b

    @classmethod
    def from_int(cls, rgb: int) -> "ColorRGB":
        """Unpack a ``0xRRGGBB`` integer; bits above 24 are ignored."""
        return cls(((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF))

    def as_array(self) -> np.ndarray:
        return np.array(self._value, dtype=np.uint8)


RGB = ColorRGB
