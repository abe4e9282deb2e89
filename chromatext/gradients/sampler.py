"""
Cyclic palette sampling.

A palette is treated as a closed loop of colors: position ``k`` lands exactly
on ``palette[k % len(palette)]`` and positions in between are blended between
neighbours using :func:`smoother_step` easing.

Rounding rule: blended channels are rounded half to even (``round`` for
scalars, ``np.round`` for arrays), so both paths agree bit for bit.
"""
from __future__ import annotations
import math
from typing import Sequence, Union

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import clamp

from ..colors.rgb import ColorRGB
from ..errors import InvalidPaletteError
from ..types.color_types import CHANNEL_MAX, CHANNEL_MIN, RGBTuple

PaletteInput = Sequence[Union[ColorRGB, RGBTuple]]


def _as_color(color: Union[ColorRGB, RGBTuple]) -> ColorRGB:
    return color if isinstance(color, ColorRGB) else ColorRGB(color)


def _check_palette(palette: PaletteInput) -> int:
    size = len(palette)
    if size == 0:
        raise InvalidPaletteError("Color palette cannot be empty")
    return size


def smoother_step(t: float) -> float:
    """
    Perlin's quintic easing ``6t^5 - 15t^4 + 10t^3``.

    Input is clamped to [0, 1]. First and second derivatives vanish at both
    ends, so consecutive palette segments join without a visible kink.
    """
    t = float(clamp(t, 0.0, 1.0))
    return t * t * t * (t * (t * 6 - 15) + 10)


def lerp_channel(a: int, b: int, t: float) -> int:
    return int(clamp(round(a + (b - a) * t), CHANNEL_MIN, CHANNEL_MAX))


def lerp_color(color1: Union[ColorRGB, RGBTuple], color2: Union[ColorRGB, RGBTuple], t: float) -> ColorRGB:
    """Blend two colors channel by channel (``t=0`` gives ``color1``, ``t=1`` gives ``color2``)."""
    c1 = _as_color(color1)
    c2 = _as_color(color2)
    return ColorRGB(tuple(lerp_channel(a, b, t) for a, b in zip(c1.value, c2.value)))


def sample(palette: PaletteInput, position: float) -> ColorRGB:
    """
    Color at ``position`` along a cyclic palette.

    Args:
        palette: Ordered colors; at least one
        position: Any finite real, wrapped into ``[0, len(palette))``

    Returns:
        Interpolated color

    Raises:
        InvalidPaletteError: if the palette is empty
    """
    size = _check_palette(palette)
    if size == 1:
        return _as_color(palette[0])

    wrapped = position % size
    if wrapped < 0:
        wrapped += size

    whole = math.floor(wrapped)
    index1 = whole % size
    index2 = (index1 + 1) % size
    fraction = wrapped - whole

    return lerp_color(palette[index1], palette[index2], smoother_step(fraction))


def smoother_step_array(t: NDArray) -> NDArray:
    t = np.clip(np.asarray(t, dtype=np.float64), 0.0, 1.0)
    return t * t * t * (t * (t * 6 - 15) + 10)


def sample_array(palette: PaletteInput, positions: NDArray) -> NDArray:
    """
    Vectorized :func:`sample`.

    Args:
        palette: Ordered colors; at least one
        positions: 1D array of positions

    Returns:
        ``(N, 3)`` uint8 array; row ``i`` equals ``sample(palette, positions[i]).value``
    """
    size = _check_palette(palette)
    positions = np.asarray(positions, dtype=np.float64).reshape(-1)
    colors = np.array([_as_color(c).value for c in palette], dtype=np.float64)

    if size == 1:
        return np.repeat(colors, positions.shape[0], axis=0).astype(np.uint8)

    wrapped = np.mod(positions, size)
    wrapped = np.where(wrapped < 0, wrapped + size, wrapped)

    whole = np.floor(wrapped)
    index1 = whole.astype(np.int64) % size
    index2 = (index1 + 1) % size
    fraction = wrapped - whole

    smoothed = smoother_step_array(fraction)[:, None]
    start = colors[index1]
    end = colors[index2]
    blended = np.round(start + (end - start) * smoothed)
    return np.clip(blended, CHANNEL_MIN, CHANNEL_MAX).astype(np.uint8)
