"""
Character position mapping.

Each animation style maps ``(char_index, text_length, spread, tick, speed)``
to a scalar gradient position. Positions are unbounded; the sampler wraps them
around the palette. None of these functions validate their inputs.
"""
from __future__ import annotations
import math
from typing import Callable, Dict

import numpy as np

from ..types.animation_style import AnimationStyle

PositionFunction = Callable[[int, int, float, int, float], float]

BREATHE_HARMONIC = 2.1
BREATHE_PRIMARY_WEIGHT = 0.7
BREATHE_HARMONIC_WEIGHT = 0.3


def wave_position(char_index: int, text_length: int, spread: float, tick: int, speed: float) -> float:
    return (char_index * spread) - (tick * speed)


def pulse_position(char_index: int, text_length: int, spread: float, tick: int, speed: float) -> float:
    # (n - 1) / 2 is a half index for even lengths; keep it unrounded
    distance_from_center = abs(char_index - (text_length - 1) / 2.0)
    return (distance_from_center * spread) - (tick * speed)


def breathe_position(char_index: int, text_length: int, spread: float, tick: int, speed: float) -> float:
    time_offset = tick * speed
    wave1 = math.sin(time_offset)
    wave2 = math.sin(time_offset * BREATHE_HARMONIC)

    normalized1 = (wave1 + 1.0) / 2.0
    normalized2 = (wave2 + 1.0) / 2.0

    return (normalized1 * BREATHE_PRIMARY_WEIGHT) + (normalized2 * BREATHE_HARMONIC_WEIGHT)


def flow_position(char_index: int, text_length: int, spread: float, tick: int, speed: float) -> float:
    # Same sweep as WAVE; the caller's tick source is what makes it finer.
    return (char_index * spread) - (tick * speed)


POSITION_FUNCTIONS: Dict[AnimationStyle, PositionFunction] = {
    AnimationStyle.WAVE: wave_position,
    AnimationStyle.PULSE: pulse_position,
    AnimationStyle.BREATHE: breathe_position,
    AnimationStyle.FLOW: flow_position,
}


def position(
    style: AnimationStyle,
    char_index: int,
    text_length: int,
    spread: float,
    tick: int,
    speed: float,
) -> float:
    """
    Compute the gradient position of one character.

    Args:
        style: Animation style selecting the formula
        char_index: 0-based index of the character
        text_length: Length of the whole text
        spread: How stretched the gradient is along the text
        tick: Current animation tick (any integer)
        speed: How far the gradient moves per tick

    Returns:
        Unbounded gradient position (BREATHE stays in [0, 1])
    """
    return POSITION_FUNCTIONS[AnimationStyle(style)](char_index, text_length, spread, tick, speed)


def positions(
    style: AnimationStyle,
    text_length: int,
    spread: float,
    tick: int,
    speed: float,
) -> np.ndarray:
    """
    Vectorized :func:`position` for every index of a text.

    Returns:
        float64 array of shape ``(text_length,)``
    """
    style = AnimationStyle(style)
    offset = tick * speed
    indices = np.arange(text_length, dtype=np.float64)

    if style is AnimationStyle.BREATHE:
        return np.full(text_length, breathe_position(0, text_length, spread, tick, speed), dtype=np.float64)
    if style is AnimationStyle.PULSE:
        return (np.abs(indices - (text_length - 1) / 2.0) * spread) - offset
    return (indices * spread) - offset
