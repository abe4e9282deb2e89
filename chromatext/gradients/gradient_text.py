from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple, Union

import numpy as np

from ..colors.parse import parse_color, parse_colors
from ..colors.rgb import ColorRGB
from ..defaults import (
    DEFAULT_ITALIC,
    DEFAULT_SPEED,
    DEFAULT_SPREAD,
    DEFAULT_STYLE,
    MIN_PALETTE_SIZE,
    PRESETS,
)
from ..errors import ConfigValidationError
from ..render import to_rich_text
from ..types.animation_style import AnimationStyle
from ..types.color_types import ColorLike, Glyph
from ..utils import value_or_default
from .position import position, positions
from .sampler import sample, sample_array

Renderer = Callable[[List[Glyph]], Any]


def _coerce_style(style: Union[AnimationStyle, str]) -> AnimationStyle:
    try:
        return AnimationStyle.from_name(style)
    except ValueError as e:
        raise ConfigValidationError(str(e)) from None


def _check_positive(name: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise ConfigValidationError(f"{name} must be a number (provided: {value!r})")
    if not value > 0 or not math.isfinite(value):
        raise ConfigValidationError(f"{name} must be a finite positive number (provided: {value})")
    return float(value)


@dataclass(frozen=True)
class GradientText:
    """
    Immutable animated gradient configuration for a piece of text.

    Colors may be given as :class:`ColorRGB`, color strings (``"red"``,
    ``"#FF5733"``) or ``(r, g, b)`` triples; they are normalized to a tuple of
    :class:`ColorRGB` on construction.

    Raises:
        ConfigValidationError: on empty text, fewer than two colors, or a
            non-positive or non-finite speed or spread
        ColorParseError: if a color string cannot be parsed
    """
    text: str
    colors: Tuple[ColorRGB, ...]
    style: AnimationStyle = DEFAULT_STYLE
    speed: float = DEFAULT_SPEED
    spread: float = DEFAULT_SPREAD
    italic: bool = DEFAULT_ITALIC

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise ConfigValidationError(f"Text must be a string (provided: {self.text!r})")
        if not self.text:
            raise ConfigValidationError("Text cannot be empty")
        if isinstance(self.colors, (str, ColorRGB)):
            raise ConfigValidationError("colors must be a sequence of colors, not a single color")

        colors = tuple(parse_color(c) for c in self.colors)
        if len(colors) < MIN_PALETTE_SIZE:
            raise ConfigValidationError(
                f"At least {MIN_PALETTE_SIZE} colors required for gradient (provided: {len(colors)})"
            )

        # frozen dataclass: normalized values go through object.__setattr__
        object.__setattr__(self, "colors", colors)
        object.__setattr__(self, "style", _coerce_style(self.style))
        object.__setattr__(self, "speed", _check_positive("Speed", self.speed))
        object.__setattr__(self, "spread", _check_positive("Spread", self.spread))
        object.__setattr__(self, "italic", bool(self.italic))

    def __len__(self) -> int:
        return len(self.text)

    # ------------------ ANIMATED ------------------
    def position_of(self, char_index: int, tick: int) -> float:
        return position(self.style, char_index, len(self.text), self.spread, tick, self.speed)

    def colors_at(self, tick: int) -> List[ColorRGB]:
        """Color of every character at ``tick``."""
        return [sample(self.colors, self.position_of(i, tick)) for i in range(len(self.text))]

    def color_array(self, tick: int) -> np.ndarray:
        """Vectorized :meth:`colors_at` as a ``(len(text), 3)`` uint8 array."""
        pos = positions(self.style, len(self.text), self.spread, tick, self.speed)
        return sample_array(self.colors, pos)

    def glyphs(self, tick: int) -> List[Glyph]:
        return [(char, color, self.italic) for char, color in zip(self.text, self.colors_at(tick))]

    def generate(self, tick: int, renderer: Optional[Renderer] = None) -> Any:
        """Render the frame for ``tick``; a rich ``Text`` unless another renderer is given."""
        renderer = value_or_default(renderer, to_rich_text)
        return renderer(self.glyphs(tick))

    # ------------------ STATIC ------------------
    def static_colors(self, offset: float = 0.0) -> List[ColorRGB]:
        """Non-animated gradient; ignores the style."""
        return [sample(self.colors, (i * self.spread) - offset) for i in range(len(self.text))]

    def static_glyphs(self, offset: float = 0.0) -> List[Glyph]:
        return [(char, color, self.italic) for char, color in zip(self.text, self.static_colors(offset))]

    def generate_static(self, offset: float = 0.0, renderer: Optional[Renderer] = None) -> Any:
        renderer = value_or_default(renderer, to_rich_text)
        return renderer(self.static_glyphs(offset))

    # ------------------ COPIES ------------------
    def replace(self, **changes: Any) -> "GradientText":
        """Copy with the given fields changed; the copy is validated again."""
        return dataclasses.replace(self, **changes)

    def to_builder(self) -> "GradientTextBuilder":
        return (
            GradientTextBuilder()
            .text(self.text)
            .colors(*self.colors)
            .style(self.style)
            .speed(self.speed)
            .spread(self.spread)
            .italic(self.italic)
        )

    @classmethod
    def builder(cls) -> "GradientTextBuilder":
        return GradientTextBuilder()

    # ------------------ PRESETS ------------------
    @classmethod
    def from_preset(cls, name: str, text: str) -> "GradientText":
        """Build one of the named presets (``rainbow``, ``fire``, ``ocean``)."""
        key = name.strip().lower()
        preset = PRESETS.get(key)
        if preset is None:
            known = ", ".join(sorted(PRESETS))
            raise ConfigValidationError(f"Unknown preset: {name!r} (expected one of {known})")
        return cls(
            text=text,
            colors=parse_colors(*preset["colors"]),
            style=preset["style"],
            speed=preset["speed"],
            spread=preset["spread"],
        )

    @classmethod
    def rainbow(cls, text: str) -> "GradientText":
        return cls.from_preset("rainbow", text)

    @classmethod
    def fire(cls, text: str) -> "GradientText":
        return cls.from_preset("fire", text)

    @classmethod
    def ocean(cls, text: str) -> "GradientText":
        return cls.from_preset("ocean", text)


class GradientTextBuilder:
    """
    Chainable construction of :class:`GradientText`.

    >>> gt = GradientText.builder().text("Hello").colors("red", "#0000FF").speed(0.2).build()
    >>> gt.speed
    0.2
    """

    def __init__(self) -> None:
        self._text = ""
        self._colors: List[ColorRGB] = []
        self._style = DEFAULT_STYLE
        self._speed = DEFAULT_SPEED
        self._spread = DEFAULT_SPREAD
        self._italic = DEFAULT_ITALIC

    def text(self, text: str) -> "GradientTextBuilder":
        self._text = text
        return self

    def colors(self, *colors: ColorLike) -> "GradientTextBuilder":
        """Replace the palette. A single list/tuple of colors is unpacked."""
        self._colors = list(parse_colors(*_flatten(colors)))
        return self

    def add_colors(self, *colors: ColorLike) -> "GradientTextBuilder":
        self._colors.extend(parse_colors(*_flatten(colors)))
        return self

    def style(self, style: Union[AnimationStyle, str]) -> "GradientTextBuilder":
        self._style = _coerce_style(style)
        return self

    def speed(self, speed: float) -> "GradientTextBuilder":
        self._speed = _check_positive("Speed", speed)
        return self

    def spread(self, spread: float) -> "GradientTextBuilder":
        self._spread = _check_positive("Spread", spread)
        return self

    def italic(self, italic: bool = True) -> "GradientTextBuilder":
        self._italic = bool(italic)
        return self

    def build(self) -> GradientText:
        if not self._text:
            raise ConfigValidationError("Text must be set before building")
        return GradientText(
            text=self._text,
            colors=tuple(self._colors),
            style=self._style,
            speed=self._speed,
            spread=self._spread,
            italic=self._italic,
        )


def _flatten(colors: Tuple[Any, ...]) -> Tuple[Any, ...]:
    # colors([c1, c2]) and colors(c1, c2) are equivalent; an RGB triple is one color
    if len(colors) == 1 and isinstance(colors[0], list):
        return tuple(colors[0])
    if len(colors) == 1 and isinstance(colors[0], tuple) and all(
        isinstance(c, (ColorRGB, str, tuple)) for c in colors[0]
    ):
        return colors[0]
    return tuple(colors)
