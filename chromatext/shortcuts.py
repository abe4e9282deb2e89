"""One-call helpers that build a gradient and render it to a rich ``Text``."""
from __future__ import annotations
import warnings
from typing import Optional, Sequence, Union

from rich.text import Text

from .gradients.gradient_text import GradientText
from .types.animation_style import AnimationStyle
from .types.color_types import ColorLike


def gradient_text(text: str, *colors: ColorLike) -> GradientText:
    """Gradient over ``text`` with default style, speed and spread."""
    return GradientText.builder().text(text).colors(*colors).build()


def _render_preset(name: str, text: str, tick: Optional[int]) -> Text:
    gradient = GradientText.from_preset(name, text)
    if tick is None:
        return gradient.generate_static()
    return gradient.generate(tick)


def rainbow(text: str, tick: Optional[int] = None) -> Text:
    """Rainbow-colored text; static when ``tick`` is None."""
    return _render_preset("rainbow", text, tick)


def fire(text: str, tick: Optional[int] = None) -> Text:
    return _render_preset("fire", text, tick)


def ocean(text: str, tick: Optional[int] = None) -> Text:
    return _render_preset("ocean", text, tick)


def with_gradient(
    text: Union[str, Text],
    colors: Sequence[ColorLike],
    tick: int,
    style: Union[AnimationStyle, str] = AnimationStyle.WAVE,
) -> Text:
    """
    Re-color existing text with an animated gradient.

    Only the plain characters are kept. Any spans or base style already on a
    rich ``Text`` are replaced, and a ``UserWarning`` says so.
    """
    if isinstance(text, Text):
        if text.spans or text.style:
            warnings.warn(
                "with_gradient discards the existing styles of the text",
                UserWarning,
                stacklevel=2,
            )
        text = text.plain
    return GradientText.builder().text(text).colors(*colors).style(style).build().generate(tick)
