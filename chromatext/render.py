"""
Output renderers.

A renderer takes ``(char, color, italic)`` glyphs, as produced by
:meth:`GradientText.glyphs`, and turns them into something displayable.
"""
from __future__ import annotations
from typing import Iterable, Tuple

import numpy as np
from PIL import Image
from rich.color import Color as RichColor
from rich.console import Console
from rich.markup import escape
from rich.style import Style
from rich.text import Text

from .types.color_types import Glyph


def glyph_style(color, italic: bool) -> Style:
    r, g, b = color.value
    return Style(color=RichColor.from_rgb(r, g, b), italic=italic)


def to_rich_text(glyphs: Iterable[Glyph]) -> Text:
    """One styled span per character."""
    result = Text()
    for char, color, italic in glyphs:
        result.append(char, style=glyph_style(color, italic))
    return result


def to_markup(glyphs: Iterable[Glyph]) -> str:
    """Rich console markup, e.g. ``[#ff0000]H[/][italic #00ff00]i[/]``."""
    parts = []
    for char, color, italic in glyphs:
        tag = color.hex.lower()
        if italic:
            tag = f"italic {tag}"
        parts.append(f"[{tag}]{escape(char)}[/]")
    return "".join(parts)


def to_ansi(glyphs: Iterable[Glyph]) -> str:
    """24-bit ANSI escape string, reset at the end."""
    console = Console(force_terminal=True, color_system="truecolor", no_color=False, legacy_windows=False)
    with console.capture() as capture:
        console.print(to_rich_text(glyphs), end="", soft_wrap=True)
    return capture.get()


def to_image(glyphs: Iterable[Glyph], cell_size: Tuple[int, int] = (8, 16)) -> Image.Image:
    """
    Swatch strip with one solid cell per character.

    Args:
        glyphs: Rendered glyphs; characters and italic flags are not drawn
        cell_size: (width, height) of each cell in pixels

    Returns:
        RGB image of size ``(len(glyphs) * width, height)``
    """
    width, height = cell_size
    if width <= 0 or height <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size!r}")

    colors = np.array([color.value for _, color, _ in glyphs], dtype=np.uint8).reshape(-1, 3)
    if colors.shape[0] == 0:
        raise ValueError("Cannot render an image without glyphs")

    row = np.repeat(colors, width, axis=0)
    strip = np.repeat(row[None, :, :], height, axis=0)
    return Image.fromarray(np.ascontiguousarray(strip))
