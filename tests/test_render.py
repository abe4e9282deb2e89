import pytest
from PIL import Image
from rich.color import Color as RichColor
from rich.text import Text

from chromatext import ColorRGB, GradientText
from chromatext.render import to_ansi, to_image, to_markup, to_rich_text

RED = ColorRGB((255, 0, 0))
GREEN = ColorRGB((0, 255, 0))
BLUE = ColorRGB((0, 0, 255))

GLYPHS = [("R", RED, False), ("G", GREEN, False), ("B", BLUE, True)]


def test_rich_text_one_span_per_char():
    text = to_rich_text(GLYPHS)
    assert isinstance(text, Text)
    assert text.plain == "RGB"
    assert len(text.spans) == 3
    first, _, last = text.spans
    assert (first.start, first.end) == (0, 1)
    assert first.style.color == RichColor.from_rgb(255, 0, 0)
    assert not first.style.italic
    assert last.style.italic
    assert last.style.color.get_truecolor() == (0, 0, 255)


def test_markup():
    markup = to_markup(GLYPHS)
    assert markup == "[#ff0000]R[/][#00ff00]G[/][italic #0000ff]B[/]"
    assert Text.from_markup(markup).plain == "RGB"


def test_markup_escapes_brackets():
    gt = GradientText("Hi [x]", ("red", "blue"))
    assert Text.from_markup(to_markup(gt.glyphs(0))).plain == "Hi [x]"


def test_ansi_truecolor():
    out = to_ansi(GLYPHS)
    assert "38;2;255;0;0" in out
    assert "38;2;0;0;255" in out
    assert "\x1b[3;" in out
    assert "\x1b[0m" in out
    assert "R" in out and "G" in out and "B" in out


def test_image_strip():
    image = to_image(GLYPHS, cell_size=(4, 2))
    assert isinstance(image, Image.Image)
    assert image.size == (12, 2)
    assert image.mode == "RGB"
    assert image.getpixel((0, 0)) == (255, 0, 0)
    assert image.getpixel((5, 1)) == (0, 255, 0)
    assert image.getpixel((11, 0)) == (0, 0, 255)


def test_image_errors():
    with pytest.raises(ValueError):
        to_image([])
    with pytest.raises(ValueError):
        to_image(GLYPHS, cell_size=(0, 4))


def test_generate_with_each_renderer():
    gt = GradientText.fire("Blaze")
    assert gt.generate(3, renderer=to_image).size == (40, 16)
    assert isinstance(gt.generate(3, renderer=to_ansi), str)
    assert gt.generate(3, renderer=to_markup).count("[/]") == 5
