import pytest
from rich.text import Text

from chromatext import AnimationStyle, GradientText, fire, gradient_text, ocean, rainbow, with_gradient


def test_gradient_text_defaults():
    gt = gradient_text("Hello", "red", "blue")
    assert isinstance(gt, GradientText)
    assert gt.style is AnimationStyle.WAVE
    assert len(gt.colors) == 2


@pytest.mark.parametrize("helper, name", [(rainbow, "rainbow"), (fire, "fire"), (ocean, "ocean")])
def test_preset_helpers(helper, name):
    preset = GradientText.from_preset(name, "Shiny")
    assert helper("Shiny", 12).spans == preset.generate(12).spans
    assert helper("Shiny").spans == preset.generate_static().spans
    assert helper("Shiny").plain == "Shiny"


def test_with_gradient_plain_string():
    result = with_gradient("abc", ["red", "blue"], 5, style="pulse")
    expected = GradientText("abc", ("red", "blue"), style=AnimationStyle.PULSE).generate(5)
    assert result.spans == expected.spans


def test_with_gradient_warns_on_styled_text():
    styled = Text("abc", style="bold")
    with pytest.warns(UserWarning, match="discards"):
        result = with_gradient(styled, ["red", "blue"], 0)
    assert result.plain == "abc"


def test_with_gradient_plain_rich_text_no_warning(recwarn):
    with_gradient(Text("abc"), ["red", "blue"], 0)
    assert not [w for w in recwarn if issubclass(w.category, UserWarning)]
