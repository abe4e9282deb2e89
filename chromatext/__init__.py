"""
Chromatext - Animated Gradient Text
===================================

Computes a color for every character of a string from its position and an
external animation tick, giving flowing rainbow, fire, ocean or custom
gradient text.

Key Features
------------
- Four animation styles (wave, pulse, breathe, flow)
- Cyclic palettes with quintic (smoother step) easing between colors
- Immutable, validated gradient configurations and named presets
- Hex, named and RGB-triple color parsing
- Scalar and vectorized (numpy) sampling
- Rendering to rich ``Text``, console markup, ANSI strings or PIL swatches

Quick Start
-----------
>>> from chromatext import GradientText, AnimationStyle
>>> from rich.console import Console
>>>
>>> gradient = GradientText("Hello, world!", ["red", "#0000FF"], style=AnimationStyle.PULSE)
>>> for tick in range(100):
...     Console().print(gradient.generate(tick))
>>>
>>> # Presets
>>> GradientText.fire("Burning").colors_at(tick=10)

Modules
-------
- colors: ColorRGB value type, named colors and color parsing
- gradients: position mapping, palette sampling, GradientText
- render: output renderers
- shortcuts: one-call helpers (rainbow, fire, ocean, with_gradient)
"""

from .colors import (
    ColorBase,
    ColorRGB,
    RGB,
    NAMED_COLORS,
    from_hex,
    from_rgb,
    from_name,
    parse_color,
    parse_colors,
)
from .types.animation_style import AnimationStyle
from .gradients import (
    position,
    positions,
    sample,
    sample_array,
    smoother_step,
    lerp_color,
    GradientText,
    GradientTextBuilder,
)
from .render import to_rich_text, to_markup, to_ansi, to_image
from .shortcuts import gradient_text, rainbow, fire, ocean, with_gradient
from .defaults import PRESETS
from .errors import (
    ChromatextError,
    ConfigValidationError,
    ColorParseError,
    InvalidPaletteError,
)

__version__ = "1.0.0"

__all__ = [
    # colors
    "ColorBase",
    "ColorRGB",
    "RGB",
    "NAMED_COLORS",
    "from_hex",
    "from_rgb",
    "from_name",
    "parse_color",
    "parse_colors",
    # gradients
    "AnimationStyle",
    "position",
    "positions",
    "sample",
    "sample_array",
    "smoother_step",
    "lerp_color",
    "GradientText",
    "GradientTextBuilder",
    "PRESETS",
    # rendering
    "to_rich_text",
    "to_markup",
    "to_ansi",
    "to_image",
    "gradient_text",
    "rainbow",
    "fire",
    "ocean",
    "with_gradient",
    # errors
    "ChromatextError",
    "ConfigValidationError",
    "ColorParseError",
    "InvalidPaletteError",
    # Version
    "__version__",
]
