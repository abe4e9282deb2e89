"""Basic Chromatext usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from rich.console import Console

from chromatext import (
    AnimationStyle,
    ColorRGB,
    GradientText,
    parse_color,
    rainbow,
    sample,
    smoother_step,
)

console = Console()


def demonstrate_colors() -> None:
    # Parse colors from the supported string forms.
    for text in ("#FF5733", "0x1E90FF", "gold", "rgb(12, 200, 90)"):
        color = parse_color(text)
        console.print(f"{text!r:>20} -> {color.value} {color.hex}")


def demonstrate_sampling() -> None:
    # Sample a two-color palette; the palette wraps around after the last color.
    palette = (ColorRGB((255, 0, 0)), ColorRGB((0, 0, 255)))
    for p in (0.0, 0.25, 0.5, 1.0, 1.5, -0.25):
        console.print(f"position {p:>5}: {sample(palette, p).value}")
    console.print("smoother_step(0.25) =", smoother_step(0.25))


def demonstrate_text() -> None:
    # Presets and custom gradients, rendered as rich Text.
    console.print(rainbow("Static rainbow text"))
    console.print(GradientText.ocean("Deep blue ocean").generate(tick=30))
    custom = GradientText(
        "Custom pulse, italic",
        ("#FF00FF", "aqua", "yellow"),
        style=AnimationStyle.PULSE,
        spread=0.3,
        italic=True,
    )
    console.print(custom.generate(tick=5))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_sampling()
    demonstrate_text()
