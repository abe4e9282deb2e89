"""Animated gradient text in the terminal, plus a GIF preview.

Run directly with:
    python examples/animations.py [output.gif]
"""
import sys
import time
from typing import List

from PIL import Image
from rich.console import Console
from rich.live import Live
from rich.table import Table

from chromatext import AnimationStyle, GradientText, to_image

FRAMES = 120
FRAME_SECONDS = 1 / 30


def showcase() -> List[GradientText]:
    base = GradientText("  Chromatext gradient text  ", ("red", "gold", "aqua", "light_purple"))
    return [base.replace(style=style) for style in AnimationStyle] + [
        GradientText.rainbow("  rainbow preset  "),
        GradientText.fire("  fire preset  "),
        GradientText.ocean("  ocean preset  "),
    ]


def frame(gradients: List[GradientText], tick: int) -> Table:
    table = Table.grid(padding=(0, 2))
    for gradient in gradients:
        table.add_row(gradient.style.display_name, gradient.generate(tick))
    return table


def animate(gradients: List[GradientText]) -> None:
    # tick advances once per frame; the caller owns the clock
    with Live(frame(gradients, 0), console=Console(), refresh_per_second=30) as live:
        for tick in range(1, FRAMES):
            time.sleep(FRAME_SECONDS)
            live.update(frame(gradients, tick))


def save_gif(gradient: GradientText, output_path: str, frames: int = 60) -> None:
    images = [gradient.generate(tick, renderer=to_image) for tick in range(frames)]
    first: Image.Image = images[0]
    first.save(output_path, save_all=True, append_images=images[1:], duration=50, loop=0)


if __name__ == "__main__":
    gradients = showcase()
    animate(gradients)
    if len(sys.argv) > 1:
        save_gif(gradients[-1], sys.argv[1])
