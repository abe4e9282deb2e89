from .position import position, positions, POSITION_FUNCTIONS
from .sampler import sample, sample_array, smoother_step, lerp_color
from .gradient_text import GradientText, GradientTextBuilder

__all__ = [
    "position",
    "positions",
    "POSITION_FUNCTIONS",
    "sample",
    "sample_array",
    "smoother_step",
    "lerp_color",
    "GradientText",
    "GradientTextBuilder",
]
