# No dependencies
from .types.animation_style import AnimationStyle

DEFAULT_STYLE = AnimationStyle.WAVE
DEFAULT_SPEED = 0.08
DEFAULT_SPREAD = 0.15
DEFAULT_ITALIC = False

MIN_PALETTE_SIZE = 2

PRESETS = {
    "rainbow": {
        "colors": ("red", "gold", "yellow", "green", "aqua", "blue", "light_purple"),
        "style": AnimationStyle.WAVE,
        "speed": 0.1,
        "spread": 0.2,
    },
    "fire": {
        "colors": ("#FF0000", "#FF4500", "#FF8C00", "#FFD700", "#FFFF00"),
        "style": AnimationStyle.FLOW,
        "speed": 0.12,
        "spread": 0.18,
    },
    "ocean": {
        "colors": ("#000080", "#0000CD", "#1E90FF", "#00BFFF", "#00FFFF"),
        "style": AnimationStyle.WAVE,
        "speed": 0.06,
        "spread": 0.12,
    },
}
