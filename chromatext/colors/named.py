from .rgb import ColorRGB

BLACK = ColorRGB((0x00, 0x00, 0x00))
DARK_BLUE = ColorRGB((0x00, 0x00, 0xAA))
DARK_GREEN = ColorRGB((0x00, 0xAA, 0x00))
DARK_AQUA = ColorRGB((0x00, 0xAA, 0xAA))
DARK_RED = ColorRGB((0xAA, 0x00, 0x00))
DARK_PURPLE = ColorRGB((0xAA, 0x00, 0xAA))
GOLD = ColorRGB((0xFF, 0xAA, 0x00))
GRAY = ColorRGB((0xAA, 0xAA, 0xAA))
DARK_GRAY = ColorRGB((0x55, 0x55, 0x55))
BLUE = ColorRGB((0x55, 0x55, 0xFF))
GREEN = ColorRGB((0x55, 0xFF, 0x55))
AQUA = ColorRGB((0x55, 0xFF, 0xFF))
RED = ColorRGB((0xFF, 0x55, 0x55))
LIGHT_PURPLE = ColorRGB((0xFF, 0x55, 0xFF))
YELLOW = ColorRGB((0xFF, 0xFF, 0x55))
WHITE = ColorRGB((0xFF, 0xFF, 0xFF))

NAMED_COLORS: dict[str, ColorRGB] = {
    "black": BLACK,
    "dark_blue": DARK_BLUE,
    "dark_green": DARK_GREEN,
    "dark_aqua": DARK_AQUA,
    "dark_red": DARK_RED,
    "dark_purple": DARK_PURPLE,
    "gold": GOLD,
    "gray": GRAY,
    "dark_gray": DARK_GRAY,
    "blue": BLUE,
    "green": GREEN,
    "aqua": AQUA,
    "red": RED,
    "light_purple": LIGHT_PURPLE,
    "yellow": YELLOW,
    "white": WHITE,
}

__all__ = [
    "BLACK",
    "DARK_BLUE",
    "DARK_GREEN",
    "DARK_AQUA",
    "DARK_RED",
    "DARK_PURPLE",
    "GOLD",
    "GRAY",
    "DARK_GRAY",
    "BLUE",
    "GREEN",
    "AQUA",
    "RED",
    "LIGHT_PURPLE",
    "YELLOW",
    "WHITE",
    "NAMED_COLORS",
]
