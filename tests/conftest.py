import pytest

from chromatext import ColorRGB

RED = ColorRGB((255, 0, 0))
GREEN = ColorRGB((0, 255, 0))
BLUE = ColorRGB((0, 0, 255))


@pytest.fixture
def red_blue():
    return (RED, BLUE)


@pytest.fixture
def rgb_palette():
    return (RED, GREEN, BLUE)


@pytest.fixture
def seven_colors():
    return tuple(ColorRGB((i * 30, 255 - i * 30, (i * 70) % 256)) for i in range(7))
