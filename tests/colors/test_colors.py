import pickle

import numpy as np
import pytest

from chromatext.colors import ColorRGB, NAMED_COLORS
from chromatext.colors import named


def test_value_and_channels():
    color = ColorRGB((255, 128, 0))
    assert color.value == (255, 128, 0)
    assert (color.red, color.green, color.blue) == (255, 128, 0)
    assert tuple(color) == (255, 128, 0)
    assert color[1] == 128
    assert len(color) == 3


def test_channels_clamped_and_coerced():
    color = ColorRGB((300, -5, 12.9))
    assert color.value == (255, 0, 12)
    assert all(isinstance(c, int) for c in color.value)


def test_wrong_channel_count():
    with pytest.raises(ValueError):
        ColorRGB((1, 2))
    with pytest.raises(ValueError):
        ColorRGB((1, 2, 3, 4))
    with pytest.raises(ValueError):
        ColorRGB("abc")


def test_immutable():
    color = ColorRGB((1, 2, 3))
    with pytest.raises(AttributeError):
        color._value = (4, 5, 6)
    with pytest.raises(AttributeError):
        color.extra = 1
    assert color.value == (1, 2, 3)


def test_equality_and_hash():
    a = ColorRGB((10, 20, 30))
    b = ColorRGB([10, 20, 30])
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != ColorRGB((10, 20, 31))
    assert a != (10, 20, 30)


def test_hex_and_int_round():
    color = ColorRGB((255, 87, 51))
    assert color.hex == "#FF5733"
    assert color.to_int() == 0xFF5733
    assert ColorRGB.from_int(0xFF5733) == color
    assert ColorRGB.from_int(0x1FF5733) == color


def test_from_array_and_as_array():
    color = ColorRGB(np.array([1, 2, 3]))
    assert color.value == (1, 2, 3)
    arr = color.as_array()
    assert arr.dtype == np.uint8
    assert arr.tolist() == [1, 2, 3]


def test_copy_constructor():
    color = ColorRGB((9, 8, 7))
    assert ColorRGB(color) == color


def test_pickle():
    color = ColorRGB((9, 8, 7))
    assert pickle.loads(pickle.dumps(color)) == color


def test_named_table():
    assert len(NAMED_COLORS) == 16
    assert NAMED_COLORS["gold"] == ColorRGB((255, 170, 0))
    assert NAMED_COLORS["light_purple"] == ColorRGB((255, 85, 255))
    assert NAMED_COLORS["aqua"] == named.AQUA
    assert all(name == name.lower() for name in NAMED_COLORS)
