import math

import numpy as np
import pytest

from chromatext import AnimationStyle
from chromatext.gradients.position import position, positions, POSITION_FUNCTIONS

ALL_STYLES = list(AnimationStyle)


def test_every_style_has_a_formula():
    assert set(POSITION_FUNCTIONS) == set(AnimationStyle)


def test_wave_formula():
    assert position(AnimationStyle.WAVE, 3, 10, 0.2, 5, 0.1) == 3 * 0.2 - 5 * 0.1
    assert position(AnimationStyle.WAVE, 0, 10, 0.2, 0, 0.1) == 0.0


@pytest.mark.parametrize("tick", [-50, -1, 0, 1, 7, 1000])
def test_wave_strictly_decreasing_in_tick(tick):
    for i in range(5):
        later = position(AnimationStyle.WAVE, i, 5, 0.15, tick + 1, 0.08)
        now = position(AnimationStyle.WAVE, i, 5, 0.15, tick, 0.08)
        assert later < now


def test_flow_matches_wave():
    for i in range(8):
        for tick in (-3, 0, 4, 99):
            assert position(AnimationStyle.FLOW, i, 8, 0.18, tick, 0.12) == position(
                AnimationStyle.WAVE, i, 8, 0.18, tick, 0.12
            )


def test_pulse_center_odd_length():
    # center of length 5 is index 2
    assert position(AnimationStyle.PULSE, 2, 5, 0.3, 7, 0.25) == -7 * 0.25


def test_pulse_symmetric_even_length():
    # center of length 4 is the half index 1.5
    n, spread, tick, speed = 4, 0.5, 3, 0.1
    values = [position(AnimationStyle.PULSE, i, n, spread, tick, speed) for i in range(n)]
    assert values[0] == values[3]
    assert values[1] == values[2]
    assert values[1] == 0.5 * spread - tick * speed


def test_pulse_fractional_center_value():
    # position of the (fractional) center itself
    assert position(AnimationStyle.PULSE, 1.5, 4, 0.5, 3, 0.1) == -3 * 0.1


def test_breathe_uniform_and_bounded():
    for tick in range(-20, 200, 7):
        values = {position(AnimationStyle.BREATHE, i, 12, 0.2, tick, 0.05) for i in range(12)}
        assert len(values) == 1
        value = values.pop()
        assert 0.0 <= value <= 1.0


def test_breathe_formula():
    t = 13 * 0.07
    expected = 0.7 * (math.sin(t) + 1) / 2 + 0.3 * (math.sin(2.1 * t) + 1) / 2
    assert position(AnimationStyle.BREATHE, 0, 1, 1.0, 13, 0.07) == pytest.approx(expected)
    assert position(AnimationStyle.BREATHE, 0, 1, 1.0, 0, 0.07) == pytest.approx(0.5)


def test_style_accepts_value_string():
    assert position("wave", 2, 4, 0.5, 1, 0.25) == position(AnimationStyle.WAVE, 2, 4, 0.5, 1, 0.25)


def test_calculate_position_method():
    assert AnimationStyle.PULSE.calculate_position(0, 3, 1.0, 0, 1.0) == 1.0


@pytest.mark.parametrize("style", ALL_STYLES)
@pytest.mark.parametrize("tick", [-7, 0, 3, 250])
def test_positions_matches_scalar(style, tick):
    n, spread, speed = 11, 0.17, 0.09
    expected = [position(style, i, n, spread, tick, speed) for i in range(n)]
    result = positions(style, n, spread, tick, speed)
    assert result.dtype == np.float64
    assert result.shape == (n,)
    assert result.tolist() == expected


def test_style_metadata():
    assert AnimationStyle.WAVE.display_name == "Wave"
    assert AnimationStyle.BREATHE.description
    assert AnimationStyle.from_name(" Pulse ") is AnimationStyle.PULSE
    with pytest.raises(ValueError):
        AnimationStyle.from_name("spiral")
