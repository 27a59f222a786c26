"""Tests for Particle."""

import math

import numpy as np
import pytest

from chaoscope.core.geometry import SCREEN_CENTER, project
from chaoscope.core.particle import Particle
from chaoscope.core.systems import SystemVariant


def test_new_particle():
    p = Particle(1.0, 2.0, 3.0, rng=np.random.default_rng(0))
    assert p.position == (1.0, 2.0, 3.0)
    assert len(p.trail) == 0


def test_color_range():
    rng = np.random.default_rng(5)
    for _ in range(200):
        r, g, b, a = Particle(0.0, 0.0, 0.0, rng=rng).color
        assert all(0.5 <= c < 1.0 for c in (r, g, b))
        assert a == 1.0


def test_update_pushes_then_moves():
    p = Particle(0.0, 0.0, 0.0)
    p.update(1.0, 2.0, 3.0, (410.0, 320.0))
    assert p.position == (1.0, 2.0, 3.0)
    assert list(p.trail) == [(410.0, 320.0), (410.0, 320.0)]

    p.update(4.0, 5.0, 6.0, (440.0, 350.0))
    assert len(p.trail) == 3
    assert p.trail.latest() == (440.0, 350.0)


def test_update_accepts_non_finite():
    p = Particle(0.0, 0.0, 0.0)
    p.update(float("nan"), float("inf"), 0.0, (float("nan"), 0.0))
    assert math.isnan(p.x)
    assert not p.is_finite


@pytest.mark.parametrize(
    "variant, expected",
    [
        (SystemVariant.LORENZ, (410.0, 280.0)),
        (SystemVariant.ROSSLER, (430.0, 240.0)),
        (SystemVariant.AIZAWA, (500.0, 100.0)),
        (SystemVariant.CHEN_LEE, (430.0, 240.0)),
    ],
)
def test_screen_pos_uses_scale_factor(variant, expected):
    p = Particle(1.0, -2.0, 99.0)
    assert p.get_screen_pos(variant) == pytest.approx(expected)


def test_screen_pos_ignores_trail():
    p = Particle(0.0, 0.0, 0.0)
    p.update(1.0, 1.0, 0.0, (0.0, 0.0))
    assert p.get_screen_pos(SystemVariant.LORENZ) == pytest.approx((410.0, 310.0))


def test_custom_origin():
    assert project(1.0, 1.0, SystemVariant.LORENZ, origin=(0.0, 0.0)) == (10.0, 10.0)
    assert SCREEN_CENTER == (400.0, 300.0)


def test_trail_length_parameter():
    p = Particle(0.0, 0.0, 0.0, trail_length=10)
    for i in range(20):
        p.update(0.0, 0.0, 0.0, (float(i), 0.0))
    assert len(p.trail) == 10
