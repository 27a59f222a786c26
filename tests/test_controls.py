"""Tests for the keyboard bindings."""

from dataclasses import replace

import pytest

from chaoscope.controls import handle_key
from chaoscope.core.simulation import SimulationState
from chaoscope.core.systems import SystemVariant


@pytest.mark.parametrize(
    "key, variant",
    [("2", SystemVariant.ROSSLER), ("3", SystemVariant.AIZAWA), ("4", SystemVariant.CHEN_LEE)],
)
def test_number_keys_switch_system(state, key, variant):
    before = list(state.particles)
    assert handle_key(state, key) is True
    assert state.system is variant
    assert state.particles != before


def test_current_system_key_keeps_particles(state):
    before = list(state.particles)
    handle_key(state, "1")
    assert state.particles == before


@pytest.mark.parametrize(
    "key, name, delta",
    [
        ("q", "sigma", 0.1), ("a", "sigma", -0.1),
        ("w", "rho", 0.1), ("s", "rho", -0.1),
        ("e", "beta", 0.01), ("d", "beta", -0.01),
    ],
)
def test_lorenz_parameter_keys(state, key, name, delta):
    start = getattr(state.parameters, name)
    handle_key(state, key)
    assert getattr(state.parameters, name) == pytest.approx(start + delta)


def test_uppercase_key_names(state):
    handle_key(state, "Q")
    assert state.parameters.sigma == pytest.approx(10.1)


class TestRF:
    def test_aizawa_epsilon(self):
        sim = SimulationState(system=SystemVariant.AIZAWA, seed=0)
        before = list(sim.particles)
        handle_key(sim, "r")
        assert sim.parameters.epsilon == pytest.approx(0.26)
        handle_key(sim, "f")
        handle_key(sim, "f")
        assert sim.parameters.epsilon == pytest.approx(0.24)
        assert sim.particles == before

    @pytest.mark.parametrize("key", ["r", "f"])
    def test_reseed_elsewhere(self, state, key):
        before = list(state.particles)
        params = replace(state.parameters)
        handle_key(state, key)
        assert state.particles != before
        assert len(state.particles) == 50
        assert state.parameters == params


def test_backspace_reseeds(state):
    before = list(state.particles)
    handle_key(state, "backspace")
    assert state.particles != before


def test_time_scale_keys(state):
    for _ in range(10):
        handle_key(state, "z")
    assert state.time_scale == pytest.approx(2.0)
    for _ in range(50):
        handle_key(state, "x")
    assert state.time_scale == pytest.approx(0.1)


def test_particle_count_keys(state):
    handle_key(state, "c")
    assert state.particle_count == 55
    assert len(state.particles) == 55
    for _ in range(20):
        handle_key(state, "v")
    assert state.particle_count == 5
    assert len(state.particles) == 5


def test_toggles(state):
    handle_key(state, "t")
    handle_key(state, "h")
    assert not state.show_trails
    assert not state.show_ui


def test_escape_requests_quit(state):
    assert handle_key(state, "escape") is False


def test_unknown_key_ignored(state):
    before = list(state.particles)
    assert handle_key(state, "left shift") is True
    assert state.particles == before
