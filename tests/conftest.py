"""Pytest configuration and shared fixtures."""

import os

import pytest

from chaoscope.core.parameters import ParameterSet
from chaoscope.core.simulation import SimulationState
from chaoscope.core.systems import SystemVariant

TEST_SEED = 1234


@pytest.fixture
def params() -> ParameterSet:
    """Literature-default coefficients."""
    return ParameterSet()


@pytest.fixture
def state() -> SimulationState:
    """Seeded Lorenz simulation with the default 50 particles."""
    return SimulationState(seed=TEST_SEED)


@pytest.fixture
def single_lorenz() -> SimulationState:
    """
    One Lorenz particle placed at (1, 1, 20).

    Returns:
        State whose only particle sits at the canonical test point.
    """
    sim = SimulationState(system=SystemVariant.LORENZ, seed=TEST_SEED)
    sim.particles = sim.particles[:1]
    p = sim.particles[0]
    p.x, p.y, p.z = 1.0, 1.0, 20.0
    return sim


@pytest.fixture
def pygame_headless():
    """Initialise pygame against the dummy video driver."""
    pygame = pytest.importorskip("pygame")
    os.environ["SDL_VIDEODRIVER"] = "dummy"
    pygame.init()
    yield pygame
    pygame.quit()
