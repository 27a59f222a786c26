"""Tests for drawing a simulation onto a pygame Surface."""

import numpy as np
import pytest

from chaoscope.config import ViewerConfig
from chaoscope.core.simulation import SimulationState
from chaoscope.core.systems import SystemVariant
from chaoscope.viewer.renderer import SceneRenderer, to_rgb

pygame = pytest.importorskip("pygame")

BACKGROUND = (25, 25, 38)


def _drawn_near(surface, pos):
    """True if any pixel in the 3x3 block around ``pos`` differs from the background."""
    cx, cy = int(pos[0]), int(pos[1])
    for x in range(cx - 1, cx + 2):
        for y in range(cy - 1, cy + 2):
            c = surface.get_at((x, y))
            if (c.r, c.g, c.b) != BACKGROUND:
                return True
    return False


def test_to_rgb():
    assert to_rgb((0.5, 1.0, 0.0, 1.0)) == (128, 255, 0)
    assert to_rgb((2.0, -1.0, 1.0)) == (255, 0, 255)


def test_particles_are_drawn(pygame_headless):
    sim = SimulationState(seed=0, particle_count=5, show_ui=False)
    surface = pygame.Surface((800, 600))
    SceneRenderer(ViewerConfig()).render(surface, sim)

    for particle in sim.particles:
        pos = particle.get_screen_pos(sim.system)
        assert _drawn_near(surface, pos)


def test_background_only_when_empty(pygame_headless):
    sim = SimulationState(seed=0, particle_count=5, show_ui=False)
    sim.particles = []
    surface = pygame.Surface((80, 60))
    SceneRenderer(ViewerConfig(width=80, height=60)).render(surface, sim)
    arr = pygame.surfarray.array3d(surface)
    assert np.all(arr == np.array(BACKGROUND))


def test_trails_drawn_after_ticks(pygame_headless):
    sim = SimulationState(seed=1, particle_count=5, show_ui=False)
    for _ in range(30):
        sim.tick()
    surface = pygame.Surface((800, 600))
    renderer = SceneRenderer(ViewerConfig())

    renderer.render(surface, sim)
    with_trails = int((pygame.surfarray.array3d(surface) != np.array(BACKGROUND)).any(axis=2).sum())

    sim.toggle_trails()
    renderer.render(surface, sim)
    without_trails = int((pygame.surfarray.array3d(surface) != np.array(BACKGROUND)).any(axis=2).sum())

    assert with_trails > without_trails


def test_non_finite_particles_are_skipped(pygame_headless):
    sim = SimulationState(system=SystemVariant.ROSSLER, seed=2, particle_count=5, show_ui=False)
    sim.tick()
    sim.particles[0].x = float("nan")
    sim.particles[0].trail.push((float("inf"), 0.0))
    surface = pygame.Surface((800, 600))
    SceneRenderer(ViewerConfig()).render(surface, sim)


def test_overlay_drawn(pygame_headless):
    sim = SimulationState(seed=0, particle_count=5)
    sim.particles = []
    surface = pygame.Surface((800, 600))
    SceneRenderer(ViewerConfig()).render(surface, sim)
    corner = pygame.surfarray.array3d(surface)[20:400, 20:130]
    assert (corner != np.array(BACKGROUND)).any()
