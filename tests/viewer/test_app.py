"""Tests for the viewer event loop."""

import pytest

from chaoscope.config import ViewerConfig
from chaoscope.core.systems import SystemVariant
from chaoscope.viewer.app import AttractorViewer

pygame = pytest.importorskip("pygame")


def _key(pygame, key):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=0)


def test_key_events_reach_state(pygame_headless):
    viewer = AttractorViewer(ViewerConfig(seed=0))
    viewer.running = True
    viewer.process_events([_key(pygame, pygame.K_2), _key(pygame, pygame.K_z)])
    assert viewer.state.system is SystemVariant.ROSSLER
    assert viewer.state.time_scale == pytest.approx(1.1)
    assert viewer.running


def test_escape_and_quit_stop(pygame_headless):
    viewer = AttractorViewer(ViewerConfig(seed=0))
    viewer.running = True
    viewer.process_events([_key(pygame, pygame.K_ESCAPE)])
    assert not viewer.running

    viewer.running = True
    viewer.process_events([pygame.event.Event(pygame.QUIT)])
    assert not viewer.running


def test_headless_run_saves_screenshot(tmp_path):
    shot = tmp_path / "frame.png"
    viewer = AttractorViewer(ViewerConfig(seed=0, particle_count=10, width=320, height=240))
    frames = viewer.run(max_frames=3, headless=True, screenshot=shot)
    assert frames == 3
    assert shot.exists()
    assert all(len(p.trail) == 4 for p in viewer.state.particles)
