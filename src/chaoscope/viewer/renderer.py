"""
Draws a SimulationState onto a pygame Surface.

Trails are polylines through each particle's trail buffer, particles are
small filled circles, and the overlay is a stack of text lines in the
top-left corner. Anything pygame refuses to draw (degenerate or
non-finite geometry) is logged and skipped for that frame.
"""

from typing import Optional, Sequence, Tuple

import numpy as np
import pygame

from chaoscope.config import ViewerConfig
from chaoscope.core.simulation import SimulationState
from chaoscope.overlay import overlay_lines
from chaoscope.utils.logging import get_logger

logger = get_logger(__name__)

_DRAW_ERRORS = (pygame.error, ValueError, TypeError, OverflowError)

OVERLAY_ORIGIN: Tuple[int, int] = (20, 20)
OVERLAY_LINE_HEIGHT: int = 20


def to_rgb(color: Sequence[float]) -> Tuple[int, int, int]:
    """Float RGB(A) in [0, 1] -> 8-bit RGB tuple for pygame."""
    return tuple(int(round(min(1.0, max(0.0, c)) * 255)) for c in color[:3])


class SceneRenderer:
    """Renders particles, trails and the overlay for one frame."""

    def __init__(self, config: Optional[ViewerConfig] = None):
        self.config = config or ViewerConfig()
        self._font: Optional[pygame.font.Font] = None

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, self.config.font_size)
        return self._font

    def render(self, surface: pygame.Surface, state: SimulationState) -> None:
        surface.fill(self.config.background_color)

        if state.show_trails:
            self._draw_trails(surface, state)
        self._draw_particles(surface, state)

        if state.show_ui:
            self._draw_overlay(surface, state)

    def _draw_trails(self, surface: pygame.Surface, state: SimulationState) -> None:
        width = self.config.trail_width
        for particle in state.particles:
            if len(particle.trail) < 2:
                continue
            points = particle.trail.points()
            points = points[np.isfinite(points).all(axis=1)]
            if len(points) < 2:
                continue
            try:
                pygame.draw.lines(surface, to_rgb(particle.color), False, points.tolist(), width)
            except _DRAW_ERRORS as exc:
                logger.warning("Failed to draw trail (%d points): %s", len(points), exc)

    def _draw_particles(self, surface: pygame.Surface, state: SimulationState) -> None:
        radius = self.config.particle_radius
        for particle in state.particles:
            if not particle.is_finite:
                continue
            pos = particle.get_screen_pos(state.system, state.origin)
            if not (np.isfinite(pos[0]) and np.isfinite(pos[1])):
                continue
            try:
                pygame.draw.circle(surface, to_rgb(particle.color), pos, radius)
            except _DRAW_ERRORS as exc:
                logger.warning("Failed to draw particle at %s: %s", pos, exc)

    def _draw_overlay(self, surface: pygame.Surface, state: SimulationState) -> None:
        x, y = OVERLAY_ORIGIN
        for line in overlay_lines(state):
            text = self.font.render(line, True, self.config.text_color)
            surface.blit(text, (x, y))
            y += OVERLAY_LINE_HEIGHT
