"""
Interactive pygame window around a SimulationState.

Each frame: drain input events into the key bindings, tick the simulation,
render, flip. Headless runs use SDL's dummy video driver and stop after a
fixed number of frames.
"""

import os
from pathlib import Path
from typing import Iterable, Optional

import pygame

from chaoscope.config import ViewerConfig
from chaoscope.controls import handle_key
from chaoscope.core.simulation import SimulationState
from chaoscope.utils.logging import get_logger
from chaoscope.viewer.renderer import SceneRenderer

logger = get_logger(__name__)

WINDOW_TITLE = "chaoscope"


class AttractorViewer:
    """Event loop, simulation stepping and presentation."""

    def __init__(
        self,
        config: Optional[ViewerConfig] = None,
        state: Optional[SimulationState] = None,
    ):
        self.config = config or ViewerConfig()
        self.state = state or SimulationState.from_config(self.config)
        self.renderer = SceneRenderer(self.config)
        self.running = False
        self.frames_rendered = 0

    def process_events(self, events: Iterable[pygame.event.Event]) -> None:
        """Apply window and keyboard events; clears ``running`` on quit."""
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if not handle_key(self.state, pygame.key.name(event.key)):
                    self.running = False

    def step(self, surface: pygame.Surface) -> None:
        """Advance the simulation one tick and draw it."""
        self.state.tick()
        self.renderer.render(surface, self.state)
        self.frames_rendered += 1

    def run(
        self,
        max_frames: Optional[int] = None,
        headless: bool = False,
        screenshot: Optional[Path] = None,
    ) -> int:
        """
        Run until the window closes, Escape is pressed or ``max_frames`` elapse.

        Args:
            max_frames: Stop after this many frames (None = run forever).
            headless: Use the dummy video driver and skip frame pacing.
            screenshot: Save the final frame to this path (PNG).

        Returns:
            Number of frames rendered.
        """
        if headless:
            os.environ["SDL_VIDEODRIVER"] = "dummy"

        pygame.init()
        try:
            surface = pygame.display.set_mode((self.config.width, self.config.height))
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()

            logger.info(
                "Starting %s with %d particles (%dx%d%s)",
                self.state.system.display_name,
                len(self.state.particles),
                self.config.width,
                self.config.height,
                ", headless" if headless else "",
            )

            self.running = True
            while self.running:
                self.process_events(pygame.event.get())
                if not self.running:
                    break

                self.step(surface)
                pygame.display.flip()

                if max_frames is not None and self.frames_rendered >= max_frames:
                    break
                if not headless:
                    clock.tick(self.config.fps)

            if screenshot is not None:
                pygame.image.save(surface, str(screenshot))
                logger.info("Saved frame %d to %s", self.frames_rendered, screenshot)
        finally:
            pygame.quit()

        logger.info("Stopped after %d frames", self.frames_rendered)
        return self.frames_rendered
