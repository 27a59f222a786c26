"""
A single integrated point plus the trail it leaves on screen.
"""

import math
from typing import Optional, Sequence, Tuple

import numpy as np

from chaoscope.core.geometry import SCREEN_CENTER, project
from chaoscope.core.systems import SystemVariant
from chaoscope.core.trail import MAX_TRAIL_LENGTH, TrailBuffer

Color = Tuple[float, float, float, float]


class Particle:
    """
    One independently seeded trajectory.

    Holds the 3D state, a bounded trail of display points and an RGBA color
    (channels in [0.5, 1.0), alpha 1.0) picked once at construction.
    """

    def __init__(
        self,
        x: float,
        y: float,
        z: float,
        rng: Optional[np.random.Generator] = None,
        trail_length: int = MAX_TRAIL_LENGTH,
    ):
        rng = rng if rng is not None else np.random.default_rng()
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.trail = TrailBuffer(trail_length)
        r, g, b = rng.uniform(0.5, 1.0, 3).tolist()
        self.color: Color = (r, g, b, 1.0)

    @property
    def position(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def update(
        self,
        new_x: float,
        new_y: float,
        new_z: float,
        screen_pos: Sequence[float],
    ) -> None:
        """Record ``screen_pos`` in the trail, then move to the new state."""
        self.trail.push(screen_pos)
        self.x = new_x
        self.y = new_y
        self.z = new_z

    def get_screen_pos(
        self,
        variant: SystemVariant,
        origin: Tuple[float, float] = SCREEN_CENTER,
    ) -> Tuple[float, float]:
        return project(self.x, self.y, variant, origin)

    def __repr__(self) -> str:
        return f"Particle(x={self.x:.4g}, y={self.y:.4g}, z={self.z:.4g}, trail={len(self.trail)})"
