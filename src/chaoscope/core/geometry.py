"""
Canvas geometry and the state-to-screen mapping.
"""

from typing import Tuple

import numpy as np

from chaoscope.core.systems import SystemVariant

SCREEN_WIDTH: int = 800
SCREEN_HEIGHT: int = 600
SCREEN_CENTER: Tuple[float, float] = (SCREEN_WIDTH / 2.0, SCREEN_HEIGHT / 2.0)


def project(
    x: float,
    y: float,
    variant: SystemVariant,
    origin: Tuple[float, float] = SCREEN_CENTER,
) -> Tuple[float, float]:
    """Map a state's (x, y) to display coordinates. z is dropped."""
    scale = variant.scale_factor
    return origin[0] + x * scale, origin[1] + y * scale


def project_many(
    pts: np.ndarray,
    variant: SystemVariant,
    origin: Tuple[float, float] = SCREEN_CENTER,
) -> np.ndarray:
    """Vectorized ``project`` for an (N, 3) state array; returns (N, 2)."""
    with np.errstate(over="ignore", invalid="ignore"):
        return np.asarray(origin, dtype=np.float64) + pts[:, :2] * variant.scale_factor
