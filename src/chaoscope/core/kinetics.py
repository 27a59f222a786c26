"""
Right-hand sides of the supported attractor ODEs.

Every function maps a state (x, y, z) and a ParameterSet to the derivative
(dx, dy, dz). Only elementwise arithmetic is used, so the same functions
accept Python floats for a single particle or equally-shaped numpy arrays
for a whole population. Overflow to inf/NaN is left to propagate.
"""

from typing import TYPE_CHECKING, Any, Tuple

import numpy as np

from chaoscope.core.parameters import ParameterSet

if TYPE_CHECKING:  # pragma: no cover
    from chaoscope.core.systems import SystemVariant

Derivative = Tuple[Any, Any, Any]


def lorenz(x, y, z, params: ParameterSet) -> Derivative:
    dx = params.sigma * (y - x)
    dy = x * (params.rho - z) - y
    dz = x * y - params.beta * z
    return dx, dy, dz


def rossler(x, y, z, params: ParameterSet) -> Derivative:
    dx = -y - z
    dy = x + params.a * y
    dz = params.b + z * (x - params.c)
    return dx, dy, dz


def aizawa(x, y, z, params: ParameterSet) -> Derivative:
    dx = (z - params.gamma) * x - params.delta * y
    dy = params.delta * x + (z - params.gamma) * y
    dz = (
        params.alpha
        + params.beta * z
        - z * z * z / 3.0
        - (x * x + y * y) * (1.0 + params.epsilon * z)
        + params.delta * z * x * x * x
    )
    return dx, dy, dz


def chen_lee(x, y, z, params: ParameterSet) -> Derivative:
    dx = params.p * x - y * z
    dy = params.q * y + x * z
    dz = params.r * z + x * y / 3.0
    return dx, dy, dz


def derivative(
    variant: "SystemVariant", x, y, z, params: ParameterSet
) -> Derivative:
    """Evaluate the kinetics of ``variant`` at (x, y, z)."""
    return variant.kinetics(x, y, z, params)


def euler_step(
    variant: "SystemVariant",
    pts: np.ndarray,
    params: ParameterSet,
    dt: float,
) -> np.ndarray:
    """Vectorized forward Euler step for an (N, 3) array of states.

    Returns a new array; ``pts`` is left untouched. Rows are independent.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        dx, dy, dz = derivative(variant, pts[:, 0], pts[:, 1], pts[:, 2], params)
        return pts + np.column_stack((dx, dy, dz)) * dt
