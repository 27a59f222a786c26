"""
Tunable coefficients for every supported attractor family.

All four families live side by side in one record so that switching systems
keeps whatever the user dialed in for the others. Values are never clamped:
pushing a coefficient far enough will make trajectories diverge, which is
part of the fun.
"""

from dataclasses import dataclass, fields


@dataclass
class ParameterSet:
    """Coefficients for Lorenz, Rössler, Aizawa and Chen-Lee."""

    # Lorenz
    sigma: float = 10.0
    rho: float = 28.0
    beta: float = 8.0 / 3.0  # also read by Aizawa

    # Rössler
    a: float = 0.2
    b: float = 0.2
    c: float = 5.7

    # Aizawa
    alpha: float = 0.95
    gamma: float = 0.6
    delta: float = 3.5
    epsilon: float = 0.25

    # Chen-Lee
    p: float = 5.0
    q: float = -10.0
    r: float = -0.38

    @classmethod
    def names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    def nudge(self, name: str, delta: float) -> float:
        """Add ``delta`` to coefficient ``name`` and return the new value."""
        value = getattr(self, name) + delta
        setattr(self, name, value)
        return value
