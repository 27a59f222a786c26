"""
Registry of the supported attractor families.

Each SystemVariant carries everything that differs between families: its
kinetics, the box initial conditions are drawn from, the display scale, and
the coefficients the keyboard can nudge.
"""

from enum import Enum
from typing import Callable, Dict, NamedTuple, Tuple

from chaoscope.core import kinetics

Box = Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]


class Adjustment(NamedTuple):
    """A keyboard-tunable coefficient: field name, overlay symbol, step."""

    name: str
    symbol: str
    step: float


class SystemVariant(Enum):
    LORENZ = "lorenz"
    ROSSLER = "rossler"
    AIZAWA = "aizawa"
    CHEN_LEE = "chen_lee"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def scale_factor(self) -> float:
        return _SCALE_FACTORS[self]

    @property
    def init_box(self) -> Box:
        """Per-axis (low, high) ranges for uniform initial sampling."""
        return _INIT_BOXES[self]

    @property
    def kinetics(self) -> Callable:
        return _KINETICS[self]

    @property
    def adjustments(self) -> Tuple[Adjustment, ...]:
        return _ADJUSTMENTS[self]

    @classmethod
    def from_name(cls, name: str) -> "SystemVariant":
        """Look up a variant by value or display name (case-insensitive)."""
        key = name.strip().lower().replace("-", "_").replace("ö", "o")
        for variant in cls:
            if key in (variant.value, variant.value.replace("_", "")):
                return variant
        raise ValueError(
            f"Unknown system {name!r}; expected one of "
            + ", ".join(v.value for v in cls)
        )


_DISPLAY_NAMES: Dict[SystemVariant, str] = {
    SystemVariant.LORENZ: "Lorenz",
    SystemVariant.ROSSLER: "Rossler",
    SystemVariant.AIZAWA: "Aizawa",
    SystemVariant.CHEN_LEE: "Chen-Lee",
}

_SCALE_FACTORS: Dict[SystemVariant, float] = {
    SystemVariant.LORENZ: 10.0,
    SystemVariant.ROSSLER: 30.0,
    SystemVariant.AIZAWA: 100.0,
    SystemVariant.CHEN_LEE: 30.0,
}

_INIT_BOXES: Dict[SystemVariant, Box] = {
    SystemVariant.LORENZ: ((-1.0, 1.0), (-1.0, 1.0), (15.0, 25.0)),
    SystemVariant.ROSSLER: ((-1.0, 1.0), (-1.0, 1.0), (-1.0, 1.0)),
    SystemVariant.AIZAWA: ((-0.1, 0.1), (-0.1, 0.1), (-0.1, 0.1)),
    SystemVariant.CHEN_LEE: ((-1.0, 1.0), (-1.0, 1.0), (-1.0, 1.0)),
}

_KINETICS: Dict[SystemVariant, Callable] = {
    SystemVariant.LORENZ: kinetics.lorenz,
    SystemVariant.ROSSLER: kinetics.rossler,
    SystemVariant.AIZAWA: kinetics.aizawa,
    SystemVariant.CHEN_LEE: kinetics.chen_lee,
}

# Slot order matches the key pairs Q/A, W/S, E/D, R/F.
_ADJUSTMENTS: Dict[SystemVariant, Tuple[Adjustment, ...]] = {
    SystemVariant.LORENZ: (
        Adjustment("sigma", "σ", 0.1),
        Adjustment("rho", "ρ", 0.1),
        Adjustment("beta", "β", 0.01),
    ),
    SystemVariant.ROSSLER: (
        Adjustment("a", "a", 0.01),
        Adjustment("b", "b", 0.01),
        Adjustment("c", "c", 0.01),
    ),
    SystemVariant.AIZAWA: (
        Adjustment("alpha", "α", 0.01),
        Adjustment("gamma", "γ", 0.01),
        Adjustment("delta", "δ", 0.01),
        Adjustment("epsilon", "ε", 0.01),
    ),
    SystemVariant.CHEN_LEE: (
        Adjustment("p", "p", 0.1),
        Adjustment("q", "q", 0.1),
        Adjustment("r", "r", 0.01),
    ),
}
