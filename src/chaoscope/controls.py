"""
Keyboard bindings.

Keys arrive as symbolic names (``pygame.key.name`` output such as "q",
"1", "backspace", "escape") and are applied directly to a SimulationState.

    1-4        switch system (Lorenz, Rossler, Aizawa, Chen-Lee)
    Q/A W/S E/D  raise/lower the system's first three coefficients
    R/F        Aizawa: raise/lower epsilon; otherwise reseed
    Backspace  reseed
    Z/X        time scale +/- 0.1
    C/V        particle count +/- 5 (reseeds)
    T / H      toggle trails / overlay
    Escape     quit
"""

from typing import Dict, Tuple

from chaoscope.core.simulation import (
    PARTICLE_COUNT_STEP,
    TIME_SCALE_STEP,
    SimulationState,
)
from chaoscope.core.systems import SystemVariant

SYSTEM_KEYS: Dict[str, SystemVariant] = {
    "1": SystemVariant.LORENZ,
    "2": SystemVariant.ROSSLER,
    "3": SystemVariant.AIZAWA,
    "4": SystemVariant.CHEN_LEE,
}

# key -> (coefficient slot, direction)
PARAMETER_KEYS: Dict[str, Tuple[int, int]] = {
    "q": (0, 1),
    "a": (0, -1),
    "w": (1, 1),
    "s": (1, -1),
    "e": (2, 1),
    "d": (2, -1),
    "r": (3, 1),
    "f": (3, -1),
}

# Overlay labels per slot, in the same order as PARAMETER_KEYS
SLOT_LABELS: Tuple[str, ...] = ("Q/A", "W/S", "E/D", "R/F")

QUIT_KEY = "escape"


def handle_key(state: SimulationState, key: str) -> bool:
    """
    Apply the binding for ``key`` to ``state``.

    Unknown keys are ignored.

    Returns:
        False if the key asks the viewer to quit, True otherwise.
    """
    key = key.lower()

    if key == QUIT_KEY:
        return False

    if key in SYSTEM_KEYS:
        state.switch_variant(SYSTEM_KEYS[key])
    elif key in PARAMETER_KEYS:
        slot, direction = PARAMETER_KEYS[key]
        # R/F fall back to a reseed on systems without a fourth coefficient
        if not state.adjust_parameter(slot, direction):
            state.reseed()
    elif key == "backspace":
        state.reseed()
    elif key == "z":
        state.set_time_scale(TIME_SCALE_STEP)
    elif key == "x":
        state.set_time_scale(-TIME_SCALE_STEP)
    elif key == "c":
        state.change_particle_count(PARTICLE_COUNT_STEP)
    elif key == "v":
        state.change_particle_count(-PARTICLE_COUNT_STEP)
    elif key == "t":
        state.toggle_trails()
    elif key == "h":
        state.toggle_ui()

    return True
