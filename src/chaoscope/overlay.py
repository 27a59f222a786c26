"""
Text shown in the UI overlay.
"""

from typing import List

from chaoscope.controls import SLOT_LABELS
from chaoscope.core.simulation import SimulationState
from chaoscope.core.systems import SystemVariant

HELP_LINE = "Press H to hide UI, R to reset particles, ESC to quit"


def parameter_line(state: SimulationState) -> str:
    params = state.parameters
    parts = [
        f"{label}: {adj.symbol}={getattr(params, adj.name):.2f}"
        for label, adj in zip(SLOT_LABELS, state.system.adjustments)
    ]
    line = f"Parameters ({', '.join(parts)})"
    if state.system is SystemVariant.AIZAWA:
        # beta is shared with Lorenz and has no key of its own here
        line += f" (BETA: {params.beta:.2f})"
    return line


def overlay_lines(state: SimulationState) -> List[str]:
    """Lines of the overlay, top to bottom."""
    trails = "Enabled" if state.show_trails else "Disabled"
    return [
        f"System: {state.system.display_name} (Press 1-4 to change)",
        parameter_line(state),
        f"Time Scale: {state.time_scale:.2f}x (Z/X to adjust)",
        f"Particles: {state.particle_count} (C/V to adjust)",
        f"Trails: {trails} (T to toggle)",
        HELP_LINE,
    ]
