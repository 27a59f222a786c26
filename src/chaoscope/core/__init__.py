"""
Numerical core: attractor kinetics, particles, trails and simulation state.
"""

from chaoscope.core.parameters import ParameterSet
from chaoscope.core.particle import Particle
from chaoscope.core.simulation import SimulationState
from chaoscope.core.systems import SystemVariant
from chaoscope.core.trail import TrailBuffer
