"""
chaoscope: real-time particle viewer for chaotic attractors.

Lorenz, Rössler, Aizawa and Chen-Lee systems are integrated with forward
Euler for a population of independent particles and drawn with pygame.
"""

__version__ = "0.1.0"

from chaoscope.config import ViewerConfig
from chaoscope.core import ParameterSet, Particle, SimulationState, SystemVariant, TrailBuffer
