"""
Simulation state: the particle population and every live control.

One SimulationState is created per run and mutated in place by the key
bindings between frames. ``tick`` advances every particle by one explicit
forward Euler step of ``dt * time_scale``.
"""

from typing import TYPE_CHECKING, List, Optional, Tuple

import numpy as np

from chaoscope.core.geometry import SCREEN_CENTER, project_many
from chaoscope.core.kinetics import euler_step
from chaoscope.core.parameters import ParameterSet
from chaoscope.core.particle import Particle
from chaoscope.core.systems import SystemVariant
from chaoscope.core.trail import MAX_TRAIL_LENGTH
from chaoscope.utils.logging import get_logger

if TYPE_CHECKING:  # pragma: no cover
    from chaoscope.config import ViewerConfig

logger = get_logger(__name__)

DEFAULT_DT: float = 0.01
DEFAULT_PARTICLE_COUNT: int = 50

TIME_SCALE_MIN: float = 0.1
TIME_SCALE_MAX: float = 5.0
TIME_SCALE_STEP: float = 0.1

PARTICLE_COUNT_MIN: int = 5
PARTICLE_COUNT_MAX: int = 200
PARTICLE_COUNT_STEP: int = 5


def _clamp(value, low, high):
    return max(low, min(high, value))


class SimulationState:
    """
    Owns the particles, the active system, its parameters and the controls.

    Particles never interact, so ``tick`` gathers all states into one array,
    steps them together and scatters the results back, each particle
    receiving only its own row.
    """

    def __init__(
        self,
        system: SystemVariant = SystemVariant.LORENZ,
        parameters: Optional[ParameterSet] = None,
        dt: float = DEFAULT_DT,
        time_scale: float = 1.0,
        particle_count: int = DEFAULT_PARTICLE_COUNT,
        trail_length: int = MAX_TRAIL_LENGTH,
        show_trails: bool = True,
        show_ui: bool = True,
        origin: Tuple[float, float] = SCREEN_CENTER,
        seed: Optional[int] = None,
    ):
        self.rng = np.random.default_rng(seed)
        self.system = system
        self.parameters = parameters if parameters is not None else ParameterSet()
        self.dt = dt
        self.time_scale = _clamp(time_scale, TIME_SCALE_MIN, TIME_SCALE_MAX)
        self.particle_count = int(_clamp(particle_count, PARTICLE_COUNT_MIN, PARTICLE_COUNT_MAX))
        self.trail_length = trail_length
        self.show_trails = show_trails
        self.show_ui = show_ui
        self.origin = origin

        self.particles: List[Particle] = []
        self.frame = 0
        self._diverged = 0

        self.reseed()

    @classmethod
    def from_config(cls, config: "ViewerConfig") -> "SimulationState":
        return cls(
            system=SystemVariant.from_name(config.system),
            parameters=config.build_parameters(),
            dt=config.dt,
            time_scale=config.time_scale,
            particle_count=config.particle_count,
            trail_length=config.trail_length,
            show_trails=config.show_trails,
            show_ui=config.show_ui,
            origin=(config.width / 2.0, config.height / 2.0),
            seed=config.seed,
        )

    @property
    def effective_dt(self) -> float:
        return self.dt * self.time_scale

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def tick(self) -> None:
        """Advance every particle by one Euler step."""
        self.frame += 1
        if not self.particles:
            return

        pts = self.states()
        new_pts = euler_step(self.system, pts, self.parameters, self.effective_dt)
        screen = project_many(new_pts, self.system, self.origin)

        for particle, (x, y, z), pos in zip(self.particles, new_pts.tolist(), screen.tolist()):
            particle.update(x, y, z, pos)

        diverged = int((~np.isfinite(new_pts)).any(axis=1).sum())
        if diverged > self._diverged:
            logger.debug(
                "%d of %d %s particles no longer finite (frame %d)",
                diverged, len(self.particles), self.system.display_name, self.frame,
            )
        self._diverged = diverged

    def states(self) -> np.ndarray:
        """Current particle states as an (N, 3) array."""
        return np.array([p.position for p in self.particles], dtype=np.float64).reshape(-1, 3)

    # ------------------------------------------------------------------
    # Reconfiguration
    # ------------------------------------------------------------------

    def reseed(self) -> None:
        """Discard all particles and sample ``particle_count`` fresh ones."""
        (x0, x1), (y0, y1), (z0, z1) = self.system.init_box
        n = self.particle_count
        xs = self.rng.uniform(x0, x1, n)
        ys = self.rng.uniform(y0, y1, n)
        zs = self.rng.uniform(z0, z1, n)
        self.particles = [
            Particle(x, y, z, rng=self.rng, trail_length=self.trail_length)
            for x, y, z in zip(xs.tolist(), ys.tolist(), zs.tolist())
        ]
        self._diverged = 0
        logger.debug("Reseeded %d particles for %s", n, self.system.display_name)

    def switch_variant(self, variant: SystemVariant) -> bool:
        """Activate ``variant``; reseeds only when it differs. Returns whether it did."""
        if variant == self.system:
            return False
        logger.debug("Switching %s -> %s", self.system.display_name, variant.display_name)
        self.system = variant
        self.reseed()
        return True

    def set_particle_count(self, n: int) -> bool:
        """Clamp ``n`` to the allowed range and reseed if the count changed."""
        n = int(_clamp(n, PARTICLE_COUNT_MIN, PARTICLE_COUNT_MAX))
        if n == self.particle_count:
            return False
        self.particle_count = n
        self.reseed()
        return True

    def change_particle_count(self, delta: int) -> None:
        """Shift the count by ``delta`` (clamped) and always reseed."""
        self.particle_count = int(
            _clamp(self.particle_count + delta, PARTICLE_COUNT_MIN, PARTICLE_COUNT_MAX)
        )
        self.reseed()

    def adjust_parameter(self, slot: int, direction: int) -> bool:
        """
        Nudge the active system's coefficient in ``slot`` by one step.

        Args:
            slot: Index into ``system.adjustments`` (0 = Q/A ... 3 = R/F).
            direction: +1 to increase, -1 to decrease.

        Returns:
            False if the active system has no coefficient in that slot.
        """
        adjustments = self.system.adjustments
        if not 0 <= slot < len(adjustments):
            return False
        adj = adjustments[slot]
        self.parameters.nudge(adj.name, direction * adj.step)
        return True

    def set_time_scale(self, delta: float) -> float:
        """Shift the time scale by ``delta``, clamped to [0.1, 5.0]."""
        self.time_scale = _clamp(self.time_scale + delta, TIME_SCALE_MIN, TIME_SCALE_MAX)
        return self.time_scale

    def toggle_trails(self) -> bool:
        self.show_trails = not self.show_trails
        return self.show_trails

    def toggle_ui(self) -> bool:
        self.show_ui = not self.show_ui
        return self.show_ui
