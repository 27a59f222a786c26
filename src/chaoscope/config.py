"""
Viewer configuration.

Defaults reproduce the classic 800x600 window with 50 Lorenz particles.
A JSON file can override any field, e.g.::

    {
        "system": "aizawa",
        "particle_count": 120,
        "seed": 7,
        "parameters": {"epsilon": 0.3}
    }
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from chaoscope.core.parameters import ParameterSet
from chaoscope.core.simulation import (
    DEFAULT_DT,
    DEFAULT_PARTICLE_COUNT,
    PARTICLE_COUNT_MAX,
    PARTICLE_COUNT_MIN,
    TIME_SCALE_MAX,
    TIME_SCALE_MIN,
)
from chaoscope.core.systems import SystemVariant
from chaoscope.core.trail import MAX_TRAIL_LENGTH


class ConfigError(ValueError):
    """Raised for unreadable or invalid configuration."""


_INT_FIELDS = ("width", "height", "fps", "particle_count", "trail_length",
               "particle_radius", "trail_width", "font_size")
_FLOAT_FIELDS = ("dt", "time_scale")
_BOOL_FIELDS = ("show_trails", "show_ui")
_COLOR_FIELDS = ("background_color", "text_color")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class ViewerConfig:
    """Configuration for the attractor viewer."""

    width: int = 800
    height: int = 600
    fps: int = 60

    # Simulation
    system: str = "lorenz"
    dt: float = DEFAULT_DT
    time_scale: float = 1.0
    particle_count: int = DEFAULT_PARTICLE_COUNT
    trail_length: int = MAX_TRAIL_LENGTH
    seed: Optional[int] = None
    parameters: Dict[str, float] = field(default_factory=dict)  # ParameterSet overrides

    # Display
    show_trails: bool = True
    show_ui: bool = True
    particle_radius: int = 2
    trail_width: int = 1
    background_color: Tuple[int, int, int] = (25, 25, 38)
    text_color: Tuple[int, int, int] = (255, 255, 255)
    font_size: int = 16

    def _check_types(self) -> None:
        for name in _INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        for name in _FLOAT_FIELDS:
            if not _is_number(getattr(self, name)):
                raise ConfigError(f"{name} must be a number, got {getattr(self, name)!r}")
        for name in _BOOL_FIELDS:
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be true or false, got {getattr(self, name)!r}")
        for name in _COLOR_FIELDS:
            color = getattr(self, name)
            if (
                not isinstance(color, (tuple, list))
                or len(color) != 3
                or not all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in color)
            ):
                raise ConfigError(f"{name} must be three integers in [0, 255], got {color!r}")

        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigError(f"seed must be an integer or null, got {self.seed!r}")
        if not isinstance(self.system, str):
            raise ConfigError(f"system must be a string, got {self.system!r}")
        if not isinstance(self.parameters, dict):
            raise ConfigError(f"parameters must be an object, got {self.parameters!r}")
        for key, value in self.parameters.items():
            if not _is_number(value):
                raise ConfigError(f"Parameter {key} must be a number, got {value!r}")

    def validate(self) -> "ViewerConfig":
        """Check types, ranges and names; returns self so calls can be chained."""
        self._check_types()
        self.parameters = {k: float(v) for k, v in self.parameters.items()}

        try:
            SystemVariant.from_name(self.system)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Window size must be positive, got {self.width}x{self.height}")
        if self.fps <= 0:
            raise ConfigError(f"fps must be positive, got {self.fps}")
        if self.dt <= 0:
            raise ConfigError(f"dt must be positive, got {self.dt}")
        if not TIME_SCALE_MIN <= self.time_scale <= TIME_SCALE_MAX:
            raise ConfigError(
                f"time_scale must be within [{TIME_SCALE_MIN}, {TIME_SCALE_MAX}], got {self.time_scale}"
            )
        if not PARTICLE_COUNT_MIN <= self.particle_count <= PARTICLE_COUNT_MAX:
            raise ConfigError(
                f"particle_count must be within [{PARTICLE_COUNT_MIN}, {PARTICLE_COUNT_MAX}], "
                f"got {self.particle_count}"
            )
        if self.trail_length < 1:
            raise ConfigError(f"trail_length must be at least 1, got {self.trail_length}")

        unknown = set(self.parameters) - set(ParameterSet.names())
        if unknown:
            raise ConfigError(f"Unknown parameters: {', '.join(sorted(unknown))}")
        return self

    def build_parameters(self) -> ParameterSet:
        """Defaults with this config's overrides applied."""
        return ParameterSet(**{k: float(v) for k, v in self.parameters.items()})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ViewerConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        values = dict(data)
        for key in _COLOR_FIELDS:
            if isinstance(values.get(key), list):
                values[key] = tuple(values[key])
        return cls(**values).validate()


def load_config(path: Path) -> ViewerConfig:
    """Read a JSON config file into a validated ViewerConfig."""
    path = Path(path)
    try:
        with open(path) as f:
            data = json.load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return ViewerConfig.from_dict(data)
