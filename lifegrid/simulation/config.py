"""Simulation configuration.

Defaults reproduce a 50x50 random board run for 1000 frames with a 150 ms
pause between frames. Any field can be overridden from LIFEGRID_*
environment variables (see .env.example) and then from the command line.
"""

import os
from typing import Any, Dict, Mapping, Optional

from ..core.errors import InvalidDimension

ENV_PREFIX = "LIFEGRID_"


class SimulationConfig:
    """Settings for one simulation run."""

    def __init__(self,
                 width: int = 50,
                 height: int = 50,
                 generations: int = 1000,
                 delay: float = 0.15,
                 pattern: Optional[str] = None,
                 seed: Optional[int] = None):
        """Initialize simulation configuration.

        Args:
            width: Grid width (cells, >= 1)
            height: Grid height (cells, >= 1)
            generations: Number of frames to play (>= 0)
            delay: Pause between frames in seconds (>= 0)
            pattern: Name of a seed pattern, or None for a random board
            seed: Random seed for the initial board (None = unseeded)

        Raises:
            InvalidDimension: If width or height is not positive
            ValueError: If generations or delay is negative
        """
        if width < 1 or height < 1:
            raise InvalidDimension(f"Grid dimensions must be positive, got {width}x{height}")
        if generations < 0:
            raise ValueError(f"generations must be >= 0, got {generations}")
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")

        self.width = width
        self.height = height
        self.generations = generations
        self.delay = delay
        self.pattern = pattern or None
        self.seed = seed

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'SimulationConfig':
        """Build a configuration from LIFEGRID_* variables over the defaults.

        Raises:
            ValueError: If a variable cannot be parsed
        """
        environ = os.environ if environ is None else environ
        converters = {
            'width': int,
            'height': int,
            'generations': int,
            'delay': float,
            'pattern': str,
            'seed': int,
        }

        kwargs: Dict[str, Any] = {}
        for name, convert in converters.items():
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is None or raw.strip() == '':
                continue
            try:
                kwargs[name] = convert(raw.strip())
            except ValueError:
                raise ValueError(f"Invalid value for {ENV_PREFIX}{name.upper()}: {raw!r}") from None
        return cls(**kwargs)

    def copy(self) -> 'SimulationConfig':
        """Create a copy of the configuration."""
        return SimulationConfig(**self.to_dict())

    def to_dict(self) -> Dict[str, Any]:
        return {
            'width': self.width,
            'height': self.height,
            'generations': self.generations,
            'delay': self.delay,
            'pattern': self.pattern,
            'seed': self.seed,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimulationConfig):
            return False
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        fields = ', '.join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"SimulationConfig({fields})"
