"""Run configuration for the cube robot simulation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .constants import (
    DEFAULT_HEADLESS_FRAMES,
    DEFAULT_MASS_GRAMS,
    DEFAULT_NUM_ROBOTS,
    DEFAULT_PISTON_OUTPUT,
    LOG_FORMAT,
    MASS_GRAMS_RANGE,
    PISTON_OUTPUT_RANGE,
)
from .errors import ConfigurationError
from .models import RuntimeInputs


def parse_num_robots(value: Optional[object], default: int = DEFAULT_NUM_ROBOTS) -> int:
    """Parse a robot count, falling back to ``default`` when unset or unparseable."""

    if value is None:
        return default
    try:
        count = int(str(value).strip())
    except ValueError:
        return default
    return count if count > 0 else default


@dataclass
class SimulationConfig:
    """Configuration for one simulation run."""

    num_robots: int = DEFAULT_NUM_ROBOTS
    piston_output: float = DEFAULT_PISTON_OUTPUT
    mass_grams: float = DEFAULT_MASS_GRAMS
    seed: Optional[int] = None
    headless: bool = False
    frames: int = DEFAULT_HEADLESS_FRAMES
    show_controls: bool = False
    plot: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        low, high = PISTON_OUTPUT_RANGE
        if not low <= self.piston_output <= high:
            raise ConfigurationError(
                f"piston output must be within {low}..{high}, got {self.piston_output}"
            )
        low, high = MASS_GRAMS_RANGE
        if not low <= self.mass_grams <= high:
            raise ConfigurationError(f"mass must be within {low}..{high} g, got {self.mass_grams}")
        if self.frames < 0:
            raise ConfigurationError(f"frame count must not be negative, got {self.frames}")

    @classmethod
    def from_args(cls, args) -> "SimulationConfig":
        """Create config from command-line arguments."""
        return cls(
            num_robots=parse_num_robots(args.num_robots),
            piston_output=args.piston_output,
            mass_grams=args.mass,
            seed=args.seed,
            headless=args.headless,
            frames=args.frames,
            show_controls=args.controls,
            plot=args.plot,
            log_level=args.log_level,
        )

    def runtime_inputs(self) -> RuntimeInputs:
        return RuntimeInputs.from_sliders(self.piston_output, self.mass_grams)


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)


__all__ = ["SimulationConfig", "configure_logging", "parse_num_robots"]
