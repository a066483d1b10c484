"""Exception types raised by the cube robot simulation."""

from __future__ import annotations


class SimulationError(Exception):
    """Base exception for simulation-related errors."""


class ConfigurationError(SimulationError):
    """Raised when start-up configuration is invalid."""


class InvalidRuntimeInput(SimulationError):
    """Raised when the piston force or mass cannot drive the physics step."""


class PlacementError(SimulationError):
    """Raised when the requested robots cannot be placed in the field."""

    def __init__(self, placed: int, requested: int, attempts: int) -> None:
        super().__init__(
            f"cannot place requested count in field: placed {placed} of {requested} "
            f"robots, gave up after {attempts} attempts"
        )
        self.placed = placed
        self.requested = requested
        self.attempts = attempts


__all__ = [
    "SimulationError",
    "ConfigurationError",
    "InvalidRuntimeInput",
    "PlacementError",
]
