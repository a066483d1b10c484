"""Piston-driven cube robot simulation."""

from .models import Direction, Robot, RuntimeInputs
from .simulation import SimulationContext

__all__ = ["Direction", "Robot", "RuntimeInputs", "SimulationContext"]
