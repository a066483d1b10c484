"""Data models used across the cube robot simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Tuple

import numpy as np

from .constants import (
    FULL_ROTATION,
    PISTON_FACE_LOCATION,
    ROBOT_HALF_EXTENTS,
    TIPPING_POINT_ANGLE,
)
from .errors import InvalidRuntimeInput


@dataclass(frozen=True)
class MovementAxis:
    """Axis pair and sign conventions for one movement variant.

    ``rotation_axis`` is the Euler angle the robot tips around,
    ``translation_axis`` the position component it slides along and
    ``velocity_axis`` the velocity component driving both.
    """

    rotation_axis: int
    translation_axis: int
    velocity_axis: int
    rotation_sign: float
    translation_sign: float


class Direction(IntEnum):
    AWAY = 1
    CLOSER = 2
    LEFT = 3
    RIGHT = 4

    def flipped(self) -> "Direction":
        return _FLIPPED[self]

    @property
    def movement(self) -> MovementAxis:
        return _MOVEMENTS[self]

    @property
    def along_z(self) -> bool:
        return self in (Direction.AWAY, Direction.CLOSER)


_FLIPPED = {
    Direction.AWAY: Direction.CLOSER,
    Direction.CLOSER: Direction.AWAY,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_MOVEMENTS = {
    Direction.AWAY: MovementAxis(0, 2, 2, -1.0, -1.0),
    Direction.CLOSER: MovementAxis(0, 2, 2, 1.0, 1.0),
    Direction.LEFT: MovementAxis(2, 0, 0, 1.0, -1.0),
    Direction.RIGHT: MovementAxis(2, 0, 0, -1.0, 1.0),
}


class Phase(Enum):
    """Tilt phase inferred from the primary rotation angle."""

    RESTING = "resting"
    TIPPING = "tipping"
    LANDED = "landed"

    @classmethod
    def from_angle(cls, angle: float) -> "Phase":
        magnitude = abs(angle)
        if magnitude >= FULL_ROTATION:
            return cls.LANDED
        if magnitude >= TIPPING_POINT_ANGLE:
            return cls.TIPPING
        return cls.RESTING


@dataclass
class BoundingBox:
    min: np.ndarray
    max: np.ndarray

    @classmethod
    def from_center(
        cls, center: np.ndarray, half_extents: np.ndarray = ROBOT_HALF_EXTENTS
    ) -> "BoundingBox":
        center = np.asarray(center, dtype=float)
        half_extents = np.abs(np.asarray(half_extents, dtype=float))
        return cls(min=center - half_extents, max=center + half_extents)

    def intersects(self, other: "BoundingBox") -> bool:
        """Closed-interval overlap test on all three axes."""

        return bool(np.all(self.max >= other.min) and np.all(self.min <= other.max))

    def size(self) -> np.ndarray:
        return self.max - self.min


@dataclass
class Piston:
    """Local transform of the bottom piston, relative to the robot body."""

    position: np.ndarray = field(
        default_factory=lambda: np.array([0.0, -PISTON_FACE_LOCATION, 0.0])
    )
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def reset(self) -> None:
        self.position = np.array([0.0, -PISTON_FACE_LOCATION, 0.0])


@dataclass
class RuntimeInputs:
    """Piston force and body mass read by every physics step."""

    piston_force: float
    mass: float

    def __post_init__(self) -> None:
        self.piston_force = float(self.piston_force)
        self.mass = float(self.mass)
        if not math.isfinite(self.piston_force) or self.piston_force < 0.0:
            raise InvalidRuntimeInput(
                f"piston force must be a finite non-negative number, got {self.piston_force}"
            )
        if not math.isfinite(self.mass) or self.mass <= 0.0:
            raise InvalidRuntimeInput(f"mass must be a finite positive number, got {self.mass}")

    @classmethod
    def from_sliders(cls, piston_output: float, mass_grams: float) -> "RuntimeInputs":
        return cls(piston_force=piston_output / 100.0, mass=mass_grams / 1000.0)


@dataclass
class Robot:
    """A cube robot driven by the piston under its body."""

    position: np.ndarray
    direction: Direction = Direction.AWAY
    name: str = "Robot"
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    angular_velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    translational_velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    piston: Piston = field(default_factory=Piston)
    bounding_box: BoundingBox = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.position = np.array(self.position, dtype=float)
        self.rotation = np.array(self.rotation, dtype=float)
        self.angular_velocity = np.array(self.angular_velocity, dtype=float)
        self.translational_velocity = np.array(self.translational_velocity, dtype=float)
        self.direction = Direction(self.direction)
        self.update_bounding_box()

    def update_bounding_box(self) -> None:
        self.bounding_box = BoundingBox.from_center(self.position)

    def primary_angle(self) -> float:
        return float(self.rotation[self.direction.movement.rotation_axis])

    def phase(self) -> Phase:
        return Phase.from_angle(self.primary_angle())


@dataclass
class PhysicsStep:
    """Quantities evaluated by a single physics step."""

    gravity_torque: np.ndarray
    piston_torque: np.ndarray
    translation_force: np.ndarray
    moment_of_inertia: float
    angular_acceleration: np.ndarray
    translational_acceleration: np.ndarray


@dataclass
class CollisionReport:
    pairs: List[Tuple[int, int]] = field(default_factory=list)
    boundary_hits: List[int] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.pairs) + len(self.boundary_hits)


@dataclass
class FrameReport:
    frame: int
    collisions: CollisionReport
    phase_counts: Dict[Phase, int] = field(default_factory=dict)


@dataclass
class HeadlessSummary:
    frames: int
    robot_count: int
    collision_counts: List[int] = field(default_factory=list)
    boundary_counts: List[int] = field(default_factory=list)
    tipping_counts: List[int] = field(default_factory=list)
    landings: int = 0

    @property
    def total_collisions(self) -> int:
        return sum(self.collision_counts)


__all__ = [
    "BoundingBox",
    "CollisionReport",
    "Direction",
    "FrameReport",
    "HeadlessSummary",
    "MovementAxis",
    "Phase",
    "PhysicsStep",
    "Piston",
    "Robot",
    "RuntimeInputs",
]
