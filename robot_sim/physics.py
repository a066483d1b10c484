"""Physics update routines for the cube robots."""

from __future__ import annotations

import math
import random
from typing import Optional

import numpy as np

from .constants import (
    AXIS_ROTATION_DISTANCE,
    FULL_ROTATION,
    GRAVITY_ACCELERATION,
    GRAVITY_VECTOR,
    INERTIA_SCALE,
    LANDING_JITTER_RANGE,
    REST_ANGLE,
    ROBOT_SIZE,
    TIME_STEP,
    TIPPING_POINT_ANGLE,
)
from .models import Direction, MovementAxis, Phase, PhysicsStep, Robot, RuntimeInputs

# Vertical component of the angular velocity; only gravity feeds it.
_GRAVITY_AXIS = 1


def moment_of_inertia(mass: float) -> float:
    """Solid cube approximation with the edge scaled down by ``INERTIA_SCALE``."""

    edge = ROBOT_SIZE / INERTIA_SCALE
    return (1.0 / 6.0) * mass * edge * edge


def calculate_physics(
    robot: Robot,
    inputs: RuntimeInputs,
    movement: Optional[MovementAxis] = None,
    time_step: float = TIME_STEP,
) -> PhysicsStep:
    """Accumulate piston-driven accelerations into the robot's velocities.

    The piston acts at the fixed tipping-point angle rather than the live tilt.
    Gravity torque uses the live tilt but is only reported; the tipping phase
    adds its own gravity term in :func:`move`.
    """

    movement = movement or robot.direction.movement
    mass = inputs.mass
    force = inputs.piston_force
    tilt = float(robot.rotation[movement.rotation_axis])

    gravity_torque = np.array(
        [0.0, -mass * AXIS_ROTATION_DISTANCE * GRAVITY_ACCELERATION * math.sin(tilt), 0.0]
    )

    lever = force * AXIS_ROTATION_DISTANCE * math.sin(TIPPING_POINT_ANGLE)
    piston_torque = np.array([lever, 0.0, lever])

    push = force * math.cos(TIPPING_POINT_ANGLE)
    translation_force = np.array([push, 0.0, push])

    inertia = moment_of_inertia(mass)
    angular_acceleration = piston_torque / inertia
    translational_acceleration = translation_force / mass

    robot.angular_velocity += angular_acceleration * time_step
    robot.translational_velocity += translational_acceleration * time_step

    return PhysicsStep(
        gravity_torque=gravity_torque,
        piston_torque=piston_torque,
        translation_force=translation_force,
        moment_of_inertia=inertia,
        angular_acceleration=angular_acceleration,
        translational_acceleration=translational_acceleration,
    )


def phase_of(robot: Robot, direction: Optional[Direction] = None) -> Phase:
    """Return the tilt phase for the robot's current pose."""

    if direction is None:
        return robot.phase()
    return Phase.from_angle(float(robot.rotation[Direction(direction).movement.rotation_axis]))


def _advance(robot: Robot, movement: MovementAxis, angular_speed: float, time_step: float) -> None:
    robot.rotation[movement.rotation_axis] += movement.rotation_sign * angular_speed * time_step
    # Translation is applied per frame without the time step.
    robot.position[movement.translation_axis] += (
        movement.translation_sign * robot.translational_velocity[movement.velocity_axis]
    )
    robot.update_bounding_box()


def _track_piston(robot: Robot, movement: MovementAxis, time_step: float) -> None:
    piston = robot.piston
    piston.rotation[movement.rotation_axis] = -movement.rotation_sign * TIPPING_POINT_ANGLE
    piston.position[1] -= robot.angular_velocity[movement.velocity_axis] * time_step
    piston.position[movement.translation_axis] += (
        movement.translation_sign
        * robot.translational_velocity[movement.velocity_axis]
        * time_step
    )


def _land(robot: Robot, movement: MovementAxis, rng: random.Random) -> None:
    robot.angular_velocity[:] = 0.0
    robot.translational_velocity[:] = 0.0
    robot.rotation[movement.rotation_axis] = REST_ANGLE
    robot.rotation[1] = rng.uniform(*LANDING_JITTER_RANGE)
    robot.piston.reset()
    robot.update_bounding_box()


def move(
    robot: Robot,
    direction: Direction,
    inputs: RuntimeInputs,
    rng: Optional[random.Random] = None,
    time_step: float = TIME_STEP,
) -> Phase:
    """Advance one frame of movement in ``direction``.

    Returns the phase reached during the frame; ``Phase.LANDED`` means the
    robot completed a quarter turn and was reset to rest.
    """

    rng = rng or random
    movement = Direction(direction).movement

    calculate_physics(robot, inputs, movement, time_step)
    _advance(robot, movement, robot.angular_velocity[movement.velocity_axis], time_step)

    if abs(robot.rotation[movement.rotation_axis]) < TIPPING_POINT_ANGLE:
        _track_piston(robot, movement, time_step)
        return Phase.RESTING

    robot.angular_velocity += GRAVITY_VECTOR * time_step
    _advance(robot, movement, robot.angular_velocity[_GRAVITY_AXIS], time_step)

    if abs(robot.rotation[movement.rotation_axis]) >= FULL_ROTATION:
        _land(robot, movement, rng)
        return Phase.LANDED
    return Phase.TIPPING


def move_away(robot: Robot, inputs: RuntimeInputs, rng: Optional[random.Random] = None) -> Phase:
    return move(robot, Direction.AWAY, inputs, rng)


def move_closer(robot: Robot, inputs: RuntimeInputs, rng: Optional[random.Random] = None) -> Phase:
    return move(robot, Direction.CLOSER, inputs, rng)


def move_left(robot: Robot, inputs: RuntimeInputs, rng: Optional[random.Random] = None) -> Phase:
    return move(robot, Direction.LEFT, inputs, rng)


def move_right(robot: Robot, inputs: RuntimeInputs, rng: Optional[random.Random] = None) -> Phase:
    return move(robot, Direction.RIGHT, inputs, rng)


__all__ = [
    "calculate_physics",
    "moment_of_inertia",
    "move",
    "move_away",
    "move_closer",
    "move_left",
    "move_right",
    "phase_of",
]
