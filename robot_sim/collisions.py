"""Collision detection and scripted response for cube robots."""

from __future__ import annotations

import logging
from typing import Sequence

from .constants import FIELD_HALF_EXTENT, PISTON_FACE_LOCATION
from .models import CollisionReport, Robot

logger = logging.getLogger(__name__)


def flip_direction(robot: Robot) -> None:
    """Reverse the robot's movement along its current axis."""

    robot.direction = robot.direction.flipped()


def sync_piston(robot: Robot) -> None:
    """Realign the bottom piston with the body after a direction flip."""

    if robot.direction.along_z:
        robot.piston.rotation[0] = robot.rotation[0]
        robot.piston.position[1] = -PISTON_FACE_LOCATION
    else:
        robot.piston.rotation[0] = -robot.rotation[0]
        robot.piston.position[1] = PISTON_FACE_LOCATION


def out_of_bounds(robot: Robot, half_extent: float = FIELD_HALF_EXTENT) -> bool:
    x = robot.position[0]
    z = robot.position[2]
    return bool(x < -half_extent or x > half_extent or z < -half_extent or z > half_extent)


def _respond(robot: Robot) -> None:
    flip_direction(robot)
    sync_piston(robot)


def detect_collisions(robots: Sequence[Robot]) -> CollisionReport:
    """Flip every robot that left the field or overlaps another robot.

    Each unordered pair is tested once. A robot touching several others
    flips once per contact; robots outside the field are not pulled back.
    """

    report = CollisionReport()
    for i, robot_a in enumerate(robots):
        if out_of_bounds(robot_a):
            _respond(robot_a)
            report.boundary_hits.append(i)
            logger.debug("%s crossed the field boundary at %s", robot_a.name, robot_a.position)

        for j in range(i + 1, len(robots)):
            robot_b = robots[j]
            if robot_a.bounding_box.intersects(robot_b.bounding_box):
                _respond(robot_a)
                _respond(robot_b)
                report.pairs.append((i, j))
                logger.debug("%s collided with %s", robot_a.name, robot_b.name)
    return report


__all__ = ["detect_collisions", "flip_direction", "out_of_bounds", "sync_piston"]
