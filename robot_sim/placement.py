"""Initial placement of robots inside the field."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

import numpy as np

from .constants import MAX_PLACEMENT_ATTEMPTS, SPAWN_HALF_EXTENT, SPAWN_HEIGHT
from .errors import ConfigurationError, PlacementError
from .models import Direction, Robot

logger = logging.getLogger(__name__)


def random_spawn_position(rng: random.Random, half_extent: float = SPAWN_HALF_EXTENT) -> np.ndarray:
    """Return a spawn point uniformly distributed over the square field."""

    x = rng.random() * 2.0 * half_extent - half_extent
    z = rng.random() * 2.0 * half_extent - half_extent
    return np.array([x, SPAWN_HEIGHT, z])


def random_direction(rng: random.Random) -> Direction:
    return rng.choice(list(Direction))


def initialize_robots(
    num_robots: int,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
    half_extent: float = SPAWN_HALF_EXTENT,
) -> List[Robot]:
    """Create ``num_robots`` robots with non-overlapping bounding boxes.

    Candidates overlapping an accepted robot are discarded and resampled.
    Each robot gets ``max_attempts`` tries before :class:`PlacementError`.
    """

    if num_robots < 1:
        raise ConfigurationError(f"robot count must be at least 1, got {num_robots}")
    if max_attempts < 1:
        raise ConfigurationError(f"placement attempts must be at least 1, got {max_attempts}")

    rng = rng or random.Random()
    robots: List[Robot] = []
    for index in range(num_robots):
        robot: Optional[Robot] = None
        for attempt in range(1, max_attempts + 1):
            candidate = Robot(
                position=random_spawn_position(rng, half_extent),
                name=f"Robot {index + 1}",
            )
            if not any(candidate.bounding_box.intersects(placed.bounding_box) for placed in robots):
                robot = candidate
                break
            logger.debug("Rejected overlapping spawn for %s (attempt %d)", candidate.name, attempt)
        if robot is None:
            logger.error("Placement failed after %d attempts for robot %d", max_attempts, index + 1)
            raise PlacementError(len(robots), num_robots, max_attempts)

        robot.direction = random_direction(rng)
        robots.append(robot)
    return robots


__all__ = ["initialize_robots", "random_direction", "random_spawn_position"]
