import random

import numpy as np
import pytest

from robot_sim.constants import SPAWN_HEIGHT
from robot_sim.models import Direction, Robot, RuntimeInputs


@pytest.fixture
def inputs() -> RuntimeInputs:
    return RuntimeInputs(piston_force=0.5, mass=0.05)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def make_robot():
    def _make(x: float = 0.0, z: float = 0.0, direction: Direction = Direction.AWAY, **kwargs) -> Robot:
        return Robot(position=np.array([x, SPAWN_HEIGHT, z]), direction=direction, **kwargs)

    return _make
