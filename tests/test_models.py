import math

import numpy as np
import pytest

from robot_sim.constants import FULL_ROTATION
from robot_sim.errors import InvalidRuntimeInput
from robot_sim.models import BoundingBox, Direction, Phase, Robot, RuntimeInputs


@pytest.mark.parametrize(
    "direction, flipped",
    [(1, 2), (2, 1), (3, 4), (4, 3)],
)
def test_direction_flip_pairs(direction, flipped):
    assert Direction(direction).flipped() == flipped


def test_direction_axes():
    assert Direction.AWAY.along_z and Direction.CLOSER.along_z
    assert not Direction.LEFT.along_z
    assert Direction.LEFT.movement.rotation_axis == 2
    assert Direction.AWAY.movement.translation_axis == 2


def test_bounding_box_from_center_orders_corners():
    box = BoundingBox.from_center(np.array([1.0, 2.0, 3.0]), np.array([-1.0, 0.5, 2.0]))
    assert np.all(box.min <= box.max)
    assert box.size() == pytest.approx([2.0, 1.0, 4.0])


def test_bounding_box_intersection_is_symmetric():
    box_a = BoundingBox.from_center(np.zeros(3))
    box_b = BoundingBox.from_center(np.array([1.9, 0.0, -1.9]))
    box_c = BoundingBox.from_center(np.array([0.0, 2.5, 0.0]))
    assert box_a.intersects(box_b) and box_b.intersects(box_a)
    assert not box_a.intersects(box_c) and not box_c.intersects(box_a)


@pytest.mark.parametrize(
    "angle, phase",
    [
        (0.0, Phase.RESTING),
        (math.radians(44.9), Phase.RESTING),
        (-math.radians(45), Phase.TIPPING),
        (FULL_ROTATION, Phase.LANDED),
    ],
)
def test_phase_from_angle(angle, phase):
    assert Phase.from_angle(angle) is phase


def test_robot_tracks_bounding_box():
    robot = Robot(position=[4.0, 1.3, -2.0], direction=3)
    assert robot.direction is Direction.LEFT
    assert robot.bounding_box.min == pytest.approx([3.0, 0.3, -3.0])
    robot.position[0] = 6.0
    robot.update_bounding_box()
    assert robot.bounding_box.max[0] == pytest.approx(7.0)


def test_runtime_inputs_from_sliders():
    inputs = RuntimeInputs.from_sliders(50, 50)
    assert inputs.piston_force == pytest.approx(0.5)
    assert inputs.mass == pytest.approx(0.05)


@pytest.mark.parametrize(
    "force, mass",
    [(0.5, 0.0), (0.5, -0.01), (0.5, float("nan")), (-0.1, 0.05), (float("inf"), 0.05)],
)
def test_runtime_inputs_reject_degenerate_values(force, mass):
    with pytest.raises(InvalidRuntimeInput):
        RuntimeInputs(piston_force=force, mass=mass)
