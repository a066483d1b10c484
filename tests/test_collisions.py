import numpy as np
import pytest

from robot_sim.collisions import detect_collisions, flip_direction, out_of_bounds, sync_piston
from robot_sim.constants import PISTON_FACE_LOCATION
from robot_sim.models import Direction


def test_overlapping_pair_flips_both_robots(make_robot):
    robot_a = make_robot(0.0, 0.0, Direction.AWAY)
    robot_b = make_robot(1.5, 0.0, Direction.LEFT)

    report = detect_collisions([robot_a, robot_b])

    assert report.pairs == [(0, 1)]
    assert robot_a.direction is Direction.CLOSER
    assert robot_b.direction is Direction.RIGHT


def test_touching_boxes_count_as_overlap(make_robot):
    robot_a = make_robot(0.0, 0.0, Direction.CLOSER)
    robot_b = make_robot(2.0, 0.0, Direction.RIGHT)

    detect_collisions([robot_a, robot_b])

    assert robot_a.direction is Direction.AWAY
    assert robot_b.direction is Direction.LEFT


def test_separated_robots_keep_direction(make_robot):
    robots = [make_robot(-5.0, 0.0, Direction.AWAY), make_robot(5.0, 0.0, Direction.LEFT)]
    report = detect_collisions(robots)

    assert report.count == 0
    assert [robot.direction for robot in robots] == [Direction.AWAY, Direction.LEFT]


def test_robot_touching_two_others_flips_twice(make_robot):
    middle = make_robot(0.0, 0.0, Direction.AWAY)
    left = make_robot(-1.5, 0.0, Direction.LEFT)
    right = make_robot(1.5, 0.0, Direction.RIGHT)

    report = detect_collisions([middle, left, right])

    assert report.pairs == [(0, 1), (0, 2)]
    assert middle.direction is Direction.AWAY
    assert left.direction is Direction.RIGHT
    assert right.direction is Direction.LEFT


def test_boundary_flips_without_clamping(make_robot):
    robot = make_robot(25.0, 0.0, Direction.RIGHT)

    report = detect_collisions([robot])

    assert report.boundary_hits == [0]
    assert robot.direction is Direction.LEFT
    assert robot.position[0] == 25.0


@pytest.mark.parametrize("x, z, expected", [(20.0, 0.0, False), (-20.5, 0.0, True), (0.0, 21.0, True)])
def test_out_of_bounds_uses_strict_limit(make_robot, x, z, expected):
    assert out_of_bounds(make_robot(x, z)) is expected


def test_flip_direction_is_an_involution(make_robot):
    for direction in Direction:
        robot = make_robot(direction=direction)
        flip_direction(robot)
        assert robot.direction is not direction
        flip_direction(robot)
        assert robot.direction is direction


def test_sync_piston_follows_axis_convention(make_robot):
    along_z = make_robot(direction=Direction.CLOSER)
    along_z.rotation[0] = 0.3
    sync_piston(along_z)
    assert along_z.piston.rotation[0] == pytest.approx(0.3)
    assert along_z.piston.position[1] == pytest.approx(-PISTON_FACE_LOCATION)

    along_x = make_robot(direction=Direction.LEFT)
    along_x.rotation[0] = 0.3
    sync_piston(along_x)
    assert along_x.piston.rotation[0] == pytest.approx(-0.3)
    assert along_x.piston.position[1] == pytest.approx(PISTON_FACE_LOCATION)


def test_collision_pass_keeps_directions_valid(make_robot):
    robots = [make_robot(x, 0.0, Direction(1 + i % 4)) for i, x in enumerate(np.linspace(-3, 3, 6))]
    for _ in range(5):
        detect_collisions(robots)
        assert all(robot.direction in (1, 2, 3, 4) for robot in robots)
