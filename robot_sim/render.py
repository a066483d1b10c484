"""Rendering helpers for the robot simulation."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pygame

from .constants import (
    BACKGROUND_COLOR,
    CUBE_EDGES,
    CUBE_VERTICES,
    DEFAULT_CAMERA_DISTANCE,
    DEFAULT_CAMERA_PITCH,
    DEFAULT_CAMERA_YAW,
    FAR_PLANE,
    FIELD_HALF_EXTENT,
    FLOOR_COLORS,
    FLOOR_TILES,
    FOV,
    NEAR_PLANE,
    PISTON_COLOR,
    PISTON_LENGTH,
    ROBOT_COLOR,
    ROBOT_HALF_EXTENTS,
    TEXT_COLOR,
)
from .models import Robot

Segment = Tuple[np.ndarray, np.ndarray]


class CameraState:
    """Minimal free-fly camera for orbiting the field."""

    def __init__(
        self,
        position: Optional[np.ndarray] = None,
        yaw: float = DEFAULT_CAMERA_YAW,
        pitch: float = DEFAULT_CAMERA_PITCH,
        move_speed: float = 15.0,
        mouse_sensitivity: float = 0.005,
    ) -> None:
        self.yaw = yaw
        self.pitch = pitch
        self.move_speed = move_speed
        self.mouse_sensitivity = mouse_sensitivity
        if position is None:
            position = -self.forward() * DEFAULT_CAMERA_DISTANCE
        self.position = np.asarray(position, dtype=float)

    def rotation_matrix(self) -> np.ndarray:
        cos_y = math.cos(self.yaw)
        sin_y = math.sin(self.yaw)
        cos_p = math.cos(self.pitch)
        sin_p = math.sin(self.pitch)

        rot_yaw = np.array(
            [
                [cos_y, 0.0, sin_y],
                [0.0, 1.0, 0.0],
                [-sin_y, 0.0, cos_y],
            ]
        )
        rot_pitch = np.array(
            [
                [1.0, 0.0, 0.0],
                [0.0, cos_p, -sin_p],
                [0.0, sin_p, cos_p],
            ]
        )
        return rot_pitch @ rot_yaw

    def forward(self) -> np.ndarray:
        return self.rotation_matrix()[2]

    def right(self) -> np.ndarray:
        return self.rotation_matrix()[0]

    def up(self) -> np.ndarray:
        return self.rotation_matrix()[1]


def euler_matrix(angles: np.ndarray) -> np.ndarray:
    """Rotation matrix for intrinsic X, Y, Z Euler angles."""

    ax, ay, az = (float(a) for a in angles)
    cx, sx = math.cos(ax), math.sin(ax)
    cy, sy = math.cos(ay), math.sin(ay)
    cz, sz = math.cos(az), math.sin(az)
    rot_x = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])
    rot_y = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    rot_z = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])
    return rot_x @ rot_y @ rot_z


def robot_edges(robot: Robot) -> Tuple[List[Segment], Segment]:
    """Return the cube edges and the bottom piston segment in world space."""

    body = euler_matrix(robot.rotation)
    corners = [robot.position + body @ (vertex * ROBOT_HALF_EXTENTS) for vertex in CUBE_VERTICES]
    edges = [(corners[start], corners[end]) for start, end in CUBE_EDGES]

    piston_axis = euler_matrix(robot.piston.rotation) @ np.array([0.0, PISTON_LENGTH / 2.0, 0.0])
    local_a = robot.piston.position + piston_axis
    local_b = robot.piston.position - piston_axis
    piston = (robot.position + body @ local_a, robot.position + body @ local_b)
    return edges, piston


def project_point(
    point: np.ndarray,
    view_matrix: np.ndarray,
    screen_size: Tuple[int, int],
    camera_position: np.ndarray,
) -> Tuple[Optional[Tuple[int, int]], float]:
    """Project a 3D point into screen coordinates."""

    relative = point - camera_position
    view = view_matrix @ relative
    depth = float(view[2])
    if depth <= NEAR_PLANE or depth >= FAR_PLANE:
        return (None, depth)
    width, height = screen_size
    aspect = width / height if height else 1.0
    f = 1.0 / math.tan(FOV / 2.0)
    x_ndc = (view[0] * f / aspect) / depth
    y_ndc = (view[1] * f) / depth
    screen_x = int((x_ndc + 1.0) * 0.5 * width)
    screen_y = int((1.0 - y_ndc) * 0.5 * height)
    return (screen_x, screen_y), depth


def floor_tiles() -> List[Tuple[List[np.ndarray], Tuple[int, int, int]]]:
    """Checkerboard tiles covering the field at floor height."""

    tile = 2.0 * FIELD_HALF_EXTENT / FLOOR_TILES
    tiles = []
    for ix in range(FLOOR_TILES):
        for iz in range(FLOOR_TILES):
            x0 = -FIELD_HALF_EXTENT + ix * tile
            z0 = -FIELD_HALF_EXTENT + iz * tile
            corners = [
                np.array([x0, 0.0, z0]),
                np.array([x0 + tile, 0.0, z0]),
                np.array([x0 + tile, 0.0, z0 + tile]),
                np.array([x0, 0.0, z0 + tile]),
            ]
            tiles.append((corners, FLOOR_COLORS[(ix + iz) % 2]))
    return tiles


def draw_scene(
    screen: pygame.Surface,
    robots: Sequence[Robot],
    camera: CameraState,
    overlay_text: Optional[str] = None,
    font: Optional[pygame.font.Font] = None,
) -> None:
    """Render the floor, robot wireframes and pistons."""

    screen.fill(BACKGROUND_COLOR)
    screen_size = screen.get_size()
    view_matrix = camera.rotation_matrix()

    for corners, color in floor_tiles():
        projected = [project_point(c, view_matrix, screen_size, camera.position)[0] for c in corners]
        if any(point is None for point in projected):
            continue
        pygame.draw.polygon(screen, color, projected)

    segments: List[Tuple[Tuple[int, int], Tuple[int, int], float, Tuple[int, int, int], int]] = []
    for robot in robots:
        edges, piston = robot_edges(robot)
        for start, end, color, thickness in [(a, b, ROBOT_COLOR, 2) for a, b in edges] + [
            (piston[0], piston[1], PISTON_COLOR, 4)
        ]:
            proj_a = project_point(start, view_matrix, screen_size, camera.position)
            proj_b = project_point(end, view_matrix, screen_size, camera.position)
            if proj_a[0] is None or proj_b[0] is None:
                continue
            segments.append((proj_a[0], proj_b[0], (proj_a[1] + proj_b[1]) / 2.0, color, thickness))

    segments.sort(key=lambda item: item[2], reverse=True)
    for start, end, _, color, thickness in segments:
        pygame.draw.line(screen, color, start, end, thickness)

    if overlay_text and font:
        text_surface = font.render(overlay_text, True, TEXT_COLOR)
        screen.blit(text_surface, (10, 10))
    pygame.display.flip()


__all__ = [
    "CameraState",
    "draw_scene",
    "euler_matrix",
    "floor_tiles",
    "project_point",
    "robot_edges",
]
