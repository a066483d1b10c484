"""Core constants for the cube robot simulation."""

from __future__ import annotations

import math

import numpy as np

# Simulation constants
TIME_STEP = 1.0 / 360.0
GRAVITY_ACCELERATION = 9.8
GRAVITY_VECTOR = np.array([0.0, GRAVITY_ACCELERATION * 10.0, 0.0])
TIPPING_POINT_ANGLE = math.radians(45.0)
FULL_ROTATION = math.radians(90.0)
REST_ANGLE = math.radians(0.0)

ROBOT_SIZE = 2.0
ROBOT_HALF_EXTENTS = np.array([ROBOT_SIZE, ROBOT_SIZE, ROBOT_SIZE]) / 2.0
AXIS_ROTATION_DISTANCE = (ROBOT_SIZE / 2.0) / 100.0
INERTIA_SCALE = 100.0
PISTON_SIZE = ROBOT_SIZE / 2.0 - 0.1
PISTON_FACE_LOCATION = PISTON_SIZE - 0.8
PISTON_LENGTH = 2.0

FIELD_HALF_EXTENT = 20.0
SPAWN_HALF_EXTENT = 18.0
SPAWN_HEIGHT = 1.3
LANDING_JITTER_RANGE = (-0.09, 0.01)
MAX_PLACEMENT_ATTEMPTS = 10_000

# Slider units: piston force = output / 100, mass = grams / 1000
DEFAULT_PISTON_OUTPUT = 50
DEFAULT_MASS_GRAMS = 50
PISTON_OUTPUT_RANGE = (0, 100)
MASS_GRAMS_RANGE = (1, 100)
DEFAULT_NUM_ROBOTS = 1
MAX_SLIDER_ROBOTS = 20
DEFAULT_HEADLESS_FRAMES = 600

# Render constants
BACKGROUND_COLOR = (235, 235, 240)
FLOOR_COLORS = ((204, 204, 204), (255, 255, 255))
FLOOR_TILES = 16
ROBOT_COLOR = (51, 51, 51)
PISTON_COLOR = (0, 0, 0)
TEXT_COLOR = (20, 20, 20)
FRAME_RATE = 60
DEFAULT_CAMERA_DISTANCE = FIELD_HALF_EXTENT * 2.6
DEFAULT_CAMERA_PITCH = math.radians(-35.0)
DEFAULT_CAMERA_YAW = math.radians(-45.0)
FOV = math.radians(50.0)
NEAR_PLANE = 0.5
FAR_PLANE = 400.0

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

CUBE_VERTICES = [
    np.array([x, y, z])
    for x in (-1.0, 1.0)
    for y in (-1.0, 1.0)
    for z in (-1.0, 1.0)
]

CUBE_EDGES = [
    (0, 1),
    (0, 2),
    (0, 4),
    (1, 3),
    (1, 5),
    (2, 3),
    (2, 6),
    (3, 7),
    (4, 5),
    (4, 6),
    (5, 7),
    (6, 7),
]
