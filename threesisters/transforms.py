"""4x4 transformation matrices for column vectors (``matrix @ vector``)."""

from __future__ import annotations

import math

import numpy as np


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Return an orthographic projection mapping the box onto [-1, 1]^3."""
    if left == right or bottom == top or near == far:
        raise ValueError("orthographic bounds must have non-zero extent")
    width = right - left
    height = top - bottom
    depth = far - near
    return np.array(
        [
            [2.0 / width, 0.0, 0.0, -(right + left) / width],
            [0.0, 2.0 / height, 0.0, -(top + bottom) / height],
            [0.0, 0.0, -2.0 / depth, -(far + near) / depth],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def translate(x: float, y: float, z: float) -> np.ndarray:
    """Return a translation by ``(x, y, z)``."""
    matrix = np.eye(4)
    matrix[:3, 3] = (x, y, z)
    return matrix


def rotate_z(angle: float) -> np.ndarray:
    """Return a counter-clockwise rotation about the z axis, in radians."""
    c = math.cos(angle)
    s = math.sin(angle)
    matrix = np.eye(4)
    matrix[0, 0] = c
    matrix[0, 1] = -s
    matrix[1, 0] = s
    matrix[1, 1] = c
    return matrix


def scale(x: float, y: float, z: float) -> np.ndarray:
    """Return a scaling by ``(x, y, z)``."""
    return np.diag([float(x), float(y), float(z), 1.0])