"""An orthographic 2D camera that feeds its matrix to a shader."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

import numpy as np

from threesisters.transforms import ortho, rotate_z, translate


class MatrixTarget(Protocol):
    """Anything that accepts a named 4x4 matrix, such as a shader program."""

    def set_matrix4(
        self, name: str, matrix: np.ndarray, use_shader: bool = False
    ) -> Any:
        ...


def _dimension(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError("camera dimensions must be non-negative integers")
    return value


@dataclass(eq=False)
class OrthoCamera:
    """Views the scene orthographically from ``position`` over a window."""

    width: int = 0
    height: int = 0
    position: np.ndarray = field(default_factory=lambda: np.zeros(2))

    def __post_init__(self) -> None:
        self.set_dimensions(self.width, self.height)
        self.position = np.array(self.position, dtype=float)
        if self.position.shape != (2,):
            raise ValueError("camera position must be a 2D vector")

    def set_dimensions(self, width: int, height: int) -> None:
        """Set both the width and the height of the view."""
        self.width = _dimension(width)
        self.height = _dimension(height)

    def projection_view(self) -> np.ndarray:
        """Return the combined projection and view matrix."""
        projection = ortho(0.0, float(self.width), 0.0, float(self.height), -1.0, 1.0)
        x, y = self.position
        view = np.linalg.inv(translate(x, y, 0.0) @ rotate_z(0.0))
        return projection @ view

    def calculate_projection_view(self, shader: MatrixTarget) -> np.ndarray:
        """Compute the projection view, hand it to ``shader`` and return it."""
        matrix = self.projection_view()
        shader.set_matrix4("projectionView", matrix, True)
        return matrix