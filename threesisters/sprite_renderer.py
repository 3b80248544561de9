"""Batched rendering of sprite quads and debug lines."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Protocol, Sequence

import numpy as np

from threesisters.transforms import rotate_z, scale, translate

MAX_QUAD_COUNT = 1000
MAX_QUAD_VERTEX_COUNT = MAX_QUAD_COUNT * 4
MAX_QUAD_INDEX_COUNT = MAX_QUAD_COUNT * 6
MAX_LINE_COUNT = 1000
MAX_LINE_VERTEX_COUNT = MAX_LINE_COUNT * 2

QUAD_VERTEX_POSITIONS = np.array(
    [
        [-0.5, -0.5, 0.0, 1.0],
        [0.5, -0.5, 0.0, 1.0],
        [0.5, 0.5, 0.0, 1.0],
        [-0.5, 0.5, 0.0, 1.0],
    ]
)
TEXTURE_COORDINATES = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
WHITE = (1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True)
class QuadVertex:
    """One corner of a quad as handed to the backend."""

    position: tuple[float, float]
    tex_coords: tuple[float, float]
    tex_index: int
    color: tuple[float, float, float, float]


@dataclass(frozen=True)
class LineVertex:
    """One end of a line as handed to the backend."""

    position: tuple[float, float]
    color: tuple[float, float, float, float]


@dataclass
class RendererStats:
    """Counts of quads created and draw calls issued since the last reset."""

    quad_count: int = 0
    draw_count: int = 0


class RenderBackend(Protocol):
    """Receives finished batches and puts them on screen."""

    def draw_quads(self, vertices: Sequence[QuadVertex], index_count: int) -> Any:
        ...

    def draw_lines(self, vertices: Sequence[LineVertex]) -> Any:
        ...


def quad_indices(index_count: int) -> np.ndarray:
    """Return the triangle indices for ``index_count // 6`` quads."""
    if index_count < 0 or index_count % 6:
        raise ValueError("index count must be a non-negative multiple of 6")
    pattern = np.array([0, 1, 2, 2, 3, 0], dtype=np.uint32)
    offsets = np.arange(index_count // 6, dtype=np.uint32) * 4
    return (offsets[:, None] + pattern).reshape(-1)


def _vec(values: Any, length: int, what: str) -> tuple[float, ...]:
    array = np.asarray(values, dtype=float)
    if array.shape != (length,):
        raise ValueError(f"{what} must have {length} components")
    return tuple(float(v) for v in array)


def _sprite_size(values: Any) -> tuple[int, int]:
    try:
        width, height = values
    except (TypeError, ValueError):
        raise ValueError("sprite size must be a pair of integers") from None
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError("sprite size must be a pair of integers")
        if value < 0:
            raise ValueError("sprite size must not be negative")
    return int(width), int(height)


class SpriteRenderer:
    """Collects quads and lines into batches and flushes them to a backend.

    Every position is scaled by ``sprite_size``, the size in pixels of one
    world unit.
    """

    def __init__(self, sprite_size: Any, backend: RenderBackend) -> None:
        self.sprite_size = _sprite_size(sprite_size)
        self.backend = backend
        self.stats = RendererStats()
        self._quad_batch: list[QuadVertex] | None = None
        self._quad_index_count = 0
        self._line_batch: list[LineVertex] | None = None

    # quads

    def draw_quad(
        self,
        tex_index: int,
        position: Any,
        size: Any,
        rotation: float,
        color: Any = WHITE,
        tex_coords: Any = TEXTURE_COORDINATES,
        vertex_positions: Any = QUAD_VERTEX_POSITIONS,
    ) -> None:
        """Draw a single quad at once; ``rotation`` is in degrees."""
        self._reset_stats()
        self._begin_quad_batch()
        self._create_quad(
            tex_index, position, size, rotation, color, tex_coords, vertex_positions
        )
        self.flush_quads()

    def stack_quad(
        self,
        tex_index: int,
        position: Any,
        size: Any,
        rotation: float,
        color: Any = WHITE,
        tex_coords: Any = TEXTURE_COORDINATES,
        vertex_positions: Any = QUAD_VERTEX_POSITIONS,
    ) -> None:
        """Add a quad to the current batch; ``rotation`` is in degrees."""
        if self._quad_batch is None:
            self._reset_stats()
            self._begin_quad_batch()
        self._create_quad(
            tex_index, position, size, rotation, color, tex_coords, vertex_positions
        )

    def flush_quads(self) -> None:
        """Send the current quad batch to the backend, if there is one."""
        if self._quad_batch is None:
            return
        self.backend.draw_quads(tuple(self._quad_batch), self._quad_index_count)
        self.stats.draw_count += 1
        self._quad_batch = None
        self._quad_index_count = 0

    def _begin_quad_batch(self) -> None:
        self._quad_batch = []
        self._quad_index_count = 0

    def _create_quad(
        self,
        tex_index: int,
        position: Any,
        size: Any,
        rotation: float,
        color: Any,
        tex_coords: Any,
        vertex_positions: Any,
    ) -> None:
        px, py = _vec(position, 2, "position")
        sx, sy = _vec(size, 2, "size")
        rgba = _vec(color, 4, "color")
        corners = np.asarray(vertex_positions, dtype=float)
        if corners.shape != (4, 4):
            raise ValueError("vertex positions must be four 4D points")
        uvs = np.asarray(tex_coords, dtype=float)
        if uvs.shape != (4, 2):
            raise ValueError("texture coordinates must be four 2D points")

        if self._quad_index_count >= MAX_QUAD_INDEX_COUNT:
            self.flush_quads()
            self._begin_quad_batch()
        assert self._quad_batch is not None

        transform = (
            translate(px, py, 0.0)
            @ rotate_z(math.radians(rotation))
            @ scale(sx, sy, 0.0)
        )
        pixel_w, pixel_h = self.sprite_size
        for corner, uv in zip(corners, uvs):
            world = transform @ corner
            self._quad_batch.append(
                QuadVertex(
                    position=(float(world[0] * pixel_w), float(world[1] * pixel_h)),
                    tex_coords=(float(uv[0]), float(uv[1])),
                    tex_index=int(tex_index),
                    color=rgba,
                )
            )
        self._quad_index_count += 6
        self.stats.quad_count += 1

    def _reset_stats(self) -> None:
        self.stats.quad_count = 0
        self.stats.draw_count = 0

    # lines

    def draw_line(self, p0: Any, p1: Any, color: Any) -> None:
        """Draw a single line at once."""
        self._line_batch = []
        self._create_line(p0, p1, color)
        self.flush_lines()

    def draw_rect(self, position: Any, size: Any, rotation: float, color: Any) -> None:
        """Draw a rectangle outline; ``rotation`` is in radians."""
        px, py = _vec(position, 2, "position")
        sx, sy = _vec(size, 2, "size")
        transform = translate(px, py, 0.0) @ rotate_z(rotation) @ scale(sx, sy, 0.0)
        corners = [(transform @ corner)[:2] for corner in QUAD_VERTEX_POSITIONS]
        self._line_batch = []
        for start, end in zip(corners, corners[1:] + corners[:1]):
            self._create_line(start, end, color)
        self.flush_lines()

    def stack_line(self, p0: Any, p1: Any, color: Any) -> None:
        """Add a line to the current line batch."""
        if self._line_batch is None:
            self._line_batch = []
        self._create_line(p0, p1, color)

    def flush_lines(self) -> None:
        """Send the current line batch to the backend, if there is one."""
        if self._line_batch is None:
            return
        self.backend.draw_lines(tuple(self._line_batch))
        self._line_batch = None

    def _create_line(self, p0: Any, p1: Any, color: Any) -> None:
        start = _vec(p0, 2, "line start")
        end = _vec(p1, 2, "line end")
        rgba = _vec(color, 4, "color")
        assert self._line_batch is not None
        if len(self._line_batch) >= MAX_LINE_VERTEX_COUNT:
            self.flush_lines()
            self._line_batch = []
        pixel_w, pixel_h = self.sprite_size
        for x, y in (start, end):
            self._line_batch.append(
                LineVertex(position=(x * pixel_w, y * pixel_h), color=rgba)
            )