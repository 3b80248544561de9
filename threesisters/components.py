"""The default components and resource records used by the engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

import numpy as np


def _vector(values: Any, length: int) -> np.ndarray:
    array = np.array(values, dtype=float)
    if array.shape != (length,):
        raise ValueError(f"expected a vector of {length} values")
    return array


def _unit_tex_coords() -> np.ndarray:
    return np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])


def _tex_coords(values: Any) -> np.ndarray:
    array = np.array(values, dtype=float)
    if array.shape != (4, 2):
        raise ValueError("texture coordinates must be four 2D points")
    return array


@dataclass(eq=False)
class Transform:
    """3D position, rotation and size."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    size: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        self.position = _vector(self.position, 3)
        self.rotation = _vector(self.rotation, 3)
        self.size = _vector(self.size, 3)


@dataclass(eq=False)
class Transform2D:
    """2D position, rotation in degrees and size."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(2))
    rotation: float = 0.0
    size: np.ndarray = field(default_factory=lambda: np.zeros(2))

    def __post_init__(self) -> None:
        self.position = _vector(self.position, 2)
        self.size = _vector(self.size, 2)
        self.rotation = float(self.rotation)


@dataclass(eq=False)
class Material2D:
    """Texture slot, texture coordinates and tint colour of a sprite."""

    tex_index: int = 0
    tex_coords: np.ndarray = field(default_factory=_unit_tex_coords)
    color: np.ndarray = field(default_factory=lambda: np.ones(4))

    def __post_init__(self) -> None:
        self.tex_coords = _tex_coords(self.tex_coords)
        self.color = _vector(self.color, 4)


class BodyType(enum.IntEnum):
    """How a physics body moves."""

    STATIC = 0
    DYNAMIC = 1
    KINEMATIC = 2


@dataclass
class Rigidbody2D:
    """Physics body settings; ``runtime_body`` holds the live body, if any."""

    body_type: BodyType = BodyType.STATIC
    fixed_rotation: bool = False
    runtime_body: Any = None


@dataclass(eq=False)
class BoxCollider2D:
    """Box collision shape and its physics material."""

    offset: np.ndarray = field(default_factory=lambda: np.zeros(2))
    size: np.ndarray = field(default_factory=lambda: np.array([0.5, 0.5]))
    rotation_offset: float = 0.0
    density: float = 1.0
    friction: float = 0.5
    restitution: float = 0.0
    restitution_threshold: float = 0.5

    def __post_init__(self) -> None:
        self.offset = _vector(self.offset, 2)
        self.size = _vector(self.size, 2)


@dataclass(frozen=True)
class Character:
    """A loaded glyph: texture handle, size, bearing and advance (1/64 px)."""

    texture_id: int
    size: tuple[int, int]
    bearing: tuple[int, int]
    advance: int


@dataclass(eq=False)
class SubTexture:
    """Texture coordinates of a region within a larger texture."""

    tex_coords: np.ndarray = field(default_factory=_unit_tex_coords)

    def __post_init__(self) -> None:
        self.tex_coords = _tex_coords(self.tex_coords)