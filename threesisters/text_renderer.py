"""Text layout: the screen projection and the per-glyph quads of a string."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np

from threesisters.components import Character
from threesisters.transforms import ortho

_MISSING_GLYPH = Character(texture_id=0, size=(0, 0), bearing=(0, 0), advance=0)


@dataclass(frozen=True)
class GlyphQuad:
    """The six vertices (x, y, u, v) of one glyph, drawn with its texture."""

    texture_id: int
    vertices: tuple[tuple[float, float, float, float], ...]


def text_projection(width: int, height: int) -> np.ndarray:
    """Return an orthographic projection centred on a ``width`` x ``height`` screen."""
    half_w = float(width) / 2.0
    half_h = float(height) / 2.0
    return ortho(-half_w, half_w, -half_h, half_h, -1.0, 1.0)


def _pair(values: Any, what: str) -> tuple[float, float]:
    array = np.asarray(values, dtype=float)
    if array.shape != (2,):
        raise ValueError(f"{what} must have 2 components")
    return float(array[0]), float(array[1])


def layout_text(
    characters: Mapping[str, Character], text: str, position: Any, scale: Any
) -> list[GlyphQuad]:
    """Lay out ``text`` from ``position`` and return one quad per character.

    A character missing from ``characters`` yields an empty glyph that does
    not advance the pen.
    """
    pen_x, pen_y = _pair(position, "position")
    scale_x, scale_y = _pair(scale, "scale")
    quads: list[GlyphQuad] = []
    for char in text:
        glyph = characters.get(char, _MISSING_GLYPH)
        size_x, size_y = glyph.size
        bearing_x, bearing_y = glyph.bearing

        xpos = pen_x + bearing_x * scale_x
        ypos = pen_y - (size_y - bearing_y) * scale_y
        w = size_x * scale_x
        h = size_y * scale_y

        vertices = (
            (xpos, ypos + h, 0.0, 0.0),
            (xpos, ypos, 0.0, 1.0),
            (xpos + w, ypos, 1.0, 1.0),
            (xpos, ypos + h, 0.0, 0.0),
            (xpos + w, ypos, 1.0, 1.0),
            (xpos + w, ypos + h, 1.0, 0.0),
        )
        quads.append(GlyphQuad(glyph.texture_id, vertices))
        # advance is stored in 1/64 pixels
        pen_x += (glyph.advance >> 6) * scale_x
    return quads