import numpy as np
import pytest

from threesisters.components import Character
from threesisters.text_renderer import GlyphQuad, layout_text, text_projection

GLYPH_A = Character(texture_id=7, size=(10, 20), bearing=(2, 15), advance=640)
GLYPH_B = Character(texture_id=9, size=(4, 4), bearing=(0, 4), advance=320)


def test_projection_maps_screen_corners_to_clip_corners():
    projection = text_projection(800, 600)
    top_right = projection @ np.array([400.0, 300.0, 0.0, 1.0])
    bottom_left = projection @ np.array([-400.0, -300.0, 0.0, 1.0])
    assert np.allclose(top_right, [1.0, 1.0, 0.0, 1.0])
    assert np.allclose(bottom_left, [-1.0, -1.0, 0.0, 1.0])


def test_projection_keeps_origin_at_centre():
    projection = text_projection(1280, 720)
    assert np.allclose(projection @ np.array([0.0, 0.0, 0.0, 1.0]), [0, 0, 0, 1])


def test_projection_rejects_zero_size():
    with pytest.raises(ValueError):
        text_projection(0, 600)


def test_empty_text_gives_no_quads():
    assert layout_text({"a": GLYPH_A}, "", (0, 0), (1, 1)) == []


def test_single_glyph_vertices():
    (quad,) = layout_text({"a": GLYPH_A}, "a", (0.0, 0.0), (1.0, 1.0))
    assert quad.texture_id == 7
    assert len(quad.vertices) == 6
    assert quad.vertices[0] == (2.0, 15.0, 0.0, 0.0)
    assert quad.vertices[2] == (12.0, -5.0, 1.0, 1.0)


def test_quad_texture_coordinates_follow_fixed_pattern():
    (quad,) = layout_text({"a": GLYPH_A}, "a", (3.0, 4.0), (2.0, 2.0))
    uvs = [v[2:] for v in quad.vertices]
    assert uvs == [
        (0.0, 0.0),
        (0.0, 1.0),
        (1.0, 1.0),
        (0.0, 0.0),
        (1.0, 1.0),
        (1.0, 0.0),
    ]


def test_pen_advances_by_advance_over_64():
    quads = layout_text({"a": GLYPH_A}, "aa", (0.0, 0.0), (1.0, 1.0))
    assert quads[1].vertices[0][0] - quads[0].vertices[0][0] == GLYPH_A.advance >> 6
    assert quads[1].vertices[0][1] == quads[0].vertices[0][1]


def test_scale_multiplies_advance_and_size():
    plain = layout_text({"a": GLYPH_A}, "aa", (0.0, 0.0), (1.0, 1.0))
    doubled = layout_text({"a": GLYPH_A}, "aa", (0.0, 0.0), (2.0, 2.0))
    for p, d in zip(plain, doubled):
        for pv, dv in zip(p.vertices, d.vertices):
            assert dv[0] == pytest.approx(pv[0] * 2)
            assert dv[1] == pytest.approx(pv[1] * 2)


def test_position_shifts_all_vertices():
    base = layout_text({"a": GLYPH_A, "b": GLYPH_B}, "ab", (0.0, 0.0), (1.0, 1.0))
    moved = layout_text({"a": GLYPH_A, "b": GLYPH_B}, "ab", (5.0, -3.0), (1.0, 1.0))
    for b, m in zip(base, moved):
        for bv, mv in zip(b.vertices, m.vertices):
            assert mv[0] == pytest.approx(bv[0] + 5.0)
            assert mv[1] == pytest.approx(bv[1] - 3.0)


def test_missing_character_is_empty_and_does_not_advance():
    quads = layout_text({"a": GLYPH_A}, "?a", (0.0, 0.0), (1.0, 1.0))
    assert quads[0].texture_id == 0
    assert all(v[:2] == (0.0, 0.0) for v in quads[0].vertices)
    alone = layout_text({"a": GLYPH_A}, "a", (0.0, 0.0), (1.0, 1.0))
    assert quads[1] == alone[0]


def test_glyph_quad_is_frozen():
    (quad,) = layout_text({"a": GLYPH_A}, "a", (0.0, 0.0), (1.0, 1.0))
    with pytest.raises(AttributeError):
        quad.texture_id = 2
    assert quad.texture_id == 7
    assert quad == GlyphQuad(7, quad.vertices)


def test_bad_position_shape_raises():
    with pytest.raises(ValueError):
        layout_text({"a": GLYPH_A}, "a", (0.0, 0.0, 0.0), (1.0, 1.0))