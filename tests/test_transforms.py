import math

import numpy as np
import pytest

from threesisters.transforms import ortho, rotate_z, scale, translate


def test_ortho_maps_corners_to_clip_space():
    projection = ortho(0.0, 1280.0, 0.0, 720.0, -1.0, 1.0)
    low = projection @ np.array([0.0, 0.0, 0.0, 1.0])
    high = projection @ np.array([1280.0, 720.0, 0.0, 1.0])
    np.testing.assert_allclose(low[:2], [-1.0, -1.0])
    np.testing.assert_allclose(high[:2], [1.0, 1.0])


def test_ortho_keeps_w_at_one():
    projection = ortho(-5.0, 5.0, -2.0, 2.0, -1.0, 1.0)
    point = projection @ np.array([3.0, -1.5, 0.5, 1.0])
    assert point[3] == 1.0


def test_ortho_centre_maps_to_origin():
    projection = ortho(-640.0, 640.0, -360.0, 360.0, -1.0, 1.0)
    centre = projection @ np.array([0.0, 0.0, 0.0, 1.0])
    np.testing.assert_allclose(centre[:3], np.zeros(3))


@pytest.mark.parametrize(
    "bounds",
    [
        (1.0, 1.0, 0.0, 1.0, -1.0, 1.0),
        (0.0, 1.0, 2.0, 2.0, -1.0, 1.0),
        (0.0, 1.0, 0.0, 1.0, 1.0, 1.0),
    ],
)
def test_ortho_rejects_degenerate_bounds(bounds):
    with pytest.raises(ValueError):
        ortho(*bounds)


def test_translate_inverse_is_negated_translation():
    forward = translate(3.0, -4.0, 2.5)
    np.testing.assert_allclose(np.linalg.inv(forward), translate(-3.0, 4.0, -2.5))


def test_translate_moves_point():
    moved = translate(3.0, -4.0, 2.5) @ np.array([1.0, 1.0, 1.0, 1.0])
    np.testing.assert_allclose(moved, [4.0, -3.0, 3.5, 1.0])


def test_rotate_quarter_turn_maps_x_to_y():
    rotated = rotate_z(math.pi / 2) @ np.array([1.0, 0.0, 0.0, 1.0])
    np.testing.assert_allclose(rotated, [0.0, 1.0, 0.0, 1.0], atol=1e-12)


def test_rotate_zero_is_identity():
    np.testing.assert_allclose(rotate_z(0.0), np.eye(4))


def test_rotate_is_orthonormal_and_composes():
    a = rotate_z(0.7)
    b = rotate_z(-0.3)
    np.testing.assert_allclose(a @ a.T, np.eye(4), atol=1e-12)
    np.testing.assert_allclose(a @ b, rotate_z(0.4), atol=1e-12)


def test_scale_inverse_round_trip():
    s = scale(2.0, 4.0, 0.5)
    np.testing.assert_allclose(s @ scale(0.5, 0.25, 2.0), np.eye(4))


def test_scale_zero_axis_flattens():
    flattened = scale(2.0, 3.0, 0.0) @ np.array([1.0, 1.0, 9.0, 1.0])
    assert flattened[2] == 0.0
    assert flattened[3] == 1.0