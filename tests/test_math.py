import numpy as np
import pytest

from stilllife.math import (
    compose_transform,
    deg_to_rad,
    rotation_x_matrix,
    rotation_y_matrix,
    rotation_z_matrix,
    scale_matrix,
    translation_matrix,
)


def _apply(mat, point):
    return (mat @ np.array([*point, 1.0], dtype=np.float32))[:3]


def test_deg_to_rad():
    assert deg_to_rad(180.0) == pytest.approx(np.pi)


def test_identity_transform():
    mat = compose_transform((1, 1, 1), 0, 0, 0, (0, 0, 0))
    assert mat.dtype == np.float32
    np.testing.assert_array_equal(mat, np.eye(4, dtype=np.float32))


def test_compose_is_deterministic():
    args = ((0.3, 1.7, 2.0), 12.5, -40.0, 95.0, (1.0, -2.0, 3.5))
    a = compose_transform(*args)
    b = compose_transform(*args)
    assert a.tobytes() == b.tobytes()


def test_compose_matches_t_rz_ry_rx_s():
    scale = (2.0, 0.5, 1.5)
    pos = (1.0, 2.0, 3.0)
    expected = (
        translation_matrix(pos)
        @ rotation_z_matrix(30.0)
        @ rotation_y_matrix(-20.0)
        @ rotation_x_matrix(45.0)
        @ scale_matrix(scale)
    )
    np.testing.assert_allclose(
        compose_transform(scale, 45.0, -20.0, 30.0, pos), expected, atol=1e-6
    )


def test_rotation_x_maps_y_to_z():
    out = _apply(rotation_x_matrix(90.0), (0.0, 1.0, 0.0))
    np.testing.assert_allclose(out, (0.0, 0.0, 1.0), atol=1e-6)


def test_scale_applies_before_rotation():
    # Scaling x by 2 then turning 90 degrees about Z lands on (0, 2, 0).
    mat = compose_transform((2.0, 1.0, 1.0), 0, 0, 90.0, (0, 0, 0))
    np.testing.assert_allclose(_apply(mat, (1.0, 0.0, 0.0)), (0.0, 2.0, 0.0), atol=1e-6)


def test_x_rotation_applies_before_y():
    mat = compose_transform((1, 1, 1), 90.0, 90.0, 0.0, (0, 0, 0))
    # Rx: (0,1,0) -> (0,0,1); Ry: (0,0,1) -> (1,0,0)
    np.testing.assert_allclose(_apply(mat, (0.0, 1.0, 0.0)), (1.0, 0.0, 0.0), atol=1e-6)


def test_translation_applies_last():
    mat = compose_transform((20.0, 0.6, 8.0), 0, 0, 0, (0.0, 0.2, -0.9))

    np.testing.assert_allclose(mat[:3, 3], (0.0, 0.2, -0.9), atol=1e-6)
    np.testing.assert_allclose(np.diag(mat)[:3], (20.0, 0.6, 8.0), atol=1e-6)
    np.testing.assert_allclose(_apply(mat, (0.0, 0.0, 0.0)), (0.0, 0.2, -0.9), atol=1e-6)
