import numpy as np
import pytest

from packing.core.panel import NormalFace
from packing.geometry.rotation import rot_y, rot_z, rotation_from_normal


@pytest.mark.parametrize("face", list(NormalFace))
def test_face_rotation_is_proper_and_maps_normal(face):
    R = rotation_from_normal(face)
    np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-12)
    assert np.linalg.det(R) == pytest.approx(1.0)
    np.testing.assert_allclose(R @ np.array([1.0, 0.0, 0.0]), face.vector, atol=1e-12)


def test_plus_x_is_identity():
    np.testing.assert_array_equal(rotation_from_normal("+X", 0), np.eye(3))


def test_roll_spins_about_local_normal():
    R = rotation_from_normal("+X", np.pi / 2)
    np.testing.assert_allclose(R @ [0.0, 1.0, 0.0], [0.0, 0.0, 1.0], atol=1e-12)
    np.testing.assert_allclose(R @ [1.0, 0.0, 0.0], [1.0, 0.0, 0.0], atol=1e-12)

    R = rotation_from_normal("-Z", 0.3)
    np.testing.assert_allclose(R @ [1.0, 0.0, 0.0], [0.0, 0.0, -1.0], atol=1e-12)
    assert np.linalg.det(R) == pytest.approx(1.0)


@pytest.mark.parametrize("face, expected", [
    ("-X", rot_z(np.pi)),
    ("+Y", rot_z(np.pi / 2)),
    ("-Y", rot_z(-np.pi / 2)),
    ("+Z", rot_y(-np.pi / 2)),
    ("-Z", rot_y(np.pi / 2)),
])
def test_face_rotations_are_exact_quarter_turns(face, expected):
    R = rotation_from_normal(face)
    np.testing.assert_allclose(R, expected, atol=1e-12)
    assert set(np.unique(R)) <= {-1.0, 0.0, 1.0}


def test_returned_matrix_is_a_copy():
    R = rotation_from_normal("+Y")
    R[0, 0] = 42.0
    assert rotation_from_normal("+Y")[0, 0] == 0.0
