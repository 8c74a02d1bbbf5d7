"""
Face Rotations
==============

Rotation matrices taking a component-local frame (normal along +X, as
the packing oracle assumes) onto a panel face of the satellite body.
"""

import numpy as np
from typing import Union

from ..core.panel import NormalFace


def rot_x(angle: float) -> np.ndarray:
    """Rotation about X by angle [rad]."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[1, 0, 0], [0, c, -s], [0, s, c]])


def rot_y(angle: float) -> np.ndarray:
    """Rotation about Y by angle [rad]."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, 0, s], [0, 1, 0], [-s, 0, c]])


def rot_z(angle: float) -> np.ndarray:
    """Rotation about Z by angle [rad]."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]])


def _exact(R: np.ndarray) -> np.ndarray:
    # Quarter-turn matrices only hold -1, 0 and 1; drop the 1e-17 residue
    return np.round(R) + 0.0


# Matrices mapping local +X onto each face normal
_FACE_ROTATIONS = {
    NormalFace.PLUS_X: np.eye(3),
    NormalFace.MINUS_X: _exact(rot_z(np.pi)),
    NormalFace.PLUS_Y: _exact(rot_z(np.pi / 2)),
    NormalFace.MINUS_Y: _exact(rot_z(-np.pi / 2)),
    NormalFace.PLUS_Z: _exact(rot_y(-np.pi / 2)),
    NormalFace.MINUS_Z: _exact(rot_y(np.pi / 2)),
}


def rotation_from_normal(face: Union[NormalFace, str], roll: float = 0.0) -> np.ndarray:
    """
    Rotation from component-local axes to satellite body axes.

    The local +X axis is carried onto the face normal; roll spins the
    component about that normal before the face rotation is applied.

    Args:
        face: Outward normal of the mounting face ('+X', '-Y', ...)
        roll: Rotation about the local normal [rad]

    Returns:
        3x3 orthonormal matrix with determinant +1
    """
    R = _FACE_ROTATIONS[NormalFace(face)].copy()
    if roll:
        R = R @ rot_x(roll)
    return R
