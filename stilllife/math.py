# stilllife/math.py
import math
from typing import Sequence

import numpy as np

from stilllife.types import Scalar


def deg_to_rad(d: Scalar) -> Scalar:
    return d * math.pi / 180.0


# -- Matrix Builders --
def scale_matrix(scale: Sequence[float]) -> np.ndarray:
    mat = np.eye(4, dtype=np.float32)
    mat[0, 0] = scale[0]
    mat[1, 1] = scale[1]
    mat[2, 2] = scale[2]
    return mat


def translation_matrix(pos: Sequence[float]) -> np.ndarray:
    mat = np.eye(4, dtype=np.float32)
    mat[:3, 3] = pos[0], pos[1], pos[2]
    return mat


def rotation_x_matrix(degrees: Scalar) -> np.ndarray:
    rad = deg_to_rad(degrees)
    c, s = math.cos(rad), math.sin(rad)

    mat = np.eye(4, dtype=np.float32)
    mat[1, 1] = c
    mat[1, 2] = -s
    mat[2, 1] = s
    mat[2, 2] = c
    return mat


def rotation_y_matrix(degrees: Scalar) -> np.ndarray:
    rad = deg_to_rad(degrees)
    c, s = math.cos(rad), math.sin(rad)

    mat = np.eye(4, dtype=np.float32)
    mat[0, 0] = c
    mat[0, 2] = s
    mat[2, 0] = -s
    mat[2, 2] = c
    return mat


def rotation_z_matrix(degrees: Scalar) -> np.ndarray:
    rad = deg_to_rad(degrees)
    c, s = math.cos(rad), math.sin(rad)

    mat = np.eye(4, dtype=np.float32)
    mat[0, 0] = c
    mat[0, 1] = -s
    mat[1, 0] = s
    mat[1, 1] = c
    return mat


def compose_transform(
    scale: Sequence[float],
    x_rotation_deg: Scalar,
    y_rotation_deg: Scalar,
    z_rotation_deg: Scalar,
    translation: Sequence[float],
) -> np.ndarray:
    """
    Builds a Model Matrix from scale, XYZ euler angles (degrees) and position.

    Composition is always T * Rz * Ry * Rx * S: scale first, then rotation
    about X, Y, Z in that order, translation last.
    Returns: (4, 4) float32, row-major (transpose before uploading).
    """
    s = scale_matrix(scale)
    rx = rotation_x_matrix(x_rotation_deg)
    ry = rotation_y_matrix(y_rotation_deg)
    rz = rotation_z_matrix(z_rotation_deg)
    t = translation_matrix(translation)

    return t @ rz @ ry @ rx @ s
