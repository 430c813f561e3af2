# stilllife/types.py
from __future__ import annotations

from enum import Enum
from typing import NewType, Tuple, TypeAlias

TextureTag = NewType("TextureTag", str)
MaterialTag = NewType("MaterialTag", str)

Scalar: TypeAlias = float

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]
RGB = Tuple[float, float, float]
RGBA = Tuple[float, float, float, float]


class Shape(str, Enum):
    """Primitive meshes the shape library knows how to draw."""

    BOX = "box"
    PLANE = "plane"
    CYLINDER = "cylinder"
    CONE = "cone"
    PRISM = "prism"
    PYRAMID = "pyramid"
    SPHERE = "sphere"
    HALF_SPHERE = "half_sphere"
    TAPERED_CYLINDER = "tapered_cylinder"
    TORUS = "torus"
