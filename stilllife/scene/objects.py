# stilllife/scene/objects.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from stilllife.graphics.material_registry import MaterialDef
from stilllife.types import RGBA, Shape, Vec2, Vec3


@dataclass(frozen=True, slots=True)
class TextureAsset:
    """Image file (relative to the texture root) and the tag it loads under."""

    path: str
    tag: str


@dataclass(frozen=True, slots=True)
class DrawPart:
    """
    One mesh draw: a shape, its transform and its look.

    Exactly one of `color` and `texture` must be given.
    rotation holds X, Y, Z angles in degrees.
    """

    shape: Shape
    scale: Vec3 = (1.0, 1.0, 1.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    position: Vec3 = (0.0, 0.0, 0.0)
    color: Optional[RGBA] = None
    texture: Optional[str] = None
    uv_scale: Vec2 = (1.0, 1.0)
    material: Optional[str] = None
    top: bool = True
    bottom: bool = True
    sides: bool = True

    def __post_init__(self) -> None:
        if (self.color is None) == (self.texture is None):
            raise ValueError(
                f"{self.shape.value} part needs exactly one of color or texture"
            )


@dataclass(frozen=True, slots=True)
class SceneObject:
    name: str
    parts: Tuple[DrawPart, ...]


@dataclass(frozen=True, slots=True)
class SceneDefinition:
    """Static content of a scene, drawn in the order given."""

    textures: Tuple[TextureAsset, ...] = ()
    materials: Tuple[MaterialDef, ...] = ()
    objects: Tuple[SceneObject, ...] = ()

    def shapes(self) -> List[Shape]:
        """Distinct shapes used by the scene, in first-use order."""
        seen: List[Shape] = []
        for obj in self.objects:
            for part in obj.parts:
                if part.shape not in seen:
                    seen.append(part.shape)
        return seen
