# stilllife/graphics/material_registry.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from stilllife.types import RGB, MaterialTag


@dataclass(frozen=True, slots=True)
class Material:
    """Phong surface response of an object."""

    tag: MaterialTag
    diffuse_color: RGB
    specular_color: RGB
    shininess: float


@dataclass(frozen=True, slots=True)
class MaterialDef:
    """Scene-data description of a material, registered at prepare time."""

    tag: str
    diffuse_color: RGB
    specular_color: RGB
    shininess: float


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    UNCONFIGURED = "unconfigured"  # no materials registered at all


@dataclass(frozen=True, slots=True)
class MaterialLookup:
    status: LookupStatus
    material: Optional[Material] = None

    def __bool__(self) -> bool:
        return self.status is LookupStatus.FOUND


class MaterialRegistry:
    """Append-only list of materials resolved by first matching tag."""

    def __init__(self) -> None:
        self._materials: List[Material] = []

    def __len__(self) -> int:
        return len(self._materials)

    def register(
        self,
        tag: str,
        diffuse: RGB,
        specular: RGB,
        shininess: float,
    ) -> Material:
        material = Material(
            tag=MaterialTag(tag),
            diffuse_color=tuple(diffuse),
            specular_color=tuple(specular),
            shininess=float(shininess),
        )
        self._materials.append(material)
        return material

    def register_all(self, defs: Iterable[MaterialDef]) -> None:
        for d in defs:
            self.register(d.tag, d.diffuse_color, d.specular_color, d.shininess)

    def resolve(self, tag: str) -> MaterialLookup:
        if not self._materials:
            return MaterialLookup(LookupStatus.UNCONFIGURED)

        for material in self._materials:
            if material.tag == tag:
                return MaterialLookup(LookupStatus.FOUND, material)

        return MaterialLookup(LookupStatus.NOT_FOUND)
