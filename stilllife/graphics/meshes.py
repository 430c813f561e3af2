# stilllife/graphics/meshes.py
from __future__ import annotations

from typing import Protocol

from stilllife.types import Shape


class ShapeMeshes(Protocol):
    """
    Library of primitive meshes owned outside this package.

    Each shape is uploaded once with load() and drawn any number of times.
    draw() renders with whatever the bound program currently holds; the
    sub-part flags only matter for shapes that have caps (cylinders, cones).
    """

    def load(self, shape: Shape) -> None: ...

    def draw(
        self,
        shape: Shape,
        *,
        top: bool = True,
        bottom: bool = True,
        sides: bool = True,
    ) -> None: ...
