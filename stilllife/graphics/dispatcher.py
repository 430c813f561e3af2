# stilllife/graphics/dispatcher.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional, Union

import moderngl
import numpy as np

from stilllife.graphics import uniforms as u
from stilllife.graphics.lights import LightingSettings
from stilllife.graphics.material_registry import (
    LookupStatus,
    Material,
    MaterialRegistry,
)
from stilllife.graphics.texture_registry import TextureRegistry
from stilllife.graphics.uniforms import set_uniform
from stilllife.types import RGBA, TextureTag, Vec2

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ColorAppearance:
    """Flat color; disables texture sampling."""

    rgba: RGBA


@dataclass(frozen=True, slots=True)
class TextureAppearance:
    """Sample the texture bound to `unit`. unit is None if the tag never resolved."""

    tag: TextureTag
    unit: Optional[int]


Appearance = Union[ColorAppearance, TextureAppearance]


@dataclass(frozen=True, slots=True, eq=False)
class DrawRequest:
    """Everything the shader needs for one draw call."""

    model: np.ndarray
    appearance: Appearance
    uv_scale: Vec2 = (1.0, 1.0)
    material: Optional[Material] = None


class UniformDispatcher:
    """
    Writes per-object state into the scene shader's uniforms.

    Every setter touches only its own uniforms and the program keeps whatever
    was written last, so state must be set in full before each draw. Color
    and texture share the bUseTexture flag: whichever is set last wins.
    """

    def __init__(
        self,
        program: moderngl.Program,
        textures: TextureRegistry,
        materials: MaterialRegistry,
    ) -> None:
        self.program = program
        self._textures = textures
        self._materials = materials

    # -- Single uniforms --
    def set_transform(self, model: np.ndarray) -> None:
        set_uniform(self.program, u.MODEL, u.pack_mat4(model))

    def set_color(self, r: float, g: float, b: float, a: float) -> None:
        set_uniform(self.program, u.USE_TEXTURE, False)
        set_uniform(self.program, u.OBJECT_COLOR, (r, g, b, a))

    def set_texture_unit(self, unit: int) -> None:
        set_uniform(self.program, u.USE_TEXTURE, True)
        set_uniform(self.program, u.OBJECT_TEXTURE, unit)

    def set_texture(self, tag: str) -> bool:
        unit = self._textures.resolve_unit(tag)
        if unit is None:
            logger.warning("Texture '%s' is not loaded; shader left unchanged", tag)
            return False

        self.set_texture_unit(unit)
        return True

    def set_uv_scale(self, u_scale: float, v_scale: float) -> None:
        set_uniform(self.program, u.UV_SCALE, (u_scale, v_scale))

    def apply_material(self, material: Material) -> None:
        set_uniform(self.program, u.MATERIAL_DIFFUSE, material.diffuse_color)
        set_uniform(self.program, u.MATERIAL_SPECULAR, material.specular_color)
        set_uniform(self.program, u.MATERIAL_SHININESS, material.shininess)

    def set_material(self, tag: str) -> bool:
        lookup = self._materials.resolve(tag)
        if lookup.status is LookupStatus.UNCONFIGURED:
            return False
        if lookup.status is LookupStatus.NOT_FOUND:
            logger.warning("Material '%s' is not defined; shader left unchanged", tag)
            return False

        self.apply_material(lookup.material)
        return True

    # -- Lights --
    def set_lighting(self, settings: LightingSettings) -> None:
        p = self.program
        set_uniform(p, u.USE_LIGHTING, True)

        sun = settings.directional
        if sun is not None:
            set_uniform(p, "directionalLight.direction", sun.direction)
            set_uniform(p, "directionalLight.ambient", sun.ambient)
            set_uniform(p, "directionalLight.diffuse", sun.diffuse)
            set_uniform(p, "directionalLight.specular", sun.specular)
        set_uniform(p, "directionalLight.bActive", sun is not None)

        for i in range(u.MAX_POINT_LIGHTS):
            active = i < len(settings.point_lights)
            if active:
                light = settings.point_lights[i]
                set_uniform(p, u.point_light_uniform(i, "position"), light.position)
                set_uniform(p, u.point_light_uniform(i, "ambient"), light.ambient)
                set_uniform(p, u.point_light_uniform(i, "diffuse"), light.diffuse)
                set_uniform(p, u.point_light_uniform(i, "specular"), light.specular)
                set_uniform(p, u.point_light_uniform(i, "constant"), light.constant)
                set_uniform(p, u.point_light_uniform(i, "linear"), light.linear)
                set_uniform(p, u.point_light_uniform(i, "quadratic"), light.quadratic)
            set_uniform(p, u.point_light_uniform(i, "bActive"), active)

        spot = settings.spot
        if spot is not None:
            set_uniform(p, "spotLight.ambient", spot.ambient)
            set_uniform(p, "spotLight.diffuse", spot.diffuse)
            set_uniform(p, "spotLight.specular", spot.specular)
            set_uniform(p, "spotLight.constant", spot.constant)
            set_uniform(p, "spotLight.linear", spot.linear)
            set_uniform(p, "spotLight.quadratic", spot.quadratic)
            set_uniform(
                p, "spotLight.cutOff", math.cos(math.radians(spot.cutoff_degrees))
            )
            set_uniform(
                p,
                "spotLight.outerCutOff",
                math.cos(math.radians(spot.outer_cutoff_degrees)),
            )
        set_uniform(p, "spotLight.bActive", spot is not None)

    # -- Draw --
    def submit(self, request: DrawRequest, draw: Callable[[], None]) -> None:
        """Write the whole request, then issue the draw right away."""
        self.set_transform(request.model)

        appearance = request.appearance
        if isinstance(appearance, ColorAppearance):
            self.set_color(*appearance.rgba)
        elif appearance.unit is not None:
            self.set_texture_unit(appearance.unit)
        else:
            logger.warning(
                "Texture '%s' is not loaded; drawing with previous appearance",
                appearance.tag,
            )

        self.set_uv_scale(*request.uv_scale)

        if request.material is not None:
            self.apply_material(request.material)

        draw()
