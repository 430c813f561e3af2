# stilllife/scene/composer.py
from __future__ import annotations

import logging
from typing import Optional

import moderngl

from stilllife.assets import ImageCodec
from stilllife.graphics.dispatcher import (
    Appearance,
    ColorAppearance,
    DrawRequest,
    TextureAppearance,
    UniformDispatcher,
)
from stilllife.graphics.material_registry import LookupStatus, MaterialRegistry
from stilllife.graphics.meshes import ShapeMeshes
from stilllife.graphics.texture_registry import TextureRegistry
from stilllife.math import compose_transform
from stilllife.scene.objects import DrawPart, SceneDefinition
from stilllife.scene.settings import SceneSettings
from stilllife.scene.still_life import STILL_LIFE
from stilllife.types import TextureTag

logger = logging.getLogger(__name__)


class SceneComposer:
    """
    Prepares and draws a static scene.

    Owns the texture and material registries for its whole lifetime and
    feeds one DrawRequest per part to the dispatcher, in definition order.
    """

    def __init__(
        self,
        gl: moderngl.Context,
        program: moderngl.Program,
        meshes: ShapeMeshes,
        settings: Optional[SceneSettings] = None,
        scene: SceneDefinition = STILL_LIFE,
        codec: Optional[ImageCodec] = None,
    ) -> None:
        self.settings = settings or SceneSettings()
        self.scene = scene
        self._meshes = meshes

        self.textures = TextureRegistry(
            gl, codec, capacity=self.settings.max_texture_units
        )
        self.materials = MaterialRegistry()
        self.dispatcher = UniformDispatcher(program, self.textures, self.materials)

    def prepare(self) -> int:
        """
        Load textures, define materials, set up lights and load meshes.
        Returns the number of textures that failed to load.
        """
        failed = 0
        for asset in self.scene.textures:
            path = self.settings.texture_root / asset.path
            if not self.textures.load(path, asset.tag):
                failed += 1

        # texture units follow load order
        self.textures.bind_all()

        self.materials.register_all(self.scene.materials)
        self._check_material_tags()
        self.dispatcher.set_lighting(self.settings.lighting)

        for shape in self.scene.shapes():
            self._meshes.load(shape)

        if failed:
            logger.warning(
                "%d of %d scene textures failed to load",
                failed,
                len(self.scene.textures),
            )
        return failed

    def render(self) -> None:
        for obj in self.scene.objects:
            for part in obj.parts:
                self.dispatcher.submit(
                    self.request_for(part), lambda part=part: self._draw(part)
                )

    def request_for(self, part: DrawPart) -> DrawRequest:
        """Resolve a part's tags into a ready-to-write draw request."""
        model = compose_transform(part.scale, *part.rotation, part.position)

        appearance: Appearance
        if part.color is not None:
            appearance = ColorAppearance(part.color)
        else:
            appearance = TextureAppearance(
                TextureTag(part.texture), self.textures.resolve_unit(part.texture)
            )

        material = None
        if part.material is not None:
            lookup = self.materials.resolve(part.material)
            if lookup:
                material = lookup.material
            elif lookup.status is LookupStatus.NOT_FOUND:
                logger.debug("Material '%s' is not defined", part.material)

        return DrawRequest(
            model=model,
            appearance=appearance,
            uv_scale=part.uv_scale,
            material=material,
        )

    def release(self) -> None:
        self.textures.release()

    def _check_material_tags(self) -> None:
        """Warn once per material tag the scene uses but never defines."""
        reported = set()
        for obj in self.scene.objects:
            for part in obj.parts:
                tag = part.material
                if tag is None or tag in reported:
                    continue
                if self.materials.resolve(tag).status is LookupStatus.NOT_FOUND:
                    logger.warning("Material '%s' is not defined", tag)
                    reported.add(tag)

    def _draw(self, part: DrawPart) -> None:
        self._meshes.draw(
            part.shape, top=part.top, bottom=part.bottom, sides=part.sides
        )
