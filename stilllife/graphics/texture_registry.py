# stilllife/graphics/texture_registry.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import moderngl

from stilllife.assets import ImageCodec, PillowCodec
from stilllife.errors import TextureLoadError, UnsupportedChannelsError
from stilllife.types import TextureTag

logger = logging.getLogger(__name__)

# Minimum number of texture units OpenGL guarantees a fragment shader.
MAX_TEXTURE_UNITS = 16

_SUPPORTED_COMPONENTS = (3, 4)  # RGB, RGBA


@dataclass(slots=True)
class TextureSlot:
    """A loaded texture and the tag it is looked up by."""

    tag: TextureTag
    texture: moderngl.Texture


class TextureRegistry:
    """
    Loads image files into GPU textures and binds each one to the texture
    unit matching its registration index.

    Slots are kept in load order. Lookups scan in that order and return the
    first match, so a tag loaded twice always resolves to the first texture.
    """

    def __init__(
        self,
        gl: moderngl.Context,
        codec: Optional[ImageCodec] = None,
        *,
        capacity: int = MAX_TEXTURE_UNITS,
    ) -> None:
        self._gl = gl
        self._codec = codec or PillowCodec()
        self._capacity = capacity
        self._slots: List[TextureSlot] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def tags(self) -> List[TextureTag]:
        return [slot.tag for slot in self._slots]

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, tag: str) -> bool:
        return self._find(tag) is not None

    def load(self, path: str | Path, tag: str) -> bool:
        """
        Decode `path`, upload it and register it under `tag`.
        Returns False (and logs) if the image is unusable or no unit is free.
        """
        if len(self._slots) >= self._capacity:
            logger.warning(
                "Texture '%s' rejected: all %d texture units are in use",
                tag,
                self._capacity,
            )
            return False

        try:
            image = self._codec.decode(Path(path))
            if image.components not in _SUPPORTED_COMPONENTS:
                raise UnsupportedChannelsError(str(path), image.components)
        except TextureLoadError as e:
            logger.warning("Texture '%s' not loaded: %s", tag, e)
            return False

        logger.info(
            "Loaded image %s, width:%d, height:%d, channels:%d",
            path,
            image.width,
            image.height,
            image.components,
        )

        if tag in self:
            logger.warning(
                "Texture tag '%s' already registered; the new texture is shadowed",
                tag,
            )

        texture = self._gl.texture(
            (image.width, image.height), image.components, data=image.data
        )
        texture.repeat_x = True
        texture.repeat_y = True
        # build_mipmaps() switches the min filter to a mipmap filter
        texture.build_mipmaps()
        texture.filter = (moderngl.LINEAR, moderngl.LINEAR)

        self._slots.append(TextureSlot(tag=TextureTag(tag), texture=texture))
        return True

    def bind_all(self) -> None:
        """Bind every loaded texture to the unit equal to its slot index."""
        for unit, slot in enumerate(self._slots):
            slot.texture.use(location=unit)

    def resolve_unit(self, tag: str) -> Optional[int]:
        """Texture unit of the first texture registered under tag."""
        return self._find(tag)

    def resolve_handle(self, tag: str) -> Optional[moderngl.Texture]:
        """GPU texture of the first texture registered under tag."""
        index = self._find(tag)
        if index is None:
            return None
        return self._slots[index].texture

    def release(self) -> None:
        for slot in self._slots:
            slot.texture.release()
        self._slots.clear()

    def _find(self, tag: str) -> Optional[int]:
        for index, slot in enumerate(self._slots):
            if slot.tag == tag:
                return index
        return None
