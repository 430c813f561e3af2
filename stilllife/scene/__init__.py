from stilllife.scene.composer import SceneComposer
from stilllife.scene.objects import (
    DrawPart,
    SceneDefinition,
    SceneObject,
    TextureAsset,
)
from stilllife.scene.settings import SceneSettings
from stilllife.scene.still_life import STILL_LIFE

__all__ = [
    "DrawPart",
    "STILL_LIFE",
    "SceneComposer",
    "SceneDefinition",
    "SceneObject",
    "SceneSettings",
    "TextureAsset",
]
