from stilllife.math import compose_transform
from stilllife.scene import SceneComposer, SceneSettings
from stilllife.types import Shape

__all__ = [
    "SceneComposer",
    "SceneSettings",
    "Shape",
    "compose_transform",
]
