from stilllife.graphics.dispatcher import (
    ColorAppearance,
    DrawRequest,
    TextureAppearance,
    UniformDispatcher,
)
from stilllife.graphics.lights import (
    DirectionalLight,
    LightingSettings,
    PointLight,
    SpotLight,
)
from stilllife.graphics.material_registry import (
    LookupStatus,
    Material,
    MaterialDef,
    MaterialLookup,
    MaterialRegistry,
)
from stilllife.graphics.meshes import ShapeMeshes
from stilllife.graphics.texture_registry import (
    MAX_TEXTURE_UNITS,
    TextureRegistry,
    TextureSlot,
)

__all__ = [
    "ColorAppearance",
    "DirectionalLight",
    "DrawRequest",
    "LightingSettings",
    "LookupStatus",
    "MAX_TEXTURE_UNITS",
    "Material",
    "MaterialDef",
    "MaterialLookup",
    "MaterialRegistry",
    "PointLight",
    "ShapeMeshes",
    "SpotLight",
    "TextureAppearance",
    "TextureRegistry",
    "TextureSlot",
    "UniformDispatcher",
]
