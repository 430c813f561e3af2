# stilllife/scene/still_life.py
"""
Default scene: a table with cheese, bread, wine, grapes and a plate with a
knife, in front of a backdrop.
"""
from stilllife.graphics.material_registry import MaterialDef
from stilllife.scene.objects import (
    DrawPart,
    SceneDefinition,
    SceneObject,
    TextureAsset,
)
from stilllife.types import Shape

TEXTURES = (
    TextureAsset("rusticwood.jpg", "table"),
    TextureAsset("cheese_wheel.jpg", "cheese_wheel_side"),
    TextureAsset("cheese_top.jpg", "cheese_wheel_top"),
    TextureAsset("breadcrust.jpg", "breadcrust"),
    TextureAsset("backdrop.jpg", "backdrop"),
    TextureAsset("knife_handle.jpg", "knifehandle"),
    TextureAsset("stainless.jpg", "stainless"),
    TextureAsset("cheddar.jpg", "cheddar"),
    TextureAsset("circular-brushed-gold-texture.jpg", "knifescrew"),
)

MATERIALS = (
    MaterialDef("metal", (0.4, 0.4, 0.4), (0.7, 0.7, 0.6), 52.0),
    MaterialDef("wood", (0.2, 0.2, 0.3), (0.0, 0.0, 0.0), 0.1),
    MaterialDef("glass", (0.2, 0.2, 0.2), (1.0, 1.0, 1.0), 95.0),
    MaterialDef("plate", (0.4, 0.4, 0.4), (0.2, 0.2, 0.2), 30.0),
    MaterialDef("cheese", (0.6, 0.5, 0.3), (0.0, 0.0, 0.0), 0.1),
    MaterialDef("bread", (0.7, 0.6, 0.5), (0.02, 0.02, 0.02), 0.001),
    MaterialDef("darkbread", (0.5, 0.4, 0.3), (0.01, 0.01, 0.01), 0.001),
    MaterialDef("backdrop", (0.8, 0.8, 0.9), (0.0, 0.0, 0.0), 2.0),
    MaterialDef("grape", (0.4, 0.2, 0.4), (0.1, 0.05, 0.1), 0.55),
)

_GLASS = (0.7, 0.7, 0.8, 0.3)
_BOTTLE = (0.07, 0.2, 0.08, 0.95)
_GRAPE = (0.2, 0.1, 0.4, 1.0)
_WHITE = (1.0, 1.0, 1.0, 1.0)

TABLE = SceneObject(
    "table",
    (
        DrawPart(
            Shape.BOX,
            scale=(20.0, 0.6, 8.0),
            position=(0.0, 0.2, -0.9),
            texture="table",
            material="wood",
        ),
    ),
)

BACKDROP = SceneObject(
    "backdrop",
    (
        DrawPart(
            Shape.PLANE,
            scale=(20.0, 1.0, 20.0),
            rotation=(90.0, 0.0, 0.0),
            position=(0.0, 15.0, -8.0),
            texture="backdrop",
            material="backdrop",
        ),
    ),
)

CHEESE_WHEEL = SceneObject(
    "cheese_wheel",
    (
        DrawPart(
            Shape.CYLINDER,
            scale=(1.5, 1.2, 1.5),
            position=(-2.0, 0.5, 0.0),
            texture="cheese_wheel_side",
            uv_scale=(5.0, 1.0),
            material="cheese",
            top=False,
            bottom=False,
        ),
        DrawPart(
            Shape.CYLINDER,
            scale=(1.5, 1.2, 1.5),
            position=(-2.0, 0.5, 0.0),
            texture="cheese_wheel_top",
            material="cheese",
            bottom=False,
            sides=False,
        ),
    ),
)

BREAD_LOAF = SceneObject(
    "bread_loaf",
    (
        DrawPart(
            Shape.HALF_SPHERE,
            scale=(2.0, 1.0, 0.9),
            rotation=(0.0, -15.0, 0.0),
            position=(2.5, 1.2, 0.0),
            texture="breadcrust",
            material="bread",
        ),
        DrawPart(
            Shape.HALF_SPHERE,
            scale=(2.0, 0.6, 0.9),
            rotation=(180.0, -15.0, 0.0),
            position=(2.5, 1.2, 0.0),
            texture="breadcrust",
            material="darkbread",
        ),
    ),
)

WINE_BOTTLE = SceneObject(
    "wine_bottle",
    (
        DrawPart(
            Shape.HALF_SPHERE,
            scale=(0.9, 0.3, 0.9),
            rotation=(0.0, 0.0, 180.0),
            position=(-1.8, 0.9, -2.6),
            color=_BOTTLE,
            material="glass",
        ),
        DrawPart(
            Shape.CYLINDER,
            scale=(0.9, 4.0, 0.9),
            position=(-1.8, 0.9, -2.6),
            color=_BOTTLE,
            material="glass",
            top=False,
            bottom=False,
        ),
        DrawPart(
            Shape.HALF_SPHERE,
            scale=(0.905, 0.9, 0.905),
            rotation=(0.0, -6.0, 0.0),
            position=(-1.8, 4.9, -2.6),
            color=_BOTTLE,
            material="glass",
        ),
        DrawPart(
            Shape.CYLINDER,
            scale=(0.3, 2.0, 0.3),
            position=(-1.8, 5.6, -2.6),
            color=_BOTTLE,
            material="glass",
            top=False,
            bottom=False,
        ),
        DrawPart(
            Shape.TORUS,
            scale=(0.32, 0.32, 1.5),
            rotation=(90.0, 0.0, 0.0),
            position=(-1.8, 7.4, -2.6),
            color=_BOTTLE,
            material="glass",
        ),
        DrawPart(
            Shape.TORUS,
            scale=(0.28, 0.28, 0.4),
            rotation=(90.0, 0.0, 0.0),
            position=(-1.8, 7.6, -2.6),
            color=_BOTTLE,
            material="glass",
        ),
    ),
)

WINE_GLASS = SceneObject(
    "wine_glass",
    (
        # base
        DrawPart(
            Shape.CYLINDER,
            scale=(0.8, 0.06, 0.8),
            position=(0.0, 0.54, -1.5),
            color=_GLASS,
            material="glass",
        ),
        DrawPart(
            Shape.TAPERED_CYLINDER,
            scale=(0.2, 0.4, 0.2),
            position=(0.0, 0.6, -1.5),
            color=(1.0, 1.0, 1.0, 0.3),
            material="glass",
            top=False,
            bottom=False,
        ),
        # stem
        DrawPart(
            Shape.CYLINDER,
            scale=(0.1, 1.5, 0.1),
            position=(0.0, 1.0, -1.5),
            color=_GLASS,
            material="glass",
            top=False,
            bottom=False,
        ),
        DrawPart(
            Shape.TAPERED_CYLINDER,
            scale=(0.2, 0.4, 0.2),
            rotation=(180.0, 0.0, 0.0),
            position=(0.0, 2.896, -1.5),
            color=_GLASS,
            material="glass",
            top=False,
            bottom=False,
        ),
        # wine
        DrawPart(
            Shape.HALF_SPHERE,
            scale=(1.0, 0.8, 1.0),
            rotation=(180.0, 0.0, 0.0),
            position=(0.0, 3.68, -1.5),
            color=(0.3, 0.1, 0.4, 0.8),
            material="glass",
        ),
        # bowl
        DrawPart(
            Shape.TAPERED_CYLINDER,
            scale=(0.99, 1.5, 0.99),
            position=(0.0, 3.68, -1.5),
            color=_GLASS,
            material="glass",
            top=False,
            bottom=False,
        ),
    ),
)


def _grape(scale, position) -> DrawPart:
    return DrawPart(
        Shape.SPHERE, scale=scale, position=position, color=_GRAPE, material="grape"
    )


GRAPES = SceneObject(
    "grapes",
    (
        _grape((0.23, 0.21, 0.2), (3.3, 0.7, 1.1)),
        _grape((0.23, 0.21, 0.2), (3.6, 0.7, 1.4)),
        _grape((0.23, 0.21, 0.2), (3.1, 0.7, 1.5)),
        _grape((0.22, 0.19, 0.18), (3.3, 0.96, 1.28)),
        _grape((0.23, 0.21, 0.2), (2.9, 0.7, 1.3)),
        _grape((0.21, 0.19, 0.17), (2.5, 0.7, 1.4)),
        _grape((0.22, 0.19, 0.17), (2.76, 0.95, 1.44)),
        _grape((0.21, 0.19, 0.17), (2.7, 0.7, 1.6)),
        _grape((0.18, 0.16, 0.15), (2.3, 0.7, 1.6)),
        # stem
        DrawPart(
            Shape.CYLINDER,
            scale=(0.02, 0.9, 0.02),
            rotation=(0.0, 15.0, 100.0),
            position=(4.0, 0.85, 1.14),
            color=(0.2, 0.4, 0.2, 1.0),
            material="grape",
        ),
    ),
)

PLATE_AND_KNIFE = SceneObject(
    "plate_and_knife",
    (
        DrawPart(
            Shape.CYLINDER,
            scale=(0.46, 0.08, 0.46),
            position=(0.7, 0.55, 1.8),
            color=_WHITE,
            material="plate",
        ),
        DrawPart(
            Shape.HALF_SPHERE,
            scale=(1.06, 0.1, 1.06),
            rotation=(180.0, 0.0, 0.0),
            position=(0.7, 0.71, 1.8),
            color=_WHITE,
            material="plate",
        ),
        # handle
        DrawPart(
            Shape.BOX,
            scale=(1.3, 0.18, 0.2),
            rotation=(0.0, 20.0, 4.0),
            position=(-1.2, 0.64, 1.9),
            texture="knifehandle",
            material="wood",
        ),
        # blade
        DrawPart(
            Shape.PYRAMID,
            scale=(0.2, 2.0, 0.01),
            rotation=(90.0, 110.0, 4.0),
            position=(0.2, 0.75, 1.395),
            texture="stainless",
            material="metal",
        ),
        # cheddar wedge
        DrawPart(
            Shape.PRISM,
            scale=(0.6, 0.25, 1.0),
            rotation=(8.0, -140.0, -6.4),
            position=(1.1, 0.785, 2.2),
            texture="cheddar",
            material="cheese",
        ),
        # handle rivet
        DrawPart(
            Shape.CYLINDER,
            scale=(0.05, 0.186, 0.05),
            rotation=(0.0, 0.0, 4.0),
            position=(-0.7, 0.584, 1.73),
            texture="knifescrew",
            material="metal",
            sides=False,
        ),
    ),
)

STILL_LIFE = SceneDefinition(
    textures=TEXTURES,
    materials=MATERIALS,
    objects=(
        TABLE,
        BACKDROP,
        CHEESE_WHEEL,
        BREAD_LOAF,
        WINE_BOTTLE,
        WINE_GLASS,
        GRAPES,
        PLATE_AND_KNIFE,
    ),
)
