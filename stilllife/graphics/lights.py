# stilllife/graphics/lights.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from stilllife.graphics.uniforms import MAX_POINT_LIGHTS
from stilllife.types import RGB, Vec3


@dataclass(frozen=True, slots=True)
class DirectionalLight:
    """Sun-like light with no position or falloff."""

    direction: Vec3 = (-0.05, -0.3, -0.1)
    ambient: RGB = (0.05, 0.05, 0.05)
    diffuse: RGB = (0.6, 0.6, 0.6)
    specular: RGB = (0.0, 0.0, 0.0)


@dataclass(frozen=True, slots=True)
class PointLight:
    """
    Omni-directional light source.
    Attenuation is 1 / (constant + linear * d + quadratic * d^2).
    """

    position: Vec3
    ambient: RGB = (0.05, 0.05, 0.05)
    diffuse: RGB = (0.3, 0.3, 0.3)
    specular: RGB = (0.1, 0.1, 0.1)
    constant: float = 1.0
    linear: float = 0.09
    quadratic: float = 0.032


@dataclass(frozen=True, slots=True)
class SpotLight:
    """
    Cone light following the camera.
    Cutoffs are half-angles in degrees; the shader receives their cosines.
    """

    ambient: RGB = (0.8, 0.8, 0.8)
    diffuse: RGB = (1.0, 1.0, 1.0)
    specular: RGB = (0.7, 0.7, 0.7)
    constant: float = 1.0
    linear: float = 0.09
    quadratic: float = 0.032
    cutoff_degrees: float = 42.5
    outer_cutoff_degrees: float = 48.0


def _default_point_lights() -> Tuple[PointLight, ...]:
    return (
        PointLight(position=(-4.0, 8.0, 0.0)),
        PointLight(position=(4.0, 8.0, 0.0)),
        PointLight(
            position=(3.8, 5.5, 4.0),
            diffuse=(0.2, 0.2, 0.2),
            specular=(0.8, 0.8, 0.8),
        ),
        PointLight(
            position=(3.8, 3.5, 4.0),
            diffuse=(0.2, 0.2, 0.2),
            specular=(0.8, 0.8, 0.8),
        ),
        PointLight(
            position=(-3.2, 6.0, -4.0),
            diffuse=(0.9, 0.9, 0.9),
            specular=(0.1, 0.1, 0.1),
        ),
    )


@dataclass(frozen=True, slots=True)
class LightingSettings:
    """Light sources pushed to the shader once per prepare."""

    directional: Optional[DirectionalLight] = field(default_factory=DirectionalLight)
    point_lights: Tuple[PointLight, ...] = field(default_factory=_default_point_lights)
    spot: Optional[SpotLight] = field(default_factory=SpotLight)

    def __post_init__(self) -> None:
        if len(self.point_lights) > MAX_POINT_LIGHTS:
            raise ValueError(
                f"At most {MAX_POINT_LIGHTS} point lights are supported, "
                f"got {len(self.point_lights)}"
            )
