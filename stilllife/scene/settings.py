# stilllife/scene/settings.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from stilllife.graphics.lights import LightingSettings
from stilllife.graphics.texture_registry import MAX_TEXTURE_UNITS


@dataclass(frozen=True, slots=True)
class SceneSettings:
    """Where scene assets live and how the scene is lit."""

    texture_root: Path = Path("textures")
    max_texture_units: int = MAX_TEXTURE_UNITS
    lighting: LightingSettings = field(default_factory=LightingSettings)
