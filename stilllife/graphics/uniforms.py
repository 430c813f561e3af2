# stilllife/graphics/uniforms.py
import logging
from typing import Any

import moderngl
import numpy as np

logger = logging.getLogger(__name__)

# Uniform names of the scene shader.
MODEL = "model"
OBJECT_COLOR = "objectColor"
OBJECT_TEXTURE = "objectTexture"
USE_TEXTURE = "bUseTexture"
USE_LIGHTING = "bUseLighting"
UV_SCALE = "UVscale"
MATERIAL_DIFFUSE = "material.diffuseColor"
MATERIAL_SPECULAR = "material.specularColor"
MATERIAL_SHININESS = "material.shininess"

MAX_POINT_LIGHTS = 5


def point_light_uniform(index: int, field: str) -> str:
    return f"pointLights[{index}].{field}"


def pack_mat4(mat: np.ndarray) -> bytes:
    """
    Packs a 4x4 numpy matrix as float32 in column-major order.
    numpy is row-major, GLSL expects columns, so the matrix is transposed.
    """
    if mat.shape != (4, 4):
        raise ValueError("Matrix must be 4x4")
    return np.ascontiguousarray(mat.T, dtype="f4").tobytes()


def set_uniform(program: moderngl.Program | None, name: str, value: Any) -> bool:
    """
    Write one named uniform. Bytes go through write(), anything else is
    assigned to .value. Returns False if the program has no such uniform.
    """
    if program is None:
        return False

    if name not in program:
        logger.debug("Uniform '%s' not found in program", name)
        return False

    member = program[name]

    if isinstance(value, bytes):
        member.write(value)
    else:
        member.value = value
    return True
