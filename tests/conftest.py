from pathlib import Path

import moderngl
import numpy as np
import pytest

from stilllife.assets import DecodedImage, ImageCodec
from stilllife.errors import TextureLoadError
from stilllife.graphics import uniforms as u


class FakeTexture:
    def __init__(self, size, components, data):
        self.size = size
        self.components = components
        self.data = data
        self.repeat_x = False
        self.repeat_y = False
        self.filter = None
        self.mipmaps_built = False
        self.unit = None
        self.released = False

    def build_mipmaps(self):
        self.mipmaps_built = True
        self.filter = (moderngl.LINEAR_MIPMAP_LINEAR, moderngl.LINEAR)

    def use(self, location=0):
        self.unit = location

    def release(self):
        self.released = True


class FakeContext:
    """Stands in for moderngl.Context; only creates textures."""

    def __init__(self):
        self.textures = []

    def texture(self, size, components, data=None, **kwargs):
        tex = FakeTexture(size, components, data)
        self.textures.append(tex)
        return tex


class FakeUniform:
    def __init__(self, name, log):
        self.name = name
        self.data = None
        self._value = None
        self._log = log

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, v):
        self._value = v
        self._log.append(self.name)

    def write(self, data):
        self.data = data
        self._log.append(self.name)

    def matrix(self):
        return np.frombuffer(self.data, dtype="f4").reshape(4, 4).T


def _scene_uniform_names():
    names = [
        u.MODEL,
        u.OBJECT_COLOR,
        u.OBJECT_TEXTURE,
        u.USE_TEXTURE,
        u.USE_LIGHTING,
        u.UV_SCALE,
        u.MATERIAL_DIFFUSE,
        u.MATERIAL_SPECULAR,
        u.MATERIAL_SHININESS,
    ]
    for field in ("direction", "ambient", "diffuse", "specular", "bActive"):
        names.append(f"directionalLight.{field}")
    for i in range(u.MAX_POINT_LIGHTS):
        for field in (
            "position",
            "ambient",
            "diffuse",
            "specular",
            "constant",
            "linear",
            "quadratic",
            "bActive",
        ):
            names.append(u.point_light_uniform(i, field))
    for field in (
        "ambient",
        "diffuse",
        "specular",
        "constant",
        "linear",
        "quadratic",
        "cutOff",
        "outerCutOff",
        "bActive",
    ):
        names.append(f"spotLight.{field}")
    return names


class FakeProgram:
    """Name-keyed uniform access like moderngl.Program; records write order."""

    def __init__(self, names=None):
        self.log = []
        self._uniforms = {
            name: FakeUniform(name, self.log)
            for name in (names if names is not None else _scene_uniform_names())
        }

    def __contains__(self, name):
        return name in self._uniforms

    def __getitem__(self, name):
        return self._uniforms[name]

    def value(self, name):
        return self._uniforms[name].value


class FakeMeshes:
    def __init__(self, program=None):
        self.loaded = []
        self.draws = []
        self._program = program

    def load(self, shape):
        self.loaded.append(shape)

    def draw(self, shape, *, top=True, bottom=True, sides=True):
        self.draws.append((shape, top, bottom, sides))
        if self._program is not None:
            self._program.log.append(f"draw:{shape.value}")


class FakeCodec(ImageCodec):
    """Decodes file names registered up front; anything else fails."""

    def __init__(self, images=None):
        self.images = dict(images or {})

    def decode(self, path: Path) -> DecodedImage:
        try:
            return self.images[Path(path).name]
        except KeyError:
            raise TextureLoadError(f"Could not load image: {path}")


def solid_image(width=4, height=4, components=3):
    return DecodedImage(
        data=bytes(width * height * components),
        width=width,
        height=height,
        components=components,
    )


@pytest.fixture
def gl():
    return FakeContext()


@pytest.fixture
def program():
    return FakeProgram()


@pytest.fixture
def meshes(program):
    return FakeMeshes(program)


@pytest.fixture
def codec():
    return FakeCodec()


@pytest.fixture
def make_image():
    return solid_image


@pytest.fixture
def make_program():
    return FakeProgram
