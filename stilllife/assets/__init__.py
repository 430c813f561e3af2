from stilllife.assets.importers.base import ImageCodec
from stilllife.assets.importers.texture import PillowCodec
from stilllife.assets.types import DecodedImage

__all__ = [
    "DecodedImage",
    "ImageCodec",
    "PillowCodec",
]
