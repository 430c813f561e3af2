# stilllife/assets/importers/base.py
from abc import ABC, abstractmethod
from pathlib import Path

from stilllife.assets.types import DecodedImage


class ImageCodec(ABC):
    @abstractmethod
    def decode(self, path: Path) -> DecodedImage:
        """
        Read an image file from disk and return its raw pixels.
        Raises TextureLoadError when the file cannot be decoded.
        """
        pass
