# stilllife/assets/importers/texture.py
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from stilllife.assets.importers.base import ImageCodec
from stilllife.assets.types import DecodedImage
from stilllife.errors import TextureLoadError

# Modes whose bands are not color channels; expanded the way stb_image does.
_COLOR_MODES = {
    "CMYK": "RGB",
    "YCbCr": "RGB",
    "PA": "RGBA",
}


def _normalize_mode(img: Image.Image) -> Image.Image:
    if img.mode == "P":
        return img.convert("RGBA" if "transparency" in img.info else "RGB")

    target = _COLOR_MODES.get(img.mode)
    if target is not None:
        return img.convert(target)

    # L / LA and friends pass through so the channel check can reject them
    return img


class PillowCodec(ImageCodec):
    """
    Decodes image files with Pillow, keeping the file's own channel layout.

    Palette images expand to RGB (RGBA with transparency) and CMYK/YCbCr to
    RGB. Rows are flipped so the first row in memory is the bottom of the
    image, matching OpenGL texture coordinates.
    """

    def __init__(self, flip_vertically: bool = True) -> None:
        self.flip_vertically = flip_vertically

    def decode(self, path: Path) -> DecodedImage:
        try:
            with Image.open(path) as img:
                img.load()
                img = _normalize_mode(img)
                if self.flip_vertically:
                    img = img.transpose(Image.Transpose.FLIP_TOP_BOTTOM)

                width, height = img.size
                components = len(img.getbands())
                data = img.tobytes()
        except (
            OSError,
            UnidentifiedImageError,
            Image.DecompressionBombError,
            ValueError,
            SyntaxError,
        ) as e:
            raise TextureLoadError(f"Could not load image: {path} ({e})") from e

        return DecodedImage(
            data=data, width=width, height=height, components=components
        )
