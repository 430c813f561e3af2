# stilllife/assets/types.py
from dataclasses import dataclass


@dataclass(frozen=True)
class DecodedImage:
    """Raw pixel data and metadata, ready for GPU upload."""

    data: bytes
    width: int
    height: int
    components: int  # 3 (RGB) or 4 (RGBA) are uploadable
