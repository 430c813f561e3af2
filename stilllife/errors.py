# stilllife/errors.py


class TextureLoadError(ValueError):
    """Raised by codecs when an image cannot be turned into texture data."""


class UnsupportedChannelsError(TextureLoadError):
    def __init__(self, path: str, channels: int) -> None:
        super().__init__(
            f"Not implemented to handle image with {channels} channels: {path}"
        )
        self.path = path
        self.channels = channels
