import logging
from typing import BinaryIO

from PIL import Image

from twobitchunker.model import PackedImage
from twobitchunker.packing.decoder import PackedImageDecoder

logger = logging.getLogger(__name__)


class PngWriter:
    """Writes a packed image as a 1 bit black and white PNG, ink in black."""

    def __init__(self) -> None:
        self.decoder = PackedImageDecoder()

    def to_image(self, packed: PackedImage) -> Image.Image:
        ink = self.decoder.decode(packed)
        # a bool array becomes a mode "1" image with True as white
        return Image.fromarray(~ink)

    def write(self, packed: PackedImage, output: str | BinaryIO):
        logger.debug("Encoding %dx%d PNG", packed.width, packed.height)
        self.to_image(packed).save(output, format="PNG")
