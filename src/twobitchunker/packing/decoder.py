from io import BytesIO

import numpy as np

from twobitchunker.bitbuffer import EOF, BitBuffer
from twobitchunker.model import InvalidPackedImageError, PackedImage
from twobitchunker.packing.encoder import INK_BIT


class PackedImageDecoder:
    def decode(self, packed: PackedImage) -> np.ndarray:
        """Returns a (height, width) bool grid, True for ink. Row padding is dropped."""
        ink = np.zeros((packed.height, packed.width), dtype=np.bool_)
        buff = BitBuffer(BytesIO(packed.data))

        for y in range(packed.height):
            for x in range(packed.width):
                bit = buff.read()
                if bit == EOF:
                    raise InvalidPackedImageError(f"Packed data ends inside row {y}")
                ink[y, x] = bit == INK_BIT
            buff.skip_to_byte_boundary()
        return ink


def decode(packed: PackedImage) -> np.ndarray:
    return PackedImageDecoder().decode(packed)
