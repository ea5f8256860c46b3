from io import BytesIO

from twobitchunker.bitbuffer import BitBuffer
from twobitchunker.model import BoundingBox, DegenerateBoxError, PackedImage, Raster, row_stride_bytes
from twobitchunker.segmentation.classifier import ink_mask

INK_BIT = 1
BACKGROUND_BIT = 0
PADDING_BIT = 0
BITS_PER_BYTE = 8


class BitPackingEncoder:
    def encode(self, raster: Raster, box: BoundingBox) -> PackedImage:
        """ Packs the box one bit per pixel, rows padded to whole bytes, leftmost pixel in the most significant bit

        Args:
            raster (Raster): source raster
            box (BoundingBox): inclusive pixel extent to encode

        Returns:
            PackedImage: ceil(width / 8) bytes per row, rows back to back
        """
        width, height = box.width, box.height
        if width < 1 or height < 1:
            raise DegenerateBoxError(f"Cannot encode a {width}x{height} box at ({box.left}, {box.top})")

        ink = ink_mask(raster, box.column_range.as_range(), box.row_range.as_range())
        stride = row_stride_bytes(width)

        out = BytesIO()
        buff = BitBuffer(out)
        for y in range(height):
            for b in range(stride):
                for i in range(BITS_PER_BYTE):
                    x = b * BITS_PER_BYTE + i
                    if x >= width:
                        buff.write(PADDING_BIT)
                    else:
                        buff.write(INK_BIT if ink[y, x] else BACKGROUND_BIT)
        if not buff.is_empty():
            buff.flush()

        return PackedImage(width, height, out.getvalue())


def encode(raster: Raster, box: BoundingBox) -> PackedImage:
    return BitPackingEncoder().encode(raster, box)
