import numpy as np
import pytest

from conftest import CLEAR, blank, from_art, paint, raster_from_rgba8
from twobitchunker.model import (BoundingBox, DegenerateBoxError, IntRange, InvalidCoordinateError,
                                 InvalidPackedImageError, PackedImage)
from twobitchunker.packing.decoder import decode
from twobitchunker.packing.encoder import encode
from twobitchunker.segmentation.classifier import ink_mask
from twobitchunker.segmentation.engine import segment


def box(rows: tuple[int, int], cols: tuple[int, int]) -> BoundingBox:
    return BoundingBox(IntRange(*rows), IntRange(*cols))


class TestEncode:
    def test_three_by_three_square(self, square_raster):
        packed = encode(square_raster, box((2, 4), (2, 4)))
        assert (packed.width, packed.height) == (3, 3)
        assert packed.row_stride_bytes == 1
        assert packed.total_bytes == 3
        assert packed.data == bytes([0b11100000] * 3)

    def test_leftmost_pixel_is_most_significant_bit(self):
        raster = from_art("#.......")
        assert encode(raster, box((0, 0), (0, 7))).data == bytes([0b10000000])

    def test_rows_pad_to_whole_bytes(self):
        raster = from_art("""
            ##########
            #........#
        """)
        packed = encode(raster, box((0, 1), (0, 9)))
        assert packed.row_stride_bytes == 2
        assert packed.data == bytes([0b11111111, 0b11000000, 0b10000000, 0b01000000])

    def test_exact_multiple_of_eight_has_no_padding_byte(self):
        raster = raster_from_rgba8(blank(16, 1, fill=(0, 0, 0, 255)))
        packed = encode(raster, box((0, 0), (0, 15)))
        assert packed.data == b"\xff\xff"

    def test_box_inside_larger_raster(self, glyph_sheet):
        assert encode(glyph_sheet, box((1, 2), (5, 8))).data == bytes([0b10010000, 0b11100000])
        assert encode(glyph_sheet, box((4, 5), (2, 4))).data == bytes([0b11100000, 0b10100000])

    def test_transparent_pixels_are_zero_bits(self):
        arr = paint(blank(4, 1, fill=(0, 0, 0, 255)), range(0, 1), range(1, 3), CLEAR)
        assert encode(raster_from_rgba8(arr), box((0, 0), (0, 3))).data == bytes([0b10010000])

    def test_degenerate_box(self, square_raster):
        with pytest.raises(DegenerateBoxError):
            encode(square_raster, box((3, 2), (2, 4)))
        with pytest.raises(DegenerateBoxError):
            encode(square_raster, box((2, 4), (5, 4)))

    def test_box_outside_raster(self, square_raster):
        with pytest.raises(InvalidCoordinateError):
            encode(square_raster, box((8, 10), (2, 4)))


class TestPadding:
    @pytest.mark.parametrize("width", [1, 3, 7, 9, 13, 15])
    def test_padding_bits_are_zero(self, width):
        raster = raster_from_rgba8(blank(width, 3, fill=(0, 0, 0, 255)))
        packed = encode(raster, box((0, 2), (0, width - 1)))
        pad_bits = packed.row_stride_bytes * 8 - width
        for row in packed.rows():
            assert row[-1] & ((1 << pad_bits) - 1) == 0
            assert row[-1] >> pad_bits == (1 << (8 - pad_bits)) - 1


class TestRoundTrip:
    def test_decode_recovers_the_classification(self):
        rng = np.random.default_rng(11)
        arr = rng.integers(0, 256, size=(20, 23, 4), dtype=np.uint8)
        raster = raster_from_rgba8(arr)
        b = box((2, 17), (1, 21))
        grid = decode(encode(raster, b))
        assert grid.shape == (16, 21)
        assert np.array_equal(grid, ink_mask(raster, range(1, 22), range(2, 18)))

    def test_every_segmented_region(self, glyph_sheet):
        for region in segment(glyph_sheet):
            b = region.box
            grid = decode(encode(glyph_sheet, b))
            assert np.array_equal(grid, ink_mask(glyph_sheet, b.column_range.as_range(), b.row_range.as_range()))


class TestPackedImage:
    def test_length_must_match_metadata(self):
        with pytest.raises(InvalidPackedImageError):
            PackedImage(9, 2, bytes(3))

    def test_rejects_empty(self):
        with pytest.raises(InvalidPackedImageError):
            PackedImage(0, 1, b"")

    def test_rows(self):
        packed = PackedImage(9, 2, bytes([1, 2, 3, 4]))
        assert packed.rows() == [bytes([1, 2]), bytes([3, 4])]
