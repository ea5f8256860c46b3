from dataclasses import dataclass
from enum import Enum

import numpy as np


class ChunkerError(Exception):
    pass

class InvalidCoordinateError(ChunkerError, IndexError):
    pass

class DegenerateBoxError(ChunkerError, ValueError):
    pass

class InvalidPackedImageError(ChunkerError, ValueError):
    pass


class Axis(Enum):
    ROWS = 0
    COLUMNS = 1


class Raster:
    """Read-only RGBA pixel grid with 16 bit channels.

    Pixels are stored as a (height, width, 4) uint16 array indexed [y, x]. Coordinates used by the rest of the
    package are absolute: the array's [0, 0] element sits at (min_x, min_y).
    """
    CHANNELS = 4

    def __init__(self, pixels: np.ndarray, min_x: int = 0, min_y: int = 0) -> None:
        if pixels.ndim != 3 or pixels.shape[2] != self.CHANNELS:
            raise ValueError(f"Expected a (height, width, {self.CHANNELS}) pixel array, got shape {pixels.shape}")
        self.pixels = np.array(pixels, dtype=np.uint16)
        self.pixels.flags.writeable = False
        self.min_x = min_x
        self.min_y = min_y

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def max_x(self) -> int:
        return self.min_x + self.width

    @property
    def max_y(self) -> int:
        return self.min_y + self.height

    @property
    def xs(self) -> range:
        return range(self.min_x, self.max_x)

    @property
    def ys(self) -> range:
        return range(self.min_y, self.max_y)

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y

    def check_window(self, xs: range, ys: range):
        for name, r, lo, hi in (("x", xs, self.min_x, self.max_x), ("y", ys, self.min_y, self.max_y)):
            if len(r) > 0 and (r.start < lo or r.stop > hi):
                raise InvalidCoordinateError(f"{name} range [{r.start}, {r.stop}) is outside [{lo}, {hi})")

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        if not self.contains(x, y):
            raise InvalidCoordinateError(f"Pixel ({x}, {y}) is outside the raster bounds "
                                         f"[{self.min_x}, {self.max_x}) x [{self.min_y}, {self.max_y})")
        r, g, b, a = self.pixels[y - self.min_y, x - self.min_x]
        return int(r), int(g), int(b), int(a)

    def window(self, xs: range, ys: range) -> np.ndarray:
        self.check_window(xs, ys)
        return self.pixels[ys.start - self.min_y:ys.stop - self.min_y, xs.start - self.min_x:xs.stop - self.min_x]


@dataclass(frozen=True)
class IntRange:
    start: int
    end: int # inclusive

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def as_range(self) -> range:
        return range(self.start, self.end + 1)


@dataclass(frozen=True)
class BoundingBox:
    row_range: IntRange
    column_range: IntRange

    @property
    def top(self) -> int:
        return self.row_range.start

    @property
    def left(self) -> int:
        return self.column_range.start

    @property
    def width(self) -> int:
        return self.column_range.end - self.column_range.start + 1

    @property
    def height(self) -> int:
        return self.row_range.end - self.row_range.start + 1


@dataclass(frozen=True)
class Region:
    sequence_number: int
    box: BoundingBox


def row_stride_bytes(width: int) -> int:
    return (width + 7) // 8

@dataclass(frozen=True)
class PackedImage:
    width: int
    height: int
    data: bytes

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise InvalidPackedImageError(f"Packed image must be at least 1x1, got {self.width}x{self.height}")
        if len(self.data) != self.height * self.row_stride_bytes:
            raise InvalidPackedImageError(
                f"Expected {self.height * self.row_stride_bytes} bytes for a {self.width}x{self.height} image, "
                f"got {len(self.data)}")

    @property
    def row_stride_bytes(self) -> int:
        return row_stride_bytes(self.width)

    @property
    def total_bytes(self) -> int:
        return len(self.data)

    def rows(self) -> list[bytes]:
        stride = self.row_stride_bytes
        return [self.data[i:i + stride] for i in range(0, len(self.data), stride)]
