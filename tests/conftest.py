"""Shared raster builders."""

from __future__ import annotations

import numpy as np
import pytest

from twobitchunker.model import Raster
from twobitchunker.utils import CHANNEL_SCALE

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
CLEAR = (0, 0, 0, 0)


def raster_from_rgba8(arr: np.ndarray) -> Raster:
    return Raster(arr.astype(np.uint16) * CHANNEL_SCALE)


def blank(width: int, height: int, fill=WHITE) -> np.ndarray:
    arr = np.empty((height, width, 4), dtype=np.uint8)
    arr[...] = fill
    return arr


def paint(arr: np.ndarray, rows: range, cols: range, color=BLACK) -> np.ndarray:
    arr[rows.start:rows.stop, cols.start:cols.stop] = color
    return arr


def from_art(art: str):
    """Raster from rows of '#' (black) and '.' (white)."""
    lines = [line.strip() for line in art.strip().splitlines()]
    arr = blank(len(lines[0]), len(lines))
    for y, line in enumerate(lines):
        for x, c in enumerate(line):
            if c == "#":
                arr[y, x] = BLACK
    return raster_from_rgba8(arr)


@pytest.fixture
def empty_raster():
    return raster_from_rgba8(blank(10, 10))


@pytest.fixture
def square_raster():
    return raster_from_rgba8(paint(blank(10, 10), range(2, 5), range(2, 5)))


@pytest.fixture
def two_band_raster():
    arr = blank(12, 12)
    paint(arr, range(1, 4), range(2, 6))
    paint(arr, range(6, 10), range(5, 8))
    return raster_from_rgba8(arr)


@pytest.fixture
def glyph_sheet():
    return from_art("""
        ..........
        .##..#..#.
        .#...###..
        ..........
        ..###.....
        ..#.#..##.
        ..........
    """)
