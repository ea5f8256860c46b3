import logging
from enum import Enum

import numpy as np
from numba import njit

from twobitchunker.model import Axis, IntRange, Raster
from twobitchunker.segmentation.classifier import ink_mask

logger = logging.getLogger(__name__)

# widths and heights are written out as single bytes
MAX_RANGE_LENGTH = 256


class ScanState(Enum):
    NO_ACTIVE_RANGE = 0
    IN_RANGE = 1


@njit
def _empty_lines_jit(ink: np.ndarray) -> np.ndarray:
    empty = np.ones(ink.shape[0], dtype=np.bool_)
    for i in range(ink.shape[0]):
        for j in range(ink.shape[1]):
            if ink[i, j]:
                empty[i] = False
                break
    return empty


class ProjectionScanner:
    def __init__(self, raster: Raster, ink: np.ndarray | None = None, max_range_length: int = MAX_RANGE_LENGTH) -> None:
        """
        Args:
            raster (Raster): raster being scanned
            ink (np.ndarray | None): precomputed ink_mask() of the whole raster, computed here if missing
            max_range_length (int): closed ranges at least this long are dropped with a warning
        """
        self.raster = raster
        self.ink = ink_mask(raster) if ink is None else ink
        self.max_range_length = max_range_length

    def scan(self, axis: Axis, primary: range, secondary: range) -> list[IntRange]:
        """Finds the maximal runs of indices along primary whose line over secondary holds at least one ink pixel."""
        empty = self._empty_lines(axis, primary, secondary)

        ranges: list[IntRange] = []
        state = ScanState.NO_ACTIVE_RANGE
        start = None
        for offset, i in enumerate(primary):
            if state == ScanState.NO_ACTIVE_RANGE:
                if not empty[offset]:
                    state, start = ScanState.IN_RANGE, i
            elif empty[offset]:
                self._close(ranges, axis, IntRange(start, i - 1))
                state, start = ScanState.NO_ACTIVE_RANGE, None

        if state == ScanState.IN_RANGE:
            self._close(ranges, axis, IntRange(start, primary.stop - 1))
        return ranges

    def _empty_lines(self, axis: Axis, primary: range, secondary: range) -> np.ndarray:
        if axis == Axis.ROWS:
            xs, ys = secondary, primary
        else:
            xs, ys = primary, secondary
        self.raster.check_window(xs, ys)
        if len(primary) == 0:
            return np.ones(0, dtype=np.bool_)
        if len(secondary) == 0:
            return np.ones(len(primary), dtype=np.bool_)

        window = self.ink[ys.start - self.raster.min_y:ys.stop - self.raster.min_y,
                          xs.start - self.raster.min_x:xs.stop - self.raster.min_x]
        if axis == Axis.COLUMNS:
            window = window.T
        return _empty_lines_jit(np.ascontiguousarray(window))

    def _close(self, ranges: list[IntRange], axis: Axis, closed: IntRange):
        if closed.length >= self.max_range_length:
            logger.warning("Unbroken group of %s between %d and %d is %d long (limit %d), skipping",
                           axis.name.lower(), closed.start, closed.end, closed.length, self.max_range_length - 1)
            return
        ranges.append(closed)


def scan(raster: Raster, axis: Axis, primary: range, secondary: range) -> list[IntRange]:
    return ProjectionScanner(raster).scan(axis, primary, secondary)
