import logging

from twobitchunker.model import Axis, BoundingBox, Raster, Region
from twobitchunker.segmentation.classifier import ink_mask
from twobitchunker.segmentation.scanner import MAX_RANGE_LENGTH, ProjectionScanner

logger = logging.getLogger(__name__)


class SegmentationEngine:
    def __init__(self, max_range_length: int = MAX_RANGE_LENGTH) -> None:
        self.max_range_length = max_range_length

    def segment(self, raster: Raster) -> list[Region]:
        """Splits the raster into boxes: bands of non-empty rows first, then runs of non-empty columns inside
        each band. Boxes are numbered from 1 in that order.
        """
        scanner = ProjectionScanner(raster, ink_mask(raster), self.max_range_length)

        logger.info("Detecting empty rows...")
        row_bands = scanner.scan(Axis.ROWS, raster.ys, raster.xs)

        regions: list[Region] = []
        next_sequence_number = 1
        for band in row_bands:
            logger.info("Processing rows %d to %d...", band.start, band.end)
            column_ranges = scanner.scan(Axis.COLUMNS, raster.xs, band.as_range())
            for column_range in column_ranges:
                regions.append(Region(next_sequence_number, BoundingBox(band, column_range)))
                next_sequence_number += 1
            logger.debug("Found %d images in rows %d to %d", len(column_ranges), band.start, band.end)

        return regions


def segment(raster: Raster) -> list[Region]:
    return SegmentationEngine().segment(raster)
