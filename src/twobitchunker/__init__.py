from twobitchunker.model import (Axis, BoundingBox, ChunkerError, DegenerateBoxError, IntRange,
                                 InvalidCoordinateError, InvalidPackedImageError, PackedImage, Raster, Region)

__version__ = "0.1.0"
