import logging
import os
from dataclasses import dataclass

from twobitchunker.config import ChunkerConfig
from twobitchunker.model import PackedImage, Raster, Region
from twobitchunker.output.c_source import CSourceSerializer
from twobitchunker.output.png import PngWriter
from twobitchunker.packing.encoder import BitPackingEncoder
from twobitchunker.segmentation.engine import SegmentationEngine

logger = logging.getLogger(__name__)


@dataclass
class ExtractedImage:
    region: Region
    packed: PackedImage
    png_path: str | None = None
    c_path: str | None = None


class Extractor:
    def __init__(self, config: ChunkerConfig | None = None) -> None:
        self.config = ChunkerConfig() if config is None else config
        self.config.validate()
        self.engine = SegmentationEngine()
        self.encoder = BitPackingEncoder()
        self.png_writer = PngWriter()
        self.c_serializer = CSourceSerializer(self.config.symbol_prefix)

    def extract(self, raster: Raster) -> list[ExtractedImage]:
        regions = self.engine.segment(raster)
        if regions and (self.config.write_png or self.config.write_c):
            os.makedirs(self.config.output_dir, exist_ok=True)

        extracted = []
        for region in regions:
            packed = self.encoder.encode(raster, region.box)
            extracted.append(self._write(region, packed))

        logger.info("%d images extracted.", len(extracted))
        return extracted

    def _write(self, region: Region, packed: PackedImage) -> ExtractedImage:
        n = region.sequence_number
        result = ExtractedImage(region, packed)
        if self.config.write_png:
            result.png_path = os.path.join(self.config.output_dir, f"{n}.png")
            logger.info("Writing %s, which is %dx%d...", result.png_path, packed.width, packed.height)
            self.png_writer.write(packed, result.png_path)
        if self.config.write_c:
            result.c_path = os.path.join(self.config.output_dir, f"{n}.c")
            logger.info("Writing %s as C data...", result.c_path)
            self.c_serializer.serialize(packed, n, result.c_path)
        return result
