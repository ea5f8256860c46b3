import argparse
import logging

from twobitchunker.config import ChunkerConfig
from twobitchunker.extractor import Extractor
from twobitchunker.utils import load_raster

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_CONFIG = 1
EXIT_CANNOT_OPEN = 2
EXIT_CANNOT_DECODE = 3
EXIT_CANNOT_WRITE = 4

DESCRIPTION = """\
TwoBitChunker takes an image (preferably black & white) and finds individual chunks inside the image. \
It does this by scanning for rows and columns of white/clear data and using that information to generate \
simple bounding boxes. These sub-images are extracted, saved as PNGs and C source with one bit per pixel."""

EPILOG = """\
The input should be a GIF, PNG, or JPEG image. Pixels brighter than mid-gray are white, all others black. \
Pixels less than half opaque are white.

Outputs are sequentially numbered PNGs and C source (i.e. 1.png and 1.c, 2.png and 2.c, etc). \
Each C file declares imageXWidth, imageXHeight, imageXSize and imageXData. Width and height are bytes, \
data is a single-dimensional array of bytes containing the pixel data, padded to byte boundaries with 0s, \
in row order."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="twobitchunker", description=DESCRIPTION, epilog=EPILOG,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("image", help="GIF, PNG or JPEG file to split")
    parser.add_argument("-o", "--output-dir", default=ChunkerConfig.output_dir,
                        help="directory for the numbered outputs (default: %(default)s)")
    parser.add_argument("--prefix", default=ChunkerConfig.symbol_prefix,
                        help="prefix of the C symbol names (default: %(default)s)")
    parser.add_argument("--no-png", action="store_true", help="don't write N.png files")
    parser.add_argument("--no-c", action="store_true", help="don't write N.c files")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="log per image details")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="only log warnings and errors")
    return parser

def configure_logging(verbose: bool, quiet: bool):
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    config = ChunkerConfig(output_dir=args.output_dir, symbol_prefix=args.prefix,
                           write_png=not args.no_png, write_c=not args.no_c)
    try:
        config.validate()
    except ValueError as e:
        logger.error("Invalid options: %s", e)
        return EXIT_BAD_CONFIG

    try:
        raster = load_raster(args.image)
    except (FileNotFoundError, IsADirectoryError, PermissionError) as e:
        logger.error("Unable to open file %s: %s", args.image, e)
        return EXIT_CANNOT_OPEN
    except OSError as e:
        # UnidentifiedImageError, truncated or corrupt data
        logger.error("Error trying to read your image %s: %s", args.image, e)
        return EXIT_CANNOT_DECODE

    try:
        Extractor(config).extract(raster)
    except OSError as e:
        logger.error("Unable to write output: %s", e)
        return EXIT_CANNOT_WRITE
    return EXIT_OK
