from enum import Enum

import numpy as np

from twobitchunker.model import Raster

MAX_CHANNEL = 0xFFFF
# pixels less opaque than half the channel range are transparent
OPACITY_THRESHOLD = 0x7FFF
# r + g + b above 1.5x the channel range is white
BRIGHTNESS_THRESHOLD = 0x7FFF * 3


class PixelClass(Enum):
    BACKGROUND = 0
    INK = 1


def classify(pixel: tuple[int, int, int, int]) -> PixelClass:
    r, g, b, a = pixel
    if a < OPACITY_THRESHOLD:
        return PixelClass.BACKGROUND
    if int(r) + int(g) + int(b) > BRIGHTNESS_THRESHOLD:
        return PixelClass.BACKGROUND
    return PixelClass.INK

def ink_mask(raster: Raster, xs: range | None = None, ys: range | None = None) -> np.ndarray:
    """ Classifies a window of the raster at once, same rule as classify()

    Args:
        raster (Raster): source raster, left untouched
        xs (range | None): absolute columns of the window, whole width by default
        ys (range | None): absolute rows of the window, whole height by default

    Returns:
        np.ndarray: fresh bool array of shape (len(ys), len(xs)), True where the pixel is ink
    """
    xs = raster.xs if xs is None else xs
    ys = raster.ys if ys is None else ys
    window = raster.window(xs, ys).astype(np.int32)
    opaque = window[..., 3] >= OPACITY_THRESHOLD
    dark = window[..., :3].sum(axis=-1) <= BRIGHTNESS_THRESHOLD
    return opaque & dark
