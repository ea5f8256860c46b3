from typing import BinaryIO

import numpy as np
from PIL import Image

from twobitchunker.model import Raster

# 8 bit channel * 257 spans the full 16 bit range
CHANNEL_SCALE = 257

def load_raster(src: str | BinaryIO) -> Raster:
    with Image.open(src) as im:
        rgba = np.array(im.convert("RGBA"), dtype=np.uint16)
    return Raster(rgba * CHANNEL_SCALE)
