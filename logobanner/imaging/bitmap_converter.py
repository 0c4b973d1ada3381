from __future__ import annotations
import logging
from typing import Optional

import numpy as np

from logobanner.config import Config
from logobanner.errors import NoSourceImageError
from logobanner.imaging.raster_image import BitmapMask, RasterImage

log = logging.getLogger(__name__)


class BitmapConverter:
    """Luminance threshold -> pure black/white mask, pixel by pixel, no resampling."""

    @staticmethod
    def to_bitmap_mask(image: Optional[RasterImage], threshold: float,
                       cfg: Config = Config()) -> BitmapMask:
        if image is None:
            raise NoSourceImageError("No processed logo available")
        if not 0 < threshold <= 1:
            raise ValueError(f"threshold must be within (0, 1], got {threshold}")

        px = image.pixels.astype(np.int64)
        # 0.299 R + 0.587 G + 0.114 B, kept in thousandths so white is exactly 255000
        lum_milli = 299 * px[..., 0] + 587 * px[..., 1] + 114 * px[..., 2]
        ink = (px[..., 3] >= cfg.TRANSPARENCY_FLOOR) & (lum_milli < threshold * 255000)

        out = np.full(image.pixels.shape, 255, dtype=np.uint8)
        out[ink, :3] = 0
        log.debug("Bitmap at threshold %.2f: %d of %d pixels are ink",
                  threshold, int(ink.sum()), ink.size)
        return BitmapMask(out)
