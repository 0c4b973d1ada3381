from __future__ import annotations
import logging
from typing import NamedTuple

import numpy as np

from logobanner.config import Config, hex_to_rgb
from logobanner.imaging.raster_image import RasterImage

log = logging.getLogger(__name__)


class DominantColor(NamedTuple):
    r: int
    g: int
    b: int

    @property
    def hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self)

    @classmethod
    def from_hex(cls, value: str) -> "DominantColor":
        return cls(*hex_to_rgb(value))


class ColorExtractor:
    """Histogram of rounded colors over a pixel sample; the fullest non-white bucket wins.

    Buckets are compared in first-seen order and only a strictly larger count
    replaces the current winner, so equal counts resolve to whichever bucket
    the sample met first.
    """

    @staticmethod
    def dominant_color(image: RasterImage, cfg: Config = Config()) -> DominantColor:
        sample = image.pixels.reshape(-1, 4)[::cfg.SAMPLE_STRIDE]
        rgb = sample[sample[:, 3] >= cfg.OPACITY_FLOOR, :3].astype(np.int32)

        step = cfg.QUANT_STEP
        quant = (np.floor(rgb / step + 0.5) * step).astype(np.int32)
        quant = quant[~np.all(quant > cfg.NEAR_WHITE, axis=1)]
        if len(quant) == 0:
            log.debug("No colored pixels sampled, using fallback %s", cfg.FALLBACK_COLOR)
            return DominantColor.from_hex(cfg.FALLBACK_COLOR)

        keys = (quant[:, 0] << 20) | (quant[:, 1] << 10) | quant[:, 2]
        _, first_seen, counts = np.unique(keys, return_index=True, return_counts=True)
        order = np.argsort(first_seen)
        winner = first_seen[order[np.argmax(counts[order])]]

        # rounding can push a channel to 260
        r, g, b = (min(255, int(c)) for c in quant[winner])
        color = DominantColor(r, g, b)
        log.debug("Dominant color %s (%d of %d sampled pixels)",
                  color.hex, int(counts[order].max()), len(sample))
        return color
