from __future__ import annotations
import logging
from typing import Optional

import numpy as np
from PIL import Image, ImageDraw

from logobanner.config import BannerSpec, Config, hex_to_rgb
from logobanner.imaging.image_fitter import ImageFitter
from logobanner.imaging.raster_image import RasterImage

log = logging.getLogger(__name__)


class BackgroundRenderer:
    """Paints the banner background: solid, diagonal gradient, checker, or an uploaded image."""

    def __init__(self, cfg: Config = Config()):
        self.cfg = cfg

    def render(self, canvas: Image.Image, spec: BannerSpec,
               uploaded: Optional[RasterImage] = None) -> None:
        if spec.mode == "upload":
            if uploaded is not None:
                self._uploaded(canvas, uploaded)
                return
            log.warning("Upload mode without a background image, falling back to solid %s", spec.bg)
            self._solid(canvas, spec)
        elif spec.mode == "solid":
            self._solid(canvas, spec)
        elif spec.mode == "gradient":
            self._gradient(canvas, spec)
        else:
            self._checker(canvas, spec)

    @staticmethod
    def _solid(canvas: Image.Image, spec: BannerSpec):
        canvas.paste((*hex_to_rgb(spec.bg), 255), (0, 0, canvas.width, canvas.height))

    @staticmethod
    def _gradient(canvas: Image.Image, spec: BannerSpec):
        w, h = canvas.size
        # project each pixel center onto the (0,0)->(w,h) diagonal
        ys, xs = np.mgrid[0:h, 0:w].astype(np.float64) + 0.5
        t = np.clip((xs * w + ys * h) / float(w * w + h * h), 0.0, 1.0)[..., None]
        start = np.array(hex_to_rgb(spec.bg), dtype=np.float64)
        end = np.array(hex_to_rgb(spec.grad), dtype=np.float64)
        rgb = np.rint(start + (end - start) * t).astype(np.uint8)
        alpha = np.full((h, w, 1), 255, dtype=np.uint8)
        canvas.paste(Image.fromarray(np.concatenate([rgb, alpha], axis=-1)))

    def _checker(self, canvas: Image.Image, spec: BannerSpec):
        self._solid(canvas, spec)
        cell, pitch = self.cfg.CHECKER_CELL, self.cfg.CHECKER_PITCH
        fill = (*hex_to_rgb(spec.grad), round(self.cfg.CHECKER_ALPHA * 255))
        overlay = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(overlay)
        for x in range(0, canvas.width, pitch):
            for y in range(0, canvas.height, pitch):
                if ((x + y) // pitch) % 2 == 0:
                    draw.rectangle((x, y, x + cell - 1, y + cell - 1), fill=fill)
        canvas.alpha_composite(overlay)

    @staticmethod
    def _uploaded(canvas: Image.Image, uploaded: RasterImage):
        # stretched to the canvas; aspect ratio is not preserved
        stretched = ImageFitter.stretch(uploaded.pixels, canvas.width, canvas.height)
        canvas.paste(Image.fromarray(np.ascontiguousarray(stretched)))
