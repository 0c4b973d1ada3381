from __future__ import annotations
import base64
import logging
from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from PIL import Image

from logobanner.config import hex_to_rgb, normalize_hex
from logobanner.errors import NoMaskAvailableError
from logobanner.imaging.image_io import ImageIO
from logobanner.imaging.raster_image import BitmapMask

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class VectorArtifact:
    """Recolorable logo: SVG markup plus the mask it was built from."""
    mask: BitmapMask = field(repr=False, compare=False)
    fill: str
    markup: str = field(repr=False)

    @property
    def width(self) -> int:
        return self.mask.width

    @property
    def height(self) -> int:
        return self.mask.height

    @property
    def aspect_ratio(self) -> float:
        return self.mask.aspect_ratio

    def to_bytes(self) -> bytes:
        return self.markup.encode("utf-8")

    def rasterize(self, width: int, height: int) -> Image.Image:
        """Render at ``width`` x ``height``: ink in ``fill``, everything else transparent.

        Same result a browser produces for the markup: the mask is inverted and
        used as alpha over a solid rectangle, so enclosed holes stay see-through.
        """
        width, height = max(1, width), max(1, height)
        alpha = Image.fromarray(np.where(self.mask.ink, 255, 0).astype(np.uint8))
        if alpha.size != (width, height):
            alpha = alpha.resize((width, height), Image.Resampling.LANCZOS)
        layer = Image.new("RGBA", (width, height), (*hex_to_rgb(self.fill), 255))
        layer.putalpha(alpha)
        return layer


class VectorSynthesizer:
    """Wraps a BitmapMask into an SVG whose filled rect is clipped by the inverted mask."""

    @staticmethod
    def synthesize(mask: Optional[BitmapMask], fill: str) -> VectorArtifact:
        if mask is None:
            raise NoMaskAvailableError("Convert to bitmap first")
        color = normalize_hex(fill)
        if color is None:
            raise ValueError(f"fill is not a 6-digit hex color: {fill!r}")

        w, h = mask.width, mask.height
        data_url = "data:image/png;base64," + base64.b64encode(
            ImageIO.encode_png(mask.to_pil())).decode("ascii")
        markup = f"""<svg xmlns="http://www.w3.org/2000/svg"
     viewBox="0 0 {w} {h}" width="100%" height="100%">
  <defs>
    <filter id="invertMask">
      <feColorMatrix type="matrix"
        values="-1 0 0 0 1
                 0 -1 0 0 1
                 0 0 -1 0 1
                 0 0  0 1 0"/>
    </filter>
    <mask id="logoMask">
      <image href="{data_url}"
             width="{w}" height="{h}"
             style="filter:url(#invertMask)"/>
    </mask>
  </defs>
  <rect width="100%" height="100%"
        fill="{color}"
        mask="url(#logoMask)"/>
</svg>
"""
        log.debug("Vector %dx%d filled %s", w, h, color)
        return VectorArtifact(mask=mask, fill=color, markup=markup)
