from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from PIL import Image

from logobanner.config import BannerSpec, Config
from logobanner.errors import NoMaskAvailableError
from logobanner.imaging.image_io import ImageIO
from logobanner.imaging.raster_image import RasterImage
from logobanner.layout.layout import Layout, Placement
from logobanner.render.background_renderer import BackgroundRenderer
from logobanner.render.text_renderer import TextRenderer
from logobanner.vector.vector_artifact import VectorArtifact

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompositedBanner:
    image: Image.Image
    spec: BannerSpec
    placement: Optional[Placement]

    def to_png(self) -> bytes:
        return ImageIO.encode_png(self.image)


class BannerPipeline:
    """Composes background, caption and logo onto one canvas, in that order."""

    def __init__(self, cfg: Config = Config()):
        self.cfg = cfg
        self.background = BackgroundRenderer(cfg)
        self.text = TextRenderer(cfg)

    def compose(self, spec: BannerSpec, vector: Optional[VectorArtifact],
                uploaded_background: Optional[RasterImage] = None) -> CompositedBanner:
        if vector is None:
            raise NoMaskAvailableError("Create the vector logo before generating a banner")

        canvas = Image.new("RGBA", (spec.width, spec.height), (0, 0, 0, 0))
        self.background.render(canvas, spec, uploaded_background)
        self.text.render(canvas, spec)

        placement = None
        if spec.logo_size_pct > 0:
            placement = Layout.logo_placement(spec, vector.aspect_ratio, pad=self.cfg.EDGE_PAD)
            _, _, w, h = placement.to_px()
            Layout.paste_at(canvas, vector.rasterize(w, h), placement)

        log.info("Banner %dx%d (%s) composed, logo at %s",
                 spec.width, spec.height, spec.mode, placement)
        return CompositedBanner(image=canvas, spec=spec, placement=placement)
