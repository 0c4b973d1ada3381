from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from logobanner.config import Config
from logobanner.imaging.bitmap_converter import BitmapConverter
from logobanner.imaging.color_extractor import ColorExtractor, DominantColor
from logobanner.imaging.image_io import ImageIO
from logobanner.imaging.raster_image import BitmapMask, RasterImage
from logobanner.vector.vector_artifact import VectorArtifact, VectorSynthesizer

log = logging.getLogger(__name__)


@dataclass
class LogoSession:
    """Artifacts derived from the current logo upload.

    All four fields belong to one logo: loading a new one replaces them
    together through ``reset()``. A failed step leaves the previous
    artifacts as they were.
    """
    cfg: Config = Config()
    original: Optional[RasterImage] = None
    processed: Optional[RasterImage] = None
    bitmap: Optional[BitmapMask] = None
    vector: Optional[VectorArtifact] = None

    def reset(self) -> None:
        self.original = self.processed = self.bitmap = self.vector = None

    def load_logo(self, data: bytes, media_type: str) -> RasterImage:
        image = ImageIO.decode(data, media_type, max_side=self.cfg.MAX_LOGO_SIDE)
        self.reset()
        self.original = self.processed = image
        log.info("Logo loaded: %dx%d", image.width, image.height)
        return image

    def dominant_color(self) -> DominantColor:
        """Dominant color of the processed logo, or the fallback color when extraction fails."""
        try:
            return ColorExtractor.dominant_color(self.processed, self.cfg)
        except Exception as e:
            log.warning("Color extraction failed, using default %s: %s", self.cfg.FALLBACK_COLOR, e)
            return DominantColor.from_hex(self.cfg.FALLBACK_COLOR)

    def to_bitmap(self, threshold: Optional[float] = None) -> BitmapMask:
        if threshold is None:
            threshold = self.cfg.DEFAULT_THRESHOLD
        bitmap = BitmapConverter.to_bitmap_mask(self.processed, threshold, self.cfg)
        self.bitmap, self.vector = bitmap, None
        return bitmap

    def vectorize(self, fill: str) -> VectorArtifact:
        vector = VectorSynthesizer.synthesize(self.bitmap, fill)
        self.vector = vector
        return vector
