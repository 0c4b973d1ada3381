from __future__ import annotations
from dataclasses import dataclass

import numpy as np
from PIL import Image

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)


@dataclass(frozen=True, eq=False)
class RasterImage:
    """Decoded RGBA pixel grid. The backing array is made read-only on creation."""
    pixels: np.ndarray  # (H, W, 4) uint8

    def __post_init__(self):
        px = self.pixels
        if px.ndim != 3 or px.shape[2] != 4 or px.dtype != np.uint8:
            raise ValueError(f"expected an (H, W, 4) uint8 array, got {px.shape} {px.dtype}")
        if px.flags.writeable:
            px = px.copy()
            px.flags.writeable = False
            object.__setattr__(self, "pixels", px)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @classmethod
    def from_pil(cls, img: Image.Image):
        return cls(np.array(img.convert("RGBA"), dtype=np.uint8))

    def to_pil(self) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(self.pixels))


@dataclass(frozen=True, eq=False)
class BitmapMask(RasterImage):
    """RasterImage holding only opaque pure black (ink) and pure white pixels."""

    def __post_init__(self):
        super().__post_init__()
        px = self.pixels
        black = np.all(px == BLACK, axis=-1)
        white = np.all(px == WHITE, axis=-1)
        if not np.all(black | white):
            raise ValueError("bitmap mask must contain only opaque black and white pixels")

    @property
    def ink(self) -> np.ndarray:
        """Boolean (H, W) array, True where the mask is black."""
        return self.pixels[..., 0] == 0
