"""Shared fixtures: synthetic images built in memory, no binary test files."""

import io

import numpy as np
import pytest
from PIL import Image

from logobanner.imaging.raster_image import RasterImage


def _solid(width, height, rgba):
    arr = np.empty((height, width, 4), dtype=np.uint8)
    arr[...] = rgba
    return arr


@pytest.fixture
def solid_pixels():
    """Factory: (width, height, rgba) -> (H, W, 4) uint8 array of one color."""
    return _solid


@pytest.fixture
def raster():
    """Factory: RasterImage from an array, or from (width, height, rgba)."""
    def make(arr_or_width, height=None, rgba=(0, 0, 0, 255)):
        if height is None:
            return RasterImage(np.asarray(arr_or_width, dtype=np.uint8))
        return RasterImage(_solid(arr_or_width, height, rgba))
    return make


@pytest.fixture
def encode():
    """Factory: (H, W, 4) array -> encoded bytes (PNG by default, or JPEG)."""
    def make(arr, fmt="PNG"):
        img = Image.fromarray(np.asarray(arr, dtype=np.uint8))
        if fmt == "JPEG":
            img = img.convert("RGB")
        buf = io.BytesIO()
        img.save(buf, format=fmt)
        return buf.getvalue()
    return make


@pytest.fixture
def ring_pixels():
    """60x60 white image with a black ring (outer radius 25, inner 12) centered at (30, 30)."""
    ys, xs = np.mgrid[0:60, 0:60]
    dist = np.hypot(xs - 29.5, ys - 29.5)
    ring = (dist <= 25) & (dist >= 12)
    arr = np.full((60, 60, 4), 255, dtype=np.uint8)
    arr[ring, :3] = 0
    return arr
