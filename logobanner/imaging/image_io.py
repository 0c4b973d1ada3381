from __future__ import annotations
import io
import logging
import mimetypes
from typing import Optional, Tuple

import numpy as np
import requests
from PIL import Image, ImageOps, UnidentifiedImageError

from logobanner.config import Config
from logobanner.errors import DecodeFailureError, UnsupportedFormatError
from logobanner.imaging.image_fitter import ImageFitter
from logobanner.imaging.raster_image import RasterImage

log = logging.getLogger(__name__)

# 16-bit grayscale PNGs open in these modes; convert("RGBA") would clip them at 255
_WIDE_GRAY_MODES = ("I;16", "I;16B", "I;16L", "I;16N", "I")


class ImageIO:
    """Decoding uploaded bytes into RasterImages and encoding results back to PNG."""

    @staticmethod
    def is_supported(media_type: str, accepted=Config.ACCEPTED_MEDIA_TYPES) -> bool:
        return bool(media_type) and media_type.strip().lower() in accepted

    @staticmethod
    def _to_rgba(img: Image.Image) -> Image.Image:
        if img.mode in _WIDE_GRAY_MODES:
            wide = np.clip(np.array(img).astype(np.int64), 0, 65535)
            img = Image.fromarray((wide >> 8).astype(np.uint8))
        return img.convert("RGBA")

    @staticmethod
    def decode(data: bytes, media_type: str,
               max_side: Optional[int] = Config.MAX_LOGO_SIDE) -> RasterImage:
        """Decode PNG/JPEG bytes, downscaling so the longer side is at most ``max_side``.

        The media type is checked before any byte is read; anything other than
        ``image/png``, ``image/jpeg`` or ``image/jpg`` raises UnsupportedFormatError.
        Bytes that fail to decode raise DecodeFailureError.
        """
        if not ImageIO.is_supported(media_type):
            raise UnsupportedFormatError(f"Please upload PNG/JPG format only (got {media_type!r})")

        try:
            with Image.open(io.BytesIO(data)) as on_disk:
                on_disk.load()
                rgba = ImageIO._to_rgba(ImageOps.exif_transpose(on_disk))
        except (UnidentifiedImageError, OSError, Image.DecompressionBombError) as exc:
            raise DecodeFailureError(f"Could not decode {media_type} image: {exc}") from exc

        pixels = np.array(rgba, dtype=np.uint8)
        if max_side is None:
            return RasterImage(pixels)
        clamped = ImageFitter.clamp_to_max(pixels, max_side)
        if clamped is not pixels:
            log.info("Logo downscaled %dx%d -> %dx%d",
                     rgba.width, rgba.height, clamped.shape[1], clamped.shape[0])
        return RasterImage(clamped)

    @staticmethod
    def decode_background(data: bytes, media_type: str) -> RasterImage:
        """Uploaded banner backgrounds are kept at their own size."""
        return ImageIO.decode(data, media_type, max_side=None)

    @staticmethod
    def encode_png(image) -> bytes:
        buf = io.BytesIO()
        image.save(buf, format="PNG")
        return buf.getvalue()

    @staticmethod
    def read_source(path_or_url: str) -> Tuple[bytes, str]:
        """Raw bytes plus declared media type for a local path or http(s) URL."""
        if path_or_url.startswith(("http://", "https://")):
            r = requests.get(path_or_url, timeout=60)
            r.raise_for_status()
            media_type = r.headers.get("Content-Type", "").split(";")[0].strip()
            if not media_type:
                media_type = mimetypes.guess_type(path_or_url)[0] or ""
            return r.content, media_type
        with open(path_or_url, "rb") as f:
            data = f.read()
        return data, mimetypes.guess_type(path_or_url)[0] or ""
