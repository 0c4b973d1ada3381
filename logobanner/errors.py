class LogoBannerError(Exception):
    """Base class for pipeline failures surfaced to the caller."""


class UnsupportedFormatError(LogoBannerError, ValueError):
    """Declared media type is not PNG/JPEG; the bytes were never looked at."""


class DecodeFailureError(LogoBannerError, ValueError):
    """Declared type was fine but the bytes did not decode."""


class NoSourceImageError(LogoBannerError, RuntimeError):
    """Bitmap requested before a logo was loaded."""


class NoMaskAvailableError(LogoBannerError, RuntimeError):
    """Vector requested before the bitmap step ran."""
