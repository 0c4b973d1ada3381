import math

import cv2
import numpy as np


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


class ImageFitter:
    """Aspect-preserving 'clamp' downscale and exact-size stretch."""
    @staticmethod
    def clamp_size(sw: int, sh: int, max_side: int):
        m = max(sw, sh)
        if m <= max_side:
            return sw, sh
        s = max_side / m
        return max(1, _round_half_up(sw * s)), max(1, _round_half_up(sh * s))

    @staticmethod
    def clamp_to_max(src_rgba: np.ndarray, max_side: int) -> np.ndarray:
        sh, sw = src_rgba.shape[:2]
        tw, th = ImageFitter.clamp_size(sw, sh, max_side)
        if (tw, th) == (sw, sh):
            return src_rgba
        return cv2.resize(src_rgba, (tw, th), interpolation=cv2.INTER_AREA)

    @staticmethod
    def stretch(src_rgba: np.ndarray, tw: int, th: int) -> np.ndarray:
        sh, sw = src_rgba.shape[:2]
        if (tw, th) == (sw, sh):
            return src_rgba
        interp = cv2.INTER_AREA if tw * th < sw * sh else cv2.INTER_CUBIC
        # RasterImage buffers are read-only; cv2 wants a writable one
        return cv2.resize(np.array(src_rgba), (tw, th), interpolation=interp)
