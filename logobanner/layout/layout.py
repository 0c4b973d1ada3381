from dataclasses import dataclass
from typing import Dict, Tuple
from PIL import Image

from logobanner.config import BannerSpec, Config

# anchor -> (horizontal, vertical)
ANCHORS: Dict[str, Tuple[str, str]] = {
    "left-top": ("left", "top"),
    "top-middle": ("center", "top"),
    "right-top": ("right", "top"),
    "left-middle": ("left", "middle"),
    "center": ("center", "middle"),
    "right-middle": ("right", "middle"),
    "left-bottom": ("left", "bottom"),
    "bottom-middle": ("center", "bottom"),
    "right-bottom": ("right", "bottom"),
}

@dataclass(frozen=True)
class Placement:
    x: float
    y: float
    width: float
    height: float
    def to_px(self) -> Tuple[int, int, int, int]:
        return (round(self.x), round(self.y),
                max(1, round(self.width)), max(1, round(self.height)))

class Layout:
    """Logo fit/anchor geometry and paste helpers."""
    @staticmethod
    def fit_inside(max_w: float, max_h: float, aspect_ratio: float) -> Tuple[float, float]:
        if max_w / aspect_ratio <= max_h:
            return max_w, max_w / aspect_ratio
        return max_h * aspect_ratio, max_h

    @staticmethod
    def _axis(where: str, canvas: float, size: float, pad: float) -> float:
        if where in ("left", "top"):
            return pad
        if where in ("right", "bottom"):
            return canvas - size - pad
        return (canvas - size) / 2

    @staticmethod
    def logo_placement(spec: BannerSpec, aspect_ratio: float, pad: float = Config.EDGE_PAD) -> Placement:
        if aspect_ratio <= 0:
            raise ValueError(f"aspect ratio must be positive, got {aspect_ratio}")
        scale = spec.logo_size_pct / 100
        w, h = Layout.fit_inside(spec.width * scale, spec.height * scale, aspect_ratio)
        horiz, vert = ANCHORS[spec.logo_pos]
        return Placement(
            x=Layout._axis(horiz, spec.width, w, pad),
            y=Layout._axis(vert, spec.height, h, pad),
            width=w,
            height=h,
        )

    @staticmethod
    def paste_at(base_rgba: Image.Image, overlay_rgba: Image.Image, placement: Placement):
        x, y, _, _ = placement.to_px()
        # alpha_composite rejects negative offsets, so go through a full-size layer
        layer = Image.new("RGBA", base_rgba.size, (0, 0, 0, 0))
        layer.paste(overlay_rgba, (x, y))
        base_rgba.alpha_composite(layer)
