from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from logobanner.config import BannerSpec, Config, hex_to_rgb

log = logging.getLogger(__name__)

# Tried in order when Config.FONT_PATH is unset or unreadable
BOLD_FONT_FALLBACKS = (
    "DejaVuSans-Bold.ttf",
    "Arial Bold.ttf",
    "arialbd.ttf",
    "LiberationSans-Bold.ttf",
)


@dataclass
class TextStyle:
    color: str
    font_px: int
    font_path: Optional[Path] = None


class TextRenderer:
    """Draws the banner caption: bold, horizontally centered, single line, anchored top or bottom."""
    def __init__(self, cfg: Config = Config()):
        self.cfg = cfg

    @staticmethod
    def load_font(size: int, font_path: Optional[Path] = None) -> ImageFont.ImageFont:
        candidates = ([str(font_path)] if font_path else []) + list(BOLD_FONT_FALLBACKS)
        for name in candidates:
            try:
                return ImageFont.truetype(name, size)
            except OSError:
                continue
        log.warning("No bold TrueType font found, using Pillow's default font")
        return ImageFont.load_default(size=size)

    def baseline_y(self, spec: BannerSpec) -> int:
        if spec.text_pos == "top":
            return spec.font_size + self.cfg.TEXT_PAD
        return spec.height - self.cfg.TEXT_PAD

    def render(self, canvas: Image.Image, spec: BannerSpec) -> None:
        if not spec.text:
            return
        style = TextStyle(spec.text_color, spec.font_size, self.cfg.FONT_PATH)
        font = self.load_font(style.font_px, style.font_path)
        layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)
        # single line: newlines and runs of whitespace collapse to one space
        line = " ".join(spec.text.split())
        # "ms": x is the horizontal middle, y the baseline
        draw.text((spec.width / 2, self.baseline_y(spec)), line,
                  font=font, fill=(*hex_to_rgb(style.color), 255), anchor="ms")
        canvas.alpha_composite(layer)
