from __future__ import annotations
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Optional, Tuple

@dataclass(frozen=True)
class Config:
    # Logo intake
    MAX_LOGO_SIDE: int = 800
    ACCEPTED_MEDIA_TYPES: Tuple[str, ...] = ("image/png", "image/jpeg", "image/jpg")

    # Dominant color
    SAMPLE_STRIDE: int = 4          # every Nth pixel
    OPACITY_FLOOR: int = 128        # alpha below -> ignored
    QUANT_STEP: int = 10
    NEAR_WHITE: int = 240           # all channels above -> background
    FALLBACK_COLOR: str = "#1d4ed8"

    # Bitmap
    TRANSPARENCY_FLOOR: int = 64    # alpha below -> white
    DEFAULT_THRESHOLD: float = 0.7

    # Banner geometry
    EDGE_PAD: int = 20
    TEXT_PAD: int = 16
    CHECKER_CELL: int = 20
    CHECKER_PITCH: int = 40
    CHECKER_ALPHA: float = 0.2

    # Fonts (None -> system bold fallbacks)
    FONT_PATH: Optional[Path] = None


MODES = ("solid", "gradient", "checker", "upload")
TEXT_POSITIONS = ("top", "bottom")
LOGO_POSITIONS = (
    "left-top", "top-middle", "right-top",
    "left-middle", "center", "right-middle",
    "left-bottom", "bottom-middle", "right-bottom",
)

_HEX_RE = re.compile(r"^[0-9A-Fa-f]{6}$")


def normalize_hex(value: str) -> Optional[str]:
    """'#RRGGBB' (lower-case) for a 6-digit hex string with or without '#', else None."""
    h = value.strip().replace("#", "")
    return "#" + h.lower() if _HEX_RE.match(h) else None


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    h = value.lstrip("#")
    return tuple(int(h[i:i + 2], 16) for i in (0, 2, 4))


@dataclass(frozen=True)
class BannerSpec:
    """Everything the compositor needs to know about one banner."""
    width: int = 1200
    height: int = 630
    mode: str = "gradient"          # "solid" | "gradient" | "checker" | "upload"
    bg: str = "#ffffff"
    grad: str = "#2563eb"

    text: str = ""
    text_color: str = "#ffffff"
    font_size: int = 36
    text_pos: str = "bottom"        # "top" | "bottom"

    logo_size_pct: float = 25
    logo_pos: str = "center"
    threshold: float = 0.7
    preserve_color: bool = True
    logo_color: str = "#ffffff"

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"canvas size must be positive, got {self.width}x{self.height}")
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {self.mode!r}")
        if self.text_pos not in TEXT_POSITIONS:
            raise ValueError(f"text_pos must be one of {TEXT_POSITIONS}, got {self.text_pos!r}")
        if self.logo_pos not in LOGO_POSITIONS:
            raise ValueError(f"logo_pos must be one of {LOGO_POSITIONS}, got {self.logo_pos!r}")
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")
        if not 0 <= self.logo_size_pct <= 100:
            raise ValueError(f"logo_size_pct must be within 0..100, got {self.logo_size_pct}")
        if not 0 < self.threshold <= 1:
            raise ValueError(f"threshold must be within (0, 1], got {self.threshold}")
        for name in ("bg", "grad", "text_color", "logo_color"):
            raw = getattr(self, name)
            color = normalize_hex(raw)
            if color is None:
                raise ValueError(f"{name} is not a 6-digit hex color: {raw!r}")
            object.__setattr__(self, name, color)

    @property
    def fill_color(self) -> str:
        return self.logo_color if self.preserve_color else "#000000"

    @classmethod
    def from_preset(cls, name: str, **overrides) -> "BannerSpec":
        if name not in PRESETS:
            raise ValueError(f"unknown preset {name!r}; choose from {sorted(PRESETS)}")
        return cls(**{**PRESETS[name], **overrides})

    def sized_to(self, image) -> "BannerSpec":
        """Copy with the canvas matching an uploaded background."""
        return replace(self, width=image.width, height=image.height)


PRESETS: Dict[str, dict] = {
    "social": dict(width=1200, height=630, mode="gradient",
                   bg="#667eea", grad="#764ba2", logo_pos="left-middle", text_color="#ffffff"),
    "business": dict(width=800, height=400, mode="solid",
                     bg="#ffffff", logo_pos="center", text_color="#000000"),
    "web": dict(width=728, height=90, mode="gradient",
                bg="#ff7e5f", grad="#feb47b", logo_pos="left-middle", text_color="#ffffff"),
}
