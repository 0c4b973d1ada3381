"""Tests for template and uploaded banner backgrounds."""

import numpy as np
import pytest
from PIL import Image

from logobanner.config import BannerSpec
from logobanner.render.background_renderer import BackgroundRenderer


def _render(spec: BannerSpec, uploaded=None) -> np.ndarray:
    canvas = Image.new("RGBA", (spec.width, spec.height), (0, 0, 0, 0))
    BackgroundRenderer().render(canvas, spec, uploaded)
    return np.array(canvas).astype(int)


def test_solid_fills_everything() -> None:
    out = _render(BannerSpec(width=64, height=32, mode="solid", bg="#336699"))
    assert np.all(out == (0x33, 0x66, 0x99, 255))


def test_gradient_runs_top_left_to_bottom_right() -> None:
    out = _render(BannerSpec(width=200, height=100, mode="gradient", bg="#000000", grad="#ffffff"))
    assert np.all(out[..., 3] == 255)
    assert np.all(out[0, 0, :3] <= 2)
    assert np.all(out[-1, -1, :3] >= 253)
    assert np.all(np.abs(out[50, 100, :3] - 128) <= 2)
    diagonal = [out[int(i * 0.5), i, 0] for i in range(0, 200, 10)]
    assert diagonal == sorted(diagonal)


def test_gradient_colors_follow_spec() -> None:
    out = _render(BannerSpec(width=40, height=40, mode="gradient", bg="#ff0000", grad="#0000ff"))
    assert out[0, 0, 0] > 240 and out[0, 0, 2] < 15
    assert out[-1, -1, 2] > 240 and out[-1, -1, 0] < 15


@pytest.mark.parametrize(
    "xy, patterned",
    [
        ((5, 5), True),       # cell at (0, 0)
        ((19, 19), True),     # last pixel of that cell
        ((20, 5), False),     # gap right of the cell
        ((45, 5), False),     # (40 + 0) / 40 is odd
        ((5, 45), False),
        ((45, 45), True),     # (40 + 40) / 40 is even
        ((85, 5), True),      # (80 + 0) / 40 is even
    ],
)
def test_checker_pattern(xy, patterned) -> None:
    out = _render(BannerSpec(width=120, height=80, mode="checker", bg="#ffffff", grad="#000000"))
    x, y = xy
    expected = 204 if patterned else 255  # 20% black over white
    assert np.all(np.abs(out[y, x, :3] - expected) <= 1)
    assert out[y, x, 3] == 255


def test_upload_stretches_to_canvas(raster) -> None:
    bg = raster(10, 10, (10, 200, 30, 255))
    out = _render(BannerSpec(width=100, height=40, mode="upload"), bg)
    assert out.shape == (40, 100, 4)
    assert np.all(out == (10, 200, 30, 255))


def test_upload_ignores_aspect_ratio(solid_pixels, raster) -> None:
    arr = solid_pixels(10, 10, (255, 255, 255, 255))
    arr[:, 5:] = (0, 0, 0, 255)
    out = _render(BannerSpec(width=200, height=20, mode="upload"), raster(arr))
    # left half stays white, right half black across the full stretched width
    assert np.all(out[:, :60, 0] == 255)
    assert np.all(out[:, 140:, 0] == 0)


def test_upload_without_image_falls_back_to_solid() -> None:
    out = _render(BannerSpec(width=16, height=16, mode="upload", bg="#abcdef"))
    assert np.all(out == (0xab, 0xcd, 0xef, 255))
