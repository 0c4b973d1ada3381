"""Tests for logo fit-inside sizing and 9-point anchoring."""

import pytest

from logobanner.config import LOGO_POSITIONS, BannerSpec
from logobanner.layout.layout import Layout, Placement

PAD = 20


def _spec(**kw) -> BannerSpec:
    return BannerSpec(**{"width": 1200, "height": 630, **kw})


@pytest.mark.parametrize("width, height", [(1200, 630), (800, 400), (728, 90), (333, 777)])
@pytest.mark.parametrize("aspect", [0.25, 1.0, 1.9, 4.0])
@pytest.mark.parametrize("pct", [5, 25, 60, 100])
def test_center_is_exactly_centered(width, height, aspect, pct) -> None:
    spec = _spec(width=width, height=height, logo_size_pct=pct, logo_pos="center")
    p = Layout.logo_placement(spec, aspect)
    assert p.x == (width - p.width) / 2
    assert p.y == (height - p.height) / 2


@pytest.mark.parametrize("anchor", LOGO_POSITIONS)
@pytest.mark.parametrize("aspect", [0.1, 0.5, 1.0, 2.0, 10.0])
@pytest.mark.parametrize("pct", [1, 25, 50, 100])
def test_never_exceeds_size_bounds(anchor, aspect, pct) -> None:
    spec = _spec(logo_pos=anchor, logo_size_pct=pct)
    p = Layout.logo_placement(spec, aspect)
    assert p.width <= 1200 * pct / 100 + 1e-9
    assert p.height <= 630 * pct / 100 + 1e-9
    assert p.width / p.height == pytest.approx(aspect)


def test_width_constrained_fit() -> None:
    p = Layout.logo_placement(_spec(logo_size_pct=25), 2.0)
    assert (p.width, p.height) == (300, 150)


def test_height_constrained_fit() -> None:
    p = Layout.logo_placement(_spec(logo_size_pct=25), 1.0)
    assert (p.width, p.height) == (157.5, 157.5)


@pytest.mark.parametrize(
    "anchor, expected",
    [
        ("left-top", (PAD, PAD)),
        ("top-middle", ((1200 - 300) / 2, PAD)),
        ("right-top", (1200 - 300 - PAD, PAD)),
        ("left-middle", (PAD, (630 - 150) / 2)),
        ("center", ((1200 - 300) / 2, (630 - 150) / 2)),
        ("right-middle", (1200 - 300 - PAD, (630 - 150) / 2)),
        ("left-bottom", (PAD, 630 - 150 - PAD)),
        ("bottom-middle", ((1200 - 300) / 2, 630 - 150 - PAD)),
        ("right-bottom", (1200 - 300 - PAD, 630 - 150 - PAD)),
    ],
)
def test_anchor_positions(anchor, expected) -> None:
    p = Layout.logo_placement(_spec(logo_pos=anchor, logo_size_pct=25), 2.0)
    assert (p.x, p.y) == expected


def test_same_inputs_same_placement() -> None:
    spec = _spec(logo_pos="right-bottom", logo_size_pct=33)
    assert Layout.logo_placement(spec, 1.3) == Layout.logo_placement(spec, 1.3)


@pytest.mark.parametrize("aspect", [0, -1.5])
def test_rejects_non_positive_aspect(aspect) -> None:
    with pytest.raises(ValueError, match="aspect"):
        Layout.logo_placement(_spec(), aspect)


def test_to_px_rounds_and_keeps_one_pixel() -> None:
    assert Placement(521.25, 236.25, 157.5, 157.5).to_px() == (521, 236, 158, 158)
    assert Placement(0.4, 0.6, 0.2, 0.1).to_px() == (0, 1, 1, 1)
