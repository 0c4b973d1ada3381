"""Command line entry point: logo file in, banner PNG (and optionally the SVG logo) out."""
import argparse
import logging
import sys
from pathlib import Path

from logobanner.config import LOGO_POSITIONS, MODES, PRESETS, TEXT_POSITIONS, BannerSpec
from logobanner.errors import LogoBannerError
from logobanner.imaging.image_io import ImageIO
from logobanner.pipeline.banner_pipeline import BannerPipeline
from logobanner.pipeline.logo_session import LogoSession

log = logging.getLogger(__name__)

# CLI flag -> BannerSpec field
SPEC_FLAGS = {
    "width": "width", "height": "height", "mode": "mode", "bg": "bg", "grad": "grad",
    "text": "text", "text_color": "text_color", "font_size": "font_size", "text_pos": "text_pos",
    "logo_size": "logo_size_pct", "logo_pos": "logo_pos", "threshold": "threshold",
    "logo_color": "logo_color",
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="logobanner", description="Turn a logo into a recolorable banner")
    p.add_argument("logo", help="PNG/JPEG logo (path or http(s) URL)")
    p.add_argument("-o", "--out", type=Path, default=Path("banner.png"), help="Banner PNG (default: banner.png)")
    p.add_argument("--svg", type=Path, help="Also write the vector logo here")
    p.add_argument("--background", help="Uploaded background image; implies --mode upload")
    p.add_argument("--preset", choices=sorted(PRESETS))
    p.add_argument("--width", type=int)
    p.add_argument("--height", type=int)
    p.add_argument("--mode", choices=MODES)
    p.add_argument("--bg")
    p.add_argument("--grad")
    p.add_argument("--text")
    p.add_argument("--text-color")
    p.add_argument("--font-size", type=int)
    p.add_argument("--text-pos", choices=TEXT_POSITIONS)
    p.add_argument("--logo-size", type=float, help="Logo size, percent of the canvas")
    p.add_argument("--logo-pos", choices=LOGO_POSITIONS)
    p.add_argument("--threshold", type=float, help="Luminance cutoff in (0, 1]")
    p.add_argument("--logo-color")
    p.add_argument("--auto-color", action="store_true", help="Fill with the logo's dominant color even when --logo-color is given")
    p.add_argument("--no-preserve-color", dest="preserve_color", action="store_false",
                   help="Fill the logo with black")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def spec_from_args(args: argparse.Namespace, **extra) -> BannerSpec:
    overrides = {field: getattr(args, flag) for flag, field in SPEC_FLAGS.items()
                 if getattr(args, flag) is not None}
    overrides["preserve_color"] = args.preserve_color
    overrides.update(extra)
    if args.background:
        overrides.setdefault("mode", "upload")
    if args.preset:
        return BannerSpec.from_preset(args.preset, **overrides)
    return BannerSpec(**overrides)


def run(args: argparse.Namespace) -> int:
    session = LogoSession()
    session.load_logo(*ImageIO.read_source(args.logo))

    extra = {}
    if args.logo_color is None or args.auto_color:
        extra["logo_color"] = session.dominant_color().hex
        log.info("Dominant logo color: %s", extra["logo_color"])
    spec = spec_from_args(args, **extra)

    background = None
    if args.background:
        background = ImageIO.decode_background(*ImageIO.read_source(args.background))
        if args.width is None and args.height is None:
            spec = spec.sized_to(background)

    session.to_bitmap(spec.threshold)
    vector = session.vectorize(spec.fill_color)
    if args.svg:
        args.svg.write_bytes(vector.to_bytes())
        log.info("SVG logo -> %s", args.svg)

    banner = BannerPipeline().compose(spec, vector, background)
    args.out.write_bytes(banner.to_png())
    log.info("Banner -> %s", args.out)
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    try:
        return run(args)
    except (LogoBannerError, ValueError, OSError) as e:
        log.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
