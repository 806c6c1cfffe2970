"""Command-line entry point for AreaScale.

This tool loads an image, resamples it by area averaging to a requested
size, and saves the result.

All processing occurs on RasterImage values; Pillow is used only for
loading and saving.

Usage example:
    python -m pixscale.main -i input.png -o output.png --width 320
    python -m pixscale.main -i input.png -o output.png --fit 800x600 --rounding nearest
"""
from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path
from typing import Optional

from .errors import ResampleError
from .raster import RasterImage
from .resample import resample
from .utils.loader import load_image, save_image
from .utils.resize import resample_scale, resample_to_fit

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_box(value: str) -> tuple[int, int]:
    """Parse a ``WxH`` bounding box for ``--fit``."""
    try:
        w, h = value.lower().split("x")
        return int(w), int(h)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}") from None


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="areascale",
        description=(
            "Resize images with an area-averaging box filter. "
            "Downscaling averages every source pixel; upscaling replicates pixels."
        ),
    )

    parser.add_argument("-i", "--input", required=True, help="Path to input image file")
    parser.add_argument("-o", "--output", required=True, help="Path to output image file")

    parser.add_argument("--width", type=int, default=None, help="Target width in pixels")
    parser.add_argument("--height", type=int, default=None, help="Target height in pixels")
    parser.add_argument(
        "--scale",
        type=float,
        default=None,
        help="Scale factor (>0) applied to both dimensions.",
    )
    parser.add_argument(
        "--fit",
        type=_parse_box,
        default=None,
        metavar="WxH",
        help="Shrink proportionally to fit inside WxH; never upscales.",
    )
    parser.add_argument(
        "--method",
        type=str,
        default="table",
        choices=["table", "loop"],
        help="Kernel: table (summed-area table) | loop (compiled loop).",
    )
    parser.add_argument(
        "--rounding",
        type=str,
        default="floor",
        choices=["floor", "nearest"],
        help="How channel means are converted to bytes. Default: floor.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on empty sample regions instead of replicating the nearest pixel.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs.

    Parameters
    ----------
    ns : argparse.Namespace
        Parsed CLI arguments.
    """
    modes = sum(
        [
            ns.width is not None or ns.height is not None,
            ns.scale is not None,
            ns.fit is not None,
        ]
    )
    if modes == 0:
        raise ValueError("one of --width/--height, --scale or --fit is required")
    if modes > 1:
        raise ValueError("--width/--height, --scale and --fit are mutually exclusive")
    if ns.width is not None and ns.width < 1:
        raise ValueError("--width must be an integer >= 1")
    if ns.height is not None and ns.height < 1:
        raise ValueError("--height must be an integer >= 1")
    if ns.scale is not None and not (math.isfinite(ns.scale) and ns.scale > 0):
        raise ValueError("--scale must be a finite number > 0")
    if ns.fit is not None and min(ns.fit) < 1:
        raise ValueError("--fit dimensions must be >= 1")
    if not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")


def target_size(width: Optional[int], height: Optional[int], src_w: int, src_h: int) -> tuple[int, int]:
    """Fill in a missing width or height from the source aspect ratio."""
    if width is not None and height is not None:
        return width, height
    if width is not None:
        return width, max(1, int(round(src_h * width / src_w)))
    return max(1, int(round(src_w * height / src_h))), height


def run(args: argparse.Namespace, img: RasterImage) -> RasterImage:
    """Apply the resampling mode selected on the command line."""
    opts = dict(method=args.method, rounding=args.rounding, strict=args.strict)
    if args.scale is not None:
        return resample_scale(img, args.scale, **opts)
    if args.fit is not None:
        return resample_to_fit(img, args.fit[0], args.fit[1], **opts)
    w, h = target_size(args.width, args.height, img.width, img.height)
    return resample(img, w, h, **opts)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing.

    Returns
    -------
    int
        Exit status code (0 for success, non-zero for failure).
    """
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)
    try:
        validate_args(args)
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2

    # 1) Load (Pillow -> RGBA raster)
    img = load_image(args.input)

    # 2) Resample
    try:
        out = run(args, img)
    except ResampleError as e:
        logger.error("Resampling %s failed: %s", args.input, e)
        return 1
    logger.info("Resampled %dx%d -> %dx%d", img.width, img.height, out.width, out.height)

    # 3) Save (RGBA raster -> Pillow)
    save_image(out, args.output)
    print(f"Wrote image: {args.output}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
