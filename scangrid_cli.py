#!/usr/bin/env python3
import argparse
import sys
from pathlib import Path

from scangrid.DataModel import GridConfig
from scangrid.Errors import ScangridError
from scangrid.Generate import generate


def positive_int(s: str) -> int:
    try:
        v = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"bar width must be a number, got {s!r}")
    if v < 1:
        raise argparse.ArgumentTypeError("bar width must be >= 1")
    return v


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Interleave images into a barrier-grid composite (output.png) and its slit mask (mask.png)."
    )
    p.add_argument("bar_width", type=positive_int, help="Bar width in pixels; must divide the images' width")
    p.add_argument("images", nargs="+", help="Source images, in animation order")
    p.add_argument("--out", default="out", help="Output folder (default: out)")
    p.add_argument("--check-coverage", action="store_true", help="Fail if any composite column is left unfilled")
    p.add_argument("--quiet", action="store_true")
    return p


def main(argv=None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    if len(args.images) < 2:
        p.error("Need at least two images")

    out_dir = Path(args.out)
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"Error: cannot create output folder {out_dir}: {e}", file=sys.stderr)
        return 1

    cfg = GridConfig(check_coverage=args.check_coverage)

    try:
        result = generate(
            args.images,
            str(out_dir),
            args.bar_width,
            config=cfg,
        )
    except ScangridError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        layout = result.layout
        print(f"Image: w:{layout.width}, h:{layout.height}")
        print(f"Number of images: {layout.img_count}")
        print(f"Number of bars: {layout.bar_count}")
        print("Saved:", result.output_path)
        print("Saved:", result.mask_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
