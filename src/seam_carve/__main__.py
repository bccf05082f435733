#!/usr/bin/env python3
"""CLI for seam carving."""

import argparse
import logging
import os
import sys
from pathlib import Path

from seam_carve import CarvingError, SeamCarver, load_image, save_image

LOG_LEVEL_ENV = "SEAM_CARVE_LOG_LEVEL"


def _configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stdout,
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="seam-carve",
        description="Content-aware image downsizing by seam carving",
    )
    parser.add_argument("input", type=str, help="Input image path")
    parser.add_argument("output", type=str, help="Output image path")
    parser.add_argument("width", type=int, help="Output width in pixels")
    parser.add_argument("height", type=int, help="Output height in pixels")

    args = parser.parse_args(argv)
    _configure_logging()

    output_path = Path(args.output)
    energy_path = output_path.with_name(f"{output_path.stem}_energy.png")
    seams_path = output_path.with_name(f"{output_path.stem}_seams.png")

    carver = SeamCarver(show_progress=True)

    try:
        img = load_image(args.input)
        h, w = img.shape[:2]
        carver.check_dimensions(w, h, args.width, args.height)

        energy_map = carver.visualize_energy(img)
        result = carver.carve(img, args.width, args.height)
        seam_map = result.seam_map()
    except (CarvingError, OSError) as ex:
        print(f"Error: {ex}", file=sys.stderr)
        sys.exit(1)

    outputs = [
        ("Energy map", energy_map, energy_path),
        ("Carved image", result.image, output_path),
        ("Seam map", seam_map, seams_path),
    ]
    written = []
    try:
        for label, grid, path in outputs:
            if not path.exists():
                written.append(path)
            save_image(grid, path)
            print(f"{label} saved to: {path}")
    except OSError as ex:
        # A failed run leaves no new files behind
        for path in written:
            path.unlink(missing_ok=True)
        print(f"Error: {ex}", file=sys.stderr)
        sys.exit(1)

    print(f"Carved: {args.input}")
    print(f"  Original: {w}x{h}")
    print(f"  Carved: {result.carved_size[0]}x{result.carved_size[1]}")
    print(f"  Seams removed: {len(result.seams)}")


if __name__ == "__main__":
    main()
