from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..pipeline import ImageScruncher, ScrunchSettings, output_path_for
from ..session import MAX_MAX_DIFFERENT_PIXELS, MIN_MAX_DIFFERENT_PIXELS, UI_DEFAULT_MAX_DIFFERENT_PIXELS

EXIT_OK = 0
EXIT_EMPTY = 1
EXIT_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="scrunch",
        description="Scrunch: remove rows of mostly uniform color from screenshots and text images.",
    )
    parser.add_argument("path", help="Image to process (.png/.jpg/.jpeg/.gif/.webp)")
    parser.add_argument("-o", "--output", metavar="PATH", help="Output file (default: processed-<name>.png)")
    parser.add_argument(
        "-n",
        "--max-different-pixels",
        type=int,
        choices=range(MIN_MAX_DIFFERENT_PIXELS, MAX_MAX_DIFFERENT_PIXELS + 1),
        default=UI_DEFAULT_MAX_DIFFERENT_PIXELS,
        metavar=f"{MIN_MAX_DIFFERENT_PIXELS}-{MAX_MAX_DIFFERENT_PIXELS}",
        help="Rows with at most this many distinct colors are removed (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def scrunch_file(path: str, output: Optional[str], max_different_pixels: int) -> int:
    settings = ScrunchSettings(max_different_pixels=max_different_pixels)
    scruncher = ImageScruncher(settings=settings)
    result = scruncher.scrunch_file(path)
    if result.image is None:
        print(f"No content rows left in {path}; nothing written.", file=sys.stderr)
        return EXIT_EMPTY
    out_path = output or output_path_for(path, scruncher.codec.output_extension)
    with open(out_path, "wb") as handle:
        handle.write(result.image)
    print(
        f"{path} -> {out_path}: {result.original_height} -> {result.pixels.height} rows "
        f"({result.removed_rows} removed)"
    )
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    try:
        return scrunch_file(args.path, args.output, args.max_different_pixels)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
