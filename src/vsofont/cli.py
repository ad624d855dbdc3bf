"""CLI entry point: decode a vsofont file and report or export its glyphs."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Sequence

from dotenv import load_dotenv

from .errors import DecodeError
from .export import font_to_dict, write_glyph_svgs
from .loader import load_font

logger = logging.getLogger("vsofont")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Decode a vsofont stroke font.")
    parser.add_argument(
        "font_file",
        type=Path,
        help="Path to the font text file.",
    )
    parser.add_argument(
        "--svg-dir",
        type=Path,
        default=os.environ.get("VSOFONT_SVG_DIR"),
        help="Directory to write one SVG per glyph (default: $VSOFONT_SVG_DIR).",
    )
    parser.add_argument(
        "--glyph",
        action="append",
        dest="glyphs",
        metavar="LABEL",
        help="Only report and export this glyph. May be repeated.",
    )
    parser.add_argument(
        "--include-strokes",
        action="store_true",
        help="Include stroke coordinates and path data in the summary.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    load_dotenv()
    args = parse_args(argv)

    level_name = os.environ.get("VSOFONT_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    if not isinstance(level, int):
        logger.warning("Unknown VSOFONT_LOG_LEVEL %r, using INFO", level_name)
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        font = load_font(args.font_file)
    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1
    except DecodeError as e:
        logger.error("Malformed font file %s: %s", args.font_file, e)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130

    labels: List[str] | None = args.glyphs
    if labels is not None:
        for label in labels:
            if label not in font:
                logger.warning("Glyph %r not defined in %s", label, args.font_file)

    summary: Dict[str, Any] = {
        "font_file": str(args.font_file),
        "spacing": font.spacing,
        "glyph_count": len(font),
        "labels": [glyph.label for glyph in font if labels is None or glyph.label in labels],
    }
    if args.include_strokes:
        summary["glyphs"] = font_to_dict(font, labels)["glyphs"]

    if args.svg_dir is not None:
        svg_dir = Path(args.svg_dir).expanduser().resolve()
        summary["svg_dir"] = str(svg_dir)
        summary["svgs"] = write_glyph_svgs(font, svg_dir, labels)
        logger.info("Wrote %d glyph SVGs to %s", len(summary["svgs"]), svg_dir)

    print(json.dumps(summary, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
