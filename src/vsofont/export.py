from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

from .font import Font, Glyph

logger = logging.getLogger(__name__)


def _select(font: Font, labels: Sequence[str] | None) -> List[Glyph]:
    if labels is None:
        return list(font)
    # repeated labels are exported once, in first-mention order
    return [font.glyphs[label] for label in dict.fromkeys(labels) if label in font]


def glyph_to_dict(glyph: Glyph) -> Dict[str, Any]:
    return {
        "strokes": [[[start.x, start.y], [end.x, end.y]] for start, end in glyph.strokes],
        "path": glyph.path_data,
    }


def font_to_dict(font: Font, labels: Sequence[str] | None = None) -> Dict[str, Any]:
    """JSON-ready view of a font, optionally limited to ``labels``."""
    glyphs = _select(font, labels)
    return {
        "spacing": font.spacing,
        "glyphs": {glyph.label: glyph_to_dict(glyph) for glyph in glyphs},
    }


def glyph_to_svg(glyph: Glyph, stroke_width: float = 0.02, padding: float = 0.0) -> str:
    points = [point for segment in glyph.strokes for point in segment]
    if points:
        xmin = min(p.x for p in points)
        xmax = max(p.x for p in points)
        ymin = min(p.y for p in points)
        ymax = max(p.y for p in points)
    else:
        xmin = xmax = ymin = ymax = 0.0

    # keep the view box non-empty for dots and empty glyphs
    margin = padding + stroke_width / 2
    view_x = xmin - margin
    view_y = ymin - margin
    view_width = (xmax - xmin) + 2 * margin
    view_height = (ymax - ymin) + 2 * margin

    body = ""
    if glyph.strokes:
        body = (
            f'<path d="{glyph.path_data}" fill="none" stroke="#000000" '
            f'stroke-width="{stroke_width}" stroke-linecap="round" stroke-linejoin="round" />'
        )
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'viewBox="{view_x} {view_y} {view_width} {view_height}">'
        f"{body}</svg>"
    )


def glyph_filename(index: int, label: str) -> str:
    # labels are arbitrary tokens, hex keeps them filesystem safe
    return f"{index:04d}_{label.encode('utf-8').hex()}.svg"


def write_glyph_svgs(
    font: Font,
    output_dir: Path,
    labels: Sequence[str] | None = None,
    stroke_width: float = 0.02,
) -> List[Dict[str, Any]]:
    glyphs = _select(font, labels)

    output_dir.mkdir(parents=True, exist_ok=True)
    manifest: List[Dict[str, Any]] = []
    for index, glyph in enumerate(glyphs):
        output_path = output_dir / glyph_filename(index, glyph.label)
        output_path.write_text(glyph_to_svg(glyph, stroke_width=stroke_width), encoding="utf-8")
        logger.debug("wrote glyph %r to %s", glyph.label, output_path)
        manifest.append(
            {
                "label": glyph.label,
                "path": str(output_path),
                "segments": len(glyph.strokes),
            }
        )
    return manifest
