from __future__ import annotations

import logging
from pathlib import Path

from .decoder import decode, decode_or_fail
from .font import Font

logger = logging.getLogger(__name__)


def load_font(path: str | Path, strict: bool = False) -> Font:
    """Read and decode a font file.

    With ``strict`` a malformed file aborts the program instead of raising
    :class:`~vsofont.errors.DecodeError`.
    """
    font_path = Path(path)
    if not font_path.exists():
        raise FileNotFoundError(f"font file not found at {font_path}")

    text = font_path.read_text(encoding="utf-8", errors="replace")
    font = decode_or_fail(text) if strict else decode(text)
    logger.debug("loaded %d glyphs from %s", len(font), font_path)
    return font
