"""Decoder for the vsofont stroke-font text format.

The format is line oriented::

    # some text, perhaps explanations

    JUMP!

    GRID: <GRID X> x <GRID Y>
    SPACING: <EMPTY SPACE BETWEEN THE CHARACTERS>
    SCALING: <SCALING X> x <SCALING Y>
    COLOR: <R> <G> <B> <A>

    <CHARACTER> <LINES, DEFINED USING INDICES TO THE GRID> -1
    ...

Everything before ``JUMP!`` is skipped. Afterwards each line is either a
header directive or a glyph definition whose tokens are pairs of grid
indices, one pair per line segment. Directives only affect the glyphs
that follow them.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Dict, List

from .errors import DecodeError, InvalidGridError, NumberParseError, TokenCountError
from .font import Font, Glyph, Segment, Vector

logger = logging.getLogger(__name__)

JUMP_MARKER = "JUMP!"

_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass
class GridContext:
    grid_width: int = 0
    # Parsed but unused by the index conversion.
    grid_height: int = 0
    scale_x: float = 0.0
    scale_y: float = 0.0

    def to_vector(self, index: int, lineno: int | None = None) -> Vector:
        if self.grid_width <= 0:
            raise InvalidGridError(self.grid_width, lineno)
        row, column = divmod(index, self.grid_width)
        return Vector(x=column * self.scale_x, y=row * self.scale_y)


def _parse_int(token: str, field: str, lineno: int) -> int:
    if not _INT_RE.fullmatch(token):
        raise NumberParseError(token, field, lineno)
    return int(token)


def _parse_float(token: str, field: str, lineno: int) -> float:
    if not token or "_" in token or token != token.strip():
        raise NumberParseError(token, field, lineno)
    try:
        value = float(token)
    except ValueError:
        raise NumberParseError(token, field, lineno) from None
    if not math.isfinite(value):
        raise NumberParseError(token, field, lineno)
    return value


def _expect_tokens(tokens: List[str], expected: int, lineno: int) -> None:
    if len(tokens) != expected:
        raise TokenCountError(tokens[0], expected, len(tokens), lineno)


def _parse_glyph(tokens: List[str], context: GridContext, lineno: int) -> Glyph:
    label = tokens[0]
    strokes: List[Segment] = []
    # A trailing unpaired index (usually the -1 terminator) is dropped.
    for i in range(1, len(tokens) - 1, 2):
        a = _parse_int(tokens[i], "index", lineno)
        b = _parse_int(tokens[i + 1], "index", lineno)
        strokes.append((context.to_vector(a, lineno), context.to_vector(b, lineno)))
    return Glyph(label=label, strokes=tuple(strokes))


def decode(text: str) -> Font:
    """Decode vsofont text into a :class:`Font`.

    Raises a :class:`DecodeError` subclass for the first malformed line;
    no partial font is returned.
    """
    context = GridContext()
    spacing = 0.0
    glyphs: Dict[str, Glyph] = {}

    jump_found = False
    for lineno, line in enumerate(text.split("\n"), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if line == JUMP_MARKER:
            jump_found = True
            continue
        if not jump_found:
            continue

        tokens = line.split(" ")
        keyword = tokens[0]
        if keyword == "GRID:":
            # GRID: 5 x 5
            _expect_tokens(tokens, 4, lineno)
            context.grid_width = _parse_int(tokens[1], "grid width", lineno)
            context.grid_height = _parse_int(tokens[3], "grid height", lineno)
            logger.debug("line %d: grid %dx%d", lineno, context.grid_width, context.grid_height)
        elif keyword == "SPACING:":
            # SPACING: 0.005
            _expect_tokens(tokens, 2, lineno)
            spacing = _parse_float(tokens[1], "spacing", lineno)
            logger.debug("line %d: spacing %g", lineno, spacing)
        elif keyword == "SCALING:":
            # SCALING: 0.2 x 0.2
            _expect_tokens(tokens, 4, lineno)
            context.scale_x = _parse_float(tokens[1], "scaling width", lineno)
            context.scale_y = _parse_float(tokens[3], "scaling height", lineno)
            logger.debug("line %d: scaling %g x %g", lineno, context.scale_x, context.scale_y)
        elif keyword == "COLOR:":
            continue
        else:
            glyph = _parse_glyph(tokens, context, lineno)
            if glyph.label in glyphs:
                logger.debug("line %d: redefining glyph %r", lineno, glyph.label)
            glyphs[glyph.label] = glyph

    return Font(spacing=spacing, glyphs=glyphs)


def decode_or_fail(text: str) -> Font:
    """Decode vsofont text, aborting the program if it is malformed."""
    try:
        return decode(text)
    except DecodeError as err:
        logger.critical("invalid vsofont data: %s", err)
        raise SystemExit(f"invalid vsofont data: {err}") from err
