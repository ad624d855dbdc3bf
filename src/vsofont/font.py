from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Tuple

from svgpathtools import Line, Path


@dataclass(frozen=True)
class Vector:
    x: float
    y: float

    def as_complex(self) -> complex:
        return complex(self.x, self.y)


Segment = Tuple[Vector, Vector]


@dataclass(frozen=True)
class Glyph:
    label: str
    strokes: Tuple[Segment, ...] = ()

    @property
    def path_data(self) -> str:
        """SVG path data for the strokes; touching segments share a subpath."""
        if not self.strokes:
            return ""
        path = Path(*(Line(start.as_complex(), end.as_complex()) for start, end in self.strokes))
        return path.d()


@dataclass(frozen=True)
class Font:
    spacing: float = 0.0
    glyphs: Mapping[str, Glyph] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.glyphs, MappingProxyType):
            object.__setattr__(self, "glyphs", MappingProxyType(dict(self.glyphs)))

    def get(self, label: str) -> Glyph | None:
        return self.glyphs.get(label)

    def __contains__(self, label: object) -> bool:
        return label in self.glyphs

    def __len__(self) -> int:
        return len(self.glyphs)

    def __iter__(self) -> Iterator[Glyph]:
        return iter(self.glyphs.values())
