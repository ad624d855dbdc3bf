from __future__ import annotations

from svgpathtools import Line, parse_path

from vsofont.decoder import decode
from vsofont.font import Font, Glyph, Vector


def test_connected_strokes_share_a_subpath(demo_text):
    glyph = decode(demo_text).glyphs["A"]

    assert glyph.path_data == "M 0.0,0.0 L 1.0,0.0 L 1.0,1.0"
    assert parse_path(glyph.path_data) == parse_path("M 0,0 L 1,0 L 1,1")


def test_disjoint_strokes_start_new_subpaths():
    glyph = Glyph(
        label="=",
        strokes=(
            (Vector(0.0, 0.0), Vector(1.0, 0.0)),
            (Vector(0.0, 1.0), Vector(1.0, 1.0)),
        ),
    )

    path = parse_path(glyph.path_data)
    assert glyph.path_data.count("M") == 2
    assert list(path) == [Line(0j, 1 + 0j), Line(1j, 1 + 1j)]


def test_empty_glyph_has_no_path_data():
    assert Glyph(label=" ").path_data == ""


def test_font_accessors(sample_text):
    font = decode(sample_text)

    assert len(font) == 3
    assert "T" in font
    assert "X" not in font
    assert font.get("X") is None
    assert font.get("L") is font.glyphs["L"]
    assert [glyph.label for glyph in font] == ["L", "T", "."]


def test_font_copies_given_mapping():
    glyphs = {"A": Glyph(label="A")}
    font = Font(spacing=0.1, glyphs=glyphs)
    glyphs["B"] = Glyph(label="B")

    assert "B" not in font
    assert font == Font(spacing=0.1, glyphs={"A": Glyph(label="A")})
