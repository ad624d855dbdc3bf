from __future__ import annotations

from pathlib import Path

import pytest

DEMO_FONT = """\
# demo
JUMP!
GRID: 2 x 2
SPACING: 0.01
SCALING: 1.0 x 1.0
A 0 1 1 3
"""

SAMPLE_FONT = """\
# vsofont sample, 5x5 grid
Some explanation text that is skipped.

JUMP!

GRID: 5 x 5
SPACING: 0.005
SCALING: 0.2 x 0.2
COLOR: 255 255 255 255

# letters end with the -1 terminator
L 0 20 20 24 -1
T 0 4 2 22 -1
. 22 22 -1
"""


@pytest.fixture
def demo_text() -> str:
    return DEMO_FONT


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_FONT


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.vso"
    path.write_text(SAMPLE_FONT, encoding="utf-8")
    return path
