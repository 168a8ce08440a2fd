"""Luminance to glyph mapping."""

from __future__ import annotations

import math
from typing import List, Sequence

PALETTE = ".,-~:;=!*#$@"


def glyph(luminance: float) -> str:
    if luminance < 0:
        return PALETTE[0]
    if luminance > len(PALETTE) - 1:
        return PALETTE[-1]
    return PALETTE[math.floor(luminance)]


def quantize(grid: Sequence[Sequence[float]]) -> List[List[str]]:
    return [[glyph(value) for value in row] for row in grid]


def compose_frame(rows: Sequence[Sequence[str]], separator: str = " ") -> str:
    """Join glyph rows into printable text, one row per line."""
    return "\n".join(separator.join(row) for row in rows)
