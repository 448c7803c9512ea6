#!/usr/bin/env python3
# ascii_art/rendering/renderer.py
"""
Brightness-to-text renderer.

- Quantizes every brightness cell onto the glyph ramp.
- Repeats each glyph cell_width times. Pixels are square while terminal
  glyphs are about twice as tall as wide, so 2 keeps the art from looking
  squashed.
- One output line per grid row, top row first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np

from ascii_art.rendering.ramp import GLYPH_RAMP, glyph_indices

__all__ = ["TextRenderer", "DEFAULT_CELL_WIDTH"]

DEFAULT_CELL_WIDTH = 2


@dataclass(frozen=True)
class TextRenderer:
    ramp: str = GLYPH_RAMP
    cell_width: int = DEFAULT_CELL_WIDTH

    def __post_init__(self):
        if not self.ramp:
            raise ValueError("Glyph ramp must not be empty")
        if self.cell_width < 1:
            raise ValueError("cell_width must be at least 1")

    def render(self, brightness: np.ndarray) -> List[str]:
        grid = np.asarray(brightness, dtype=np.int64)
        if grid.size == 0:
            return []
        if grid.ndim != 2:
            raise ValueError(f"Expected a 2D brightness grid, got shape {grid.shape}")

        # Each glyph widened to its full cell up front, then one join per row.
        cells = np.array([ch * self.cell_width for ch in self.ramp])
        idx = glyph_indices(grid, self.ramp)
        return ["".join(cells[idx[y, :]].tolist()) for y in range(grid.shape[0])]
