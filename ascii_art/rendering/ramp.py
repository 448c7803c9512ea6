#!/usr/bin/env python3
# ascii_art/rendering/ramp.py
"""
Brightness-ordered glyph ramp and quantization.

GLYPH_RAMP runs from the emptiest glyph (index 0) to the densest (last index).
A brightness b in [0, 255] maps to index b * max_index // 255.
"""

from __future__ import annotations

import numpy as np

from ascii_art.brightness import MAX_PIXEL_BRIGHTNESS

__all__ = [
    "GLYPH_RAMP",
    "MAX_GLYPH_INDEX",
    "glyph_index",
    "glyph_indices",
    "glyph_for",
]

GLYPH_RAMP = "`^\",:;Il!i~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"
MAX_GLYPH_INDEX = len(GLYPH_RAMP) - 1


def _clamp(brightness):
    # Luminosity truncation can land a hair outside the nominal range.
    return np.clip(brightness, 0, MAX_PIXEL_BRIGHTNESS)


def glyph_index(brightness: int, ramp: str = GLYPH_RAMP) -> int:
    """Ramp position proportional to brightness."""
    b = int(_clamp(brightness))
    return b * (len(ramp) - 1) // MAX_PIXEL_BRIGHTNESS


def glyph_indices(brightness: np.ndarray, ramp: str = GLYPH_RAMP) -> np.ndarray:
    """Vectorised glyph_index over a whole brightness grid."""
    b = _clamp(np.asarray(brightness, dtype=np.int64))
    return b * (len(ramp) - 1) // MAX_PIXEL_BRIGHTNESS


def glyph_for(brightness: int, ramp: str = GLYPH_RAMP) -> str:
    return ramp[glyph_index(brightness, ramp)]
