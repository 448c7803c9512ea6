#!/usr/bin/env python3
# ascii_art/brightness.py
"""
Pixel brightness formulas and the pixel-to-brightness mapper.

- BrightnessType: closed set of formulas, each able to compute over an RGB array.
- invert_brightness: optional polarity flip (255 - value).
- BrightnessMapper: applies formula + inversion to a whole pixel grid.

Every cell is a pure function of its own pixel, so grids are mapped in one
vectorised numpy pass. Integer semantics follow the classic formulas:
floor division for Average/MinMax, truncation for Luminosity.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence, Tuple, Union

import numpy as np

__all__ = [
    "BrightnessType",
    "BrightnessMapper",
    "MAX_PIXEL_BRIGHTNESS",
    "DEFAULT_BRIGHTNESS_TYPE",
    "DEFAULT_INVERT_BRIGHTNESS",
    "as_pixel_array",
    "compute_brightness",
    "pixel_brightness",
    "invert_brightness",
    "build_brightness_matrix",
]

# Max value of a single R, G or B channel.
MAX_PIXEL_BRIGHTNESS = 255

# Luminosity channel weights.
RED_WEIGHT = 0.21
GREEN_WEIGHT = 0.72
BLUE_WEIGHT = 0.07

Pixel = Tuple[int, int, int]
PixelGrid = Union[np.ndarray, Sequence[Sequence[Pixel]]]


# -------------------------
# Formulas
# -------------------------

def _average(rgb: np.ndarray) -> np.ndarray:
    return rgb.sum(axis=-1) // 3


def _min_max(rgb: np.ndarray) -> np.ndarray:
    return (rgb.min(axis=-1) + rgb.max(axis=-1)) // 2


def _luminosity(rgb: np.ndarray) -> np.ndarray:
    # Same evaluation order as R*wr + G*wg + B*wb in double precision.
    f = rgb.astype(np.float64)
    lum = f[..., 0] * RED_WEIGHT + f[..., 1] * GREEN_WEIGHT + f[..., 2] * BLUE_WEIGHT
    return np.trunc(lum).astype(np.int64)


class BrightnessType(Enum):
    """The different ways to compute a pixel's brightness level."""

    Average = "Average"
    MinMax = "MinMax"
    Luminosity = "Luminosity"

    @property
    def formula(self) -> str:
        return _DESCRIPTIONS[self]

    def compute(self, rgb: np.ndarray) -> np.ndarray:
        """Brightness of every pixel in an (..., 3) int array."""
        return compute_brightness(rgb, self)

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        return tuple(m.name for m in cls)


_FORMULAS = {
    BrightnessType.Average: _average,
    BrightnessType.MinMax: _min_max,
    BrightnessType.Luminosity: _luminosity,
}

_DESCRIPTIONS = {
    BrightnessType.Average: "(R + G + B) / 3",
    BrightnessType.MinMax: "(Min(R,G,B) + Max(R,G,B)) / 2",
    BrightnessType.Luminosity: "R * 0.21 + G * 0.72 + B * 0.07",
}


def compute_brightness(rgb: np.ndarray, kind: BrightnessType) -> np.ndarray:
    fn = _FORMULAS.get(kind)
    if fn is None:
        raise ValueError(f"Unsupported brightness type: {kind!r}")
    return fn(rgb)


DEFAULT_BRIGHTNESS_TYPE = BrightnessType.Luminosity
# Terminals draw light glyphs on a dark background, so dense glyphs read as bright.
DEFAULT_INVERT_BRIGHTNESS = True


# -------------------------
# Helpers
# -------------------------

def as_pixel_array(pixels: PixelGrid) -> np.ndarray:
    """
    Return pixels as an (H, W, 3) int64 array.
    Accepts a numpy image array or nested rows of RGB triples.
    """
    arr = np.asarray(pixels, dtype=np.int64)
    if arr.size == 0:
        return np.zeros((0, 0, 3), dtype=np.int64)
    if arr.ndim != 3 or arr.shape[-1] != 3:
        raise ValueError(f"Expected a rectangular grid of RGB triples, got shape {arr.shape}")
    return arr


def pixel_brightness(pixel: Pixel, kind: BrightnessType = DEFAULT_BRIGHTNESS_TYPE) -> int:
    """Brightness of a single (R, G, B) pixel under the given formula."""
    rgb = np.asarray(pixel, dtype=np.int64).reshape(1, 3)
    return int(compute_brightness(rgb, kind)[0])


def invert_brightness(value, invert: bool = DEFAULT_INVERT_BRIGHTNESS):
    """Flip brightness polarity when invert is set. Works on ints and arrays."""
    if not invert:
        return value
    return MAX_PIXEL_BRIGHTNESS - value


# -------------------------
# Mapper
# -------------------------

class BrightnessMapper:
    """
    Maps a pixel grid to a brightness grid of identical dimensions.
    The formula is fixed at construction.
    """

    def __init__(self, kind: BrightnessType = DEFAULT_BRIGHTNESS_TYPE,
                 invert: bool = DEFAULT_INVERT_BRIGHTNESS):
        if not isinstance(kind, BrightnessType):
            raise ValueError(f"Unsupported brightness type: {kind!r}")
        self.kind = kind
        self.invert = invert

    def map(self, pixels: PixelGrid) -> np.ndarray:
        arr = as_pixel_array(pixels)
        h, w = arr.shape[:2]
        if h == 0 or w == 0:
            return np.zeros((0, 0), dtype=np.int64)
        brightness = self.kind.compute(arr)
        return invert_brightness(brightness, self.invert)


def build_brightness_matrix(
    pixels: PixelGrid,
    kind: BrightnessType = DEFAULT_BRIGHTNESS_TYPE,
    invert: bool = DEFAULT_INVERT_BRIGHTNESS,
) -> np.ndarray:
    return BrightnessMapper(kind, invert).map(pixels)
