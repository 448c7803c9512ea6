#!/usr/bin/env python3
# ascii_art/pipeline.py
"""
Pipeline orchestration: pixel grid -> brightness grid -> text lines.

Stages never share mutable state; each one returns a fresh result.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List

import numpy as np

from ascii_art.brightness import BrightnessMapper, PixelGrid
from ascii_art.imaging import load_pixels
from ascii_art.rendering.renderer import TextRenderer
from ascii_art.settings import RenderSettings

__all__ = ["describe_settings", "render_pixels", "run"]

log = logging.getLogger(__name__)

Loader = Callable[[str, int], np.ndarray]
Writer = Callable[[str], None]


def describe_settings(settings: RenderSettings) -> List[str]:
    """The four settings lines echoed before the art."""
    return [
        f"Image = {settings.image_path}",
        f"Width (pixels) = {settings.width}",
        f"Brightness Type = {settings.brightness_type.name}",
        f"Invert Brightness = {settings.invert}",
    ]


def render_pixels(
    pixels: PixelGrid,
    settings: RenderSettings,
    renderer: TextRenderer = TextRenderer(),
) -> List[str]:
    mapper = BrightnessMapper(settings.brightness_type, settings.invert)
    brightness = mapper.map(pixels)
    return renderer.render(brightness)


def run(
    settings: RenderSettings,
    out: Writer = print,
    loader: Loader = load_pixels,
) -> List[str]:
    """
    Echo settings, load the image, render and write every line.
    ImageLoadError from the loader propagates before any brightness work.
    """
    for line in describe_settings(settings):
        out(line)

    t0 = time.perf_counter()
    pixels = loader(settings.image_path, settings.width)
    t1 = time.perf_counter()
    lines = render_pixels(pixels, settings)
    t2 = time.perf_counter()
    log.info(
        "rendered %d lines (load %.1fms, render %.1fms)",
        len(lines), (t1 - t0) * 1000.0, (t2 - t1) * 1000.0,
    )

    for line in lines:
        out(line)
    return lines
