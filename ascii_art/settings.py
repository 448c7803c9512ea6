#!/usr/bin/env python3
# ascii_art/settings.py
"""
Immutable run settings and command-line argument parsing.

Arguments are positional, all but the first optional:
    <image-path> [<width-pixels> [<brightness-type> [<invert-brightness>]]]

Omitted arguments fall back to the defaults passed in (normally the
"render" section of the user's config file).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from ascii_art.brightness import (
    BrightnessType,
    DEFAULT_BRIGHTNESS_TYPE,
    DEFAULT_INVERT_BRIGHTNESS,
)
from ascii_art.errors import ConfigError

__all__ = [
    "RenderSettings",
    "MAX_WIDTH_PIXELS",
    "parse_args",
    "parse_width",
    "parse_brightness_type",
    "parse_invert",
    "usage_text",
]

# Widest art that fits a standard console line once glyphs are doubled.
MAX_WIDTH_PIXELS = 105

# Positional argument indexes.
IMAGE_PATH_ARG = 0
WIDTH_PIXELS_ARG = 1
BRIGHTNESS_TYPE_ARG = 2
INVERT_BRIGHTNESS_ARG = 3

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class RenderSettings:
    """Everything one run needs. Built once, passed to every stage."""
    image_path: str
    width: int = MAX_WIDTH_PIXELS
    brightness_type: BrightnessType = DEFAULT_BRIGHTNESS_TYPE
    invert: bool = DEFAULT_INVERT_BRIGHTNESS


def parse_width(raw: str) -> int:
    s = raw.strip()
    # Plain ASCII digits only; int() would also take "1_05" or non-ASCII digits.
    if not _INTEGER.fullmatch(s):
        raise ConfigError(
            f"Error reading the Width Pixels argument = {raw}! It must be a number!"
        )
    width = int(s)
    if width < 0 or width > MAX_WIDTH_PIXELS:
        raise ConfigError(f"Width pixels argument must be between 0 and {MAX_WIDTH_PIXELS}!")
    return width


def parse_brightness_type(raw: str) -> BrightnessType:
    # Exact, case-sensitive match on the member name.
    if raw in BrightnessType.__members__:
        return BrightnessType[raw]
    average, min_max, luminosity = BrightnessType.names()
    raise ConfigError(
        f"Unknown brightness type {raw!r}: should be one of: "
        f"{average}, {min_max} or {luminosity}"
    )


def parse_invert(raw: str) -> bool:
    s = raw.strip().lower()
    if s == "true":
        return True
    if s == "false":
        return False
    raise ConfigError("Unknown Invert Brightness value, must be either true or false!")


def parse_args(argv: Sequence[str], defaults: Optional[RenderSettings] = None) -> RenderSettings:
    """Build RenderSettings from positional arguments. Raises ConfigError."""
    if not argv:
        raise ConfigError("No file specified!")

    width = defaults.width if defaults else MAX_WIDTH_PIXELS
    kind = defaults.brightness_type if defaults else DEFAULT_BRIGHTNESS_TYPE
    invert = defaults.invert if defaults else DEFAULT_INVERT_BRIGHTNESS

    if len(argv) > WIDTH_PIXELS_ARG:
        width = parse_width(argv[WIDTH_PIXELS_ARG])
    if len(argv) > BRIGHTNESS_TYPE_ARG:
        kind = parse_brightness_type(argv[BRIGHTNESS_TYPE_ARG])
    if len(argv) > INVERT_BRIGHTNESS_ARG:
        invert = parse_invert(argv[INVERT_BRIGHTNESS_ARG])

    return RenderSettings(
        image_path=argv[IMAGE_PATH_ARG],
        width=width,
        brightness_type=kind,
        invert=invert,
    )


def usage_text() -> str:
    lines = [
        "",
        "All Program Arguments:",
        "1) Path or http(s) URL of the source image.",
        f"2) Max width (pixels), 0 to {MAX_WIDTH_PIXELS}. Default = {MAX_WIDTH_PIXELS}",
        f"3) Brightness Type: Default = {DEFAULT_BRIGHTNESS_TYPE.name}",
    ]
    for letter, kind in zip("abc", BrightnessType):
        suffix = " Default" if kind is DEFAULT_BRIGHTNESS_TYPE else ""
        lines.append(f"  {letter}) {kind.name}: {kind.formula}{suffix}")
    lines.append(f"4) Invert Brightness: true/false. Default = {str(DEFAULT_INVERT_BRIGHTNESS).lower()}")
    return "\n".join(lines)
