#!/usr/bin/env python3
# ascii_art/errors.py
"""
Exception types surfaced to the command line.

Anything derived from AsciiArtError aborts the run with a diagnostic and the
usage instructions. Programming defects stay plain ValueError.
"""

from __future__ import annotations

__all__ = ["AsciiArtError", "ConfigError", "ImageLoadError"]


class AsciiArtError(Exception):
    """Base class for user-facing failures."""


class ConfigError(AsciiArtError):
    """Bad command-line argument."""


class ImageLoadError(AsciiArtError):
    """The image could not be fetched, decoded or resized."""

    def __init__(self, locator: str, reason: str):
        super().__init__(f"Error reading image = {locator}: {reason}")
        self.locator = locator
        self.reason = reason
