#!/usr/bin/env python3
# ascii_art/version.py
"""
Version and build metadata for ascii-art.
"""

__version__ = "1.0.0"
__build__ = "2026-10-18"
__license__ = "MIT"

def version_info() -> str:
    """Return human-readable version string."""
    return f"ascii-art v{__version__} (build {__build__})"
