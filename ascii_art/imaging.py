#!/usr/bin/env python3
# ascii_art/imaging.py
"""
Image decoding and fit-resizing.

Turns an image locator into a rectangular (H, W, 3) uint8 RGB grid whose
larger side equals the requested width. Locators are local paths or
http(s) URLs. Every failure surfaces as ImageLoadError.
"""

from __future__ import annotations

import io
import logging
from typing import Optional, Tuple

import numpy as np
import requests
from PIL import Image, UnidentifiedImageError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ascii_art.errors import ImageLoadError

__all__ = ["load_pixels", "fit_size", "make_session", "is_url"]

log = logging.getLogger(__name__)


def is_url(locator: str) -> bool:
    return locator.lower().startswith(("http://", "https://"))


def make_session(user_agent: str = "ascii-art/1.0", retries: int = 0) -> requests.Session:
    """HTTP session with a urllib3 retry policy mounted for both schemes."""
    session = requests.Session()
    session.headers["User-Agent"] = user_agent
    retry = Retry(
        total=retries,
        connect=retries,
        read=retries,
        backoff_factor=0.3,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def fit_size(size: Tuple[int, int], width: int) -> Tuple[int, int]:
    """
    Scale (w, h) so the larger side equals width, keeping aspect ratio.
    Neither side drops below 1 for width >= 1.
    """
    w, h = size
    if width <= 0:
        return 0, 0
    if w >= h:
        return width, max(1, round(h * width / w))
    return max(1, round(w * width / h)), width


def _open_image(
    locator: str,
    session: Optional[requests.Session],
    timeout: Tuple[float, float],
) -> Image.Image:
    if not is_url(locator):
        return Image.open(locator)

    own_session = session is None
    if own_session:
        session = make_session()
    try:
        r = session.get(locator, timeout=timeout)
        r.raise_for_status()
    finally:
        if own_session:
            session.close()
    if not r.content:
        raise ValueError("empty response body")
    return Image.open(io.BytesIO(r.content))


def load_pixels(
    locator: str,
    width: int,
    session: Optional[requests.Session] = None,
    timeout: Tuple[float, float] = (5.0, 15.0),
) -> np.ndarray:
    """Decode and fit-resize an image. Width 0 yields an empty grid once decoded."""
    try:
        with _open_image(locator, session, timeout) as img:
            rgb = img.convert("RGB")
        if width <= 0:
            log.debug("width %d requested, discarding decoded %s", width, locator)
            return np.zeros((0, 0, 3), dtype=np.uint8)
        target = fit_size(rgb.size, width)
        if rgb.size != target:
            rgb = rgb.resize(target, Image.LANCZOS)
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError,
            ValueError, requests.RequestException) as e:
        raise ImageLoadError(locator, str(e) or type(e).__name__) from e

    log.debug("loaded %s as %dx%d", locator, rgb.width, rgb.height)
    return np.asarray(rgb, dtype=np.uint8)
