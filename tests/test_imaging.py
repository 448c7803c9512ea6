import io

import numpy as np
import pytest
import requests
from PIL import Image

from ascii_art.errors import ImageLoadError
from ascii_art.imaging import fit_size, is_url, load_pixels


@pytest.mark.parametrize("size,width,expected", [
    ((200, 100), 50, (50, 25)),
    ((100, 200), 50, (25, 50)),
    ((10, 10), 105, (105, 105)),
    ((1000, 1), 10, (10, 1)),
    ((30, 20), 0, (0, 0)),
])
def test_fit_size(size, width, expected):
    assert fit_size(size, width) == expected


def test_load_local_image(make_image):
    path = make_image((40, 20), (10, 20, 30))
    arr = load_pixels(str(path), 40)
    assert arr.shape == (20, 40, 3)
    assert arr.dtype == np.uint8
    assert tuple(arr[0, 0]) == (10, 20, 30)


def test_load_resizes_to_fit(make_image):
    path = make_image((200, 100), (10, 20, 30))
    assert load_pixels(str(path), 40).shape == (20, 40, 3)
    assert load_pixels(str(path), 105).shape == (52, 105, 3)


def test_grayscale_source_is_converted_to_rgb(tmp_path):
    p = tmp_path / "gray.png"
    Image.new("L", (8, 8), 99).save(p)
    arr = load_pixels(str(p), 8)
    assert arr.shape == (8, 8, 3)
    assert tuple(arr[3, 3]) == (99, 99, 99)


def test_width_zero_still_decodes(make_image):
    arr = load_pixels(str(make_image((6, 4))), 0)
    assert arr.shape == (0, 0, 3)


def test_width_zero_missing_file(tmp_path):
    missing = str(tmp_path / "missing.png")
    with pytest.raises(ImageLoadError) as exc:
        load_pixels(missing, 0)
    assert exc.value.locator == missing


def test_oversized_image_becomes_image_load_error(make_image, monkeypatch):
    path = make_image((400, 400))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)
    with pytest.raises(ImageLoadError):
        load_pixels(str(path), 10)


def test_missing_file(tmp_path):
    missing = str(tmp_path / "missing.png")
    with pytest.raises(ImageLoadError) as exc:
        load_pixels(missing, 10)
    assert exc.value.locator == missing


def test_not_an_image(tmp_path):
    p = tmp_path / "notes.txt"
    p.write_text("hello")
    with pytest.raises(ImageLoadError):
        load_pixels(str(p), 10)


class _Response:
    def __init__(self, content, status=200):
        self.content = content
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


class _Session:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        return self.response


def _png_bytes(size, color):
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, "PNG")
    return buf.getvalue()


def test_is_url():
    assert is_url("https://example.com/a.png")
    assert is_url("HTTP://example.com/a.png")
    assert not is_url("/tmp/a.png")


def test_load_from_url():
    session = _Session(_Response(_png_bytes((4, 8), (255, 0, 0))))
    arr = load_pixels("https://example.com/a.png", 16, session=session, timeout=(1.0, 2.0))
    assert arr.shape == (16, 8, 3)
    assert session.calls == [("https://example.com/a.png", (1.0, 2.0))]


def test_http_error_becomes_image_load_error():
    session = _Session(_Response(b"", status=404))
    with pytest.raises(ImageLoadError, match="404"):
        load_pixels("https://example.com/a.png", 16, session=session)


def test_empty_body_becomes_image_load_error():
    session = _Session(_Response(b""))
    with pytest.raises(ImageLoadError, match="empty response"):
        load_pixels("https://example.com/a.png", 16, session=session)
