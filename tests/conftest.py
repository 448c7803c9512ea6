import pytest
from PIL import Image


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config loader at a file that does not exist."""
    path = tmp_path / "ascii_art.json"
    monkeypatch.setenv("ASCII_ART_CONFIG", str(path))
    return path


@pytest.fixture
def make_image(tmp_path):
    def _make(size, color=(255, 255, 255), name="img.png"):
        p = tmp_path / name
        Image.new("RGB", size, color).save(p)
        return p
    return _make
