import numpy as np
import pytest

from ascii_art.rendering.ramp import GLYPH_RAMP, MAX_GLYPH_INDEX, glyph_for, glyph_index, glyph_indices
from ascii_art.rendering.renderer import TextRenderer


def test_ramp_ends():
    assert GLYPH_RAMP[0] == "`"
    assert GLYPH_RAMP[-1] == "$"
    assert MAX_GLYPH_INDEX == len(GLYPH_RAMP) - 1 == 64


def test_quantization_boundaries():
    assert glyph_index(0) == 0
    assert glyph_index(255) == MAX_GLYPH_INDEX
    assert glyph_index(128) == 32
    assert glyph_for(128) == "v"
    assert glyph_index(3) == 0
    assert glyph_index(4) == 1


def test_quantization_is_monotonic():
    idx = [glyph_index(b) for b in range(256)]
    assert idx == sorted(idx)
    assert glyph_indices(np.arange(256)).tolist() == idx


def test_out_of_range_brightness_is_clamped():
    assert glyph_index(-3) == 0
    assert glyph_index(260) == MAX_GLYPH_INDEX
    assert glyph_indices(np.array([[-1, 256]])).tolist() == [[0, MAX_GLYPH_INDEX]]


def test_each_glyph_is_doubled():
    lines = TextRenderer().render(np.array([[255, 0, 128]]))
    assert lines == ["$$``vv"]


def test_line_length_is_twice_row_width():
    grid = np.random.default_rng(3).integers(0, 256, size=(4, 17))
    lines = TextRenderer().render(grid)
    assert len(lines) == 4
    assert all(len(line) == 34 for line in lines)


def test_row_order_preserved():
    lines = TextRenderer().render([[0], [255]])
    assert lines == ["``", "$$"]


def test_empty_grid_renders_nothing():
    assert TextRenderer().render(np.zeros((0, 0), dtype=np.int64)) == []


def test_custom_cell_width():
    assert TextRenderer(cell_width=1).render([[255, 0]]) == ["$`"]
    with pytest.raises(ValueError):
        TextRenderer(cell_width=0)
