# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""Integration tests for generate() and generate_scaled()."""

import logging

import numpy as np
import pytest
from PIL import Image

from drawables import generate, generate_scaled
from drawables.schema import CapacityError, DrawablesOutput, ValidationError
from drawables.generate.codec import FILLER_COLOR, keyed_source
from drawables.generate.generator import exceeds_pixel_limit

MAGENTA = (255, 0, 255, 255)
RED = (255, 0, 0, 255)
CLEAR = (0, 0, 0, 0)


def _solid_image(color, height=2, width=2):
    return np.full((height, width, 4), color, dtype=np.uint8)


def _random_image(seed, height=10, width=7):
    rng = np.random.default_rng(seed)
    palette = np.array([RED, MAGENTA, CLEAR, (0, 0, 255, 255)], dtype=np.uint8)
    return palette[rng.integers(0, len(palette), size=(height, width))]


class TestGenerateBasic:

    def test_single_magenta_pixel(self):
        out = generate(_solid_image(MAGENTA, 1, 1))
        assert isinstance(out, DrawablesOutput)
        assert len(out.directives) == 1
        d = out.directives[0]
        assert d.position == (0, 0)
        assert d.text.endswith("?replace;ffffff=ff00ff")
        assert d.color == MAGENTA

    def test_fully_ignored_image_is_empty(self):
        out = generate(_solid_image(MAGENTA, 3, 3), ignore_color="ff00ff")
        assert out.is_empty
        assert (out.width, out.height) == (3, 3)

    def test_transparent_image_is_empty(self):
        assert generate(_solid_image(CLEAR)).is_empty

    def test_directive_stored_at_anchor_cell(self):
        pixels = _solid_image(CLEAR, 3, 3)
        pixels[1:3, 1:3] = RED
        out = generate(pixels)
        assert out.grid[1][1] is not None
        cells = [(x, y) for x, y, _ in out.cells()]
        assert cells == [(1, 1)]

    def test_hand_offset(self):
        out = generate(_solid_image(RED), hand_x=1, hand_y=1)
        assert out.directives[0].position == (-2, -2)
        assert (out.hand_x, out.hand_y) == (1, 1)

    def test_rgb_array_is_opaque(self):
        rgb = np.full((1, 2, 3), [255, 0, 0], dtype=np.uint8)
        out = generate(rgb)
        assert out.directives[0].color == RED


class TestGenerateOptions:

    def test_replace_blank_adds_canvas(self):
        out = generate(_solid_image(RED, 2, 3), hand_x=1, replace_blank=True)
        assert out.replace_blank
        assert out.canvas.color == FILLER_COLOR
        assert (out.canvas.width, out.canvas.height) == (3, 2)
        assert out.canvas.position == (-2, 0)

    def test_fade_has_no_canvas(self):
        out = generate(_solid_image(RED))
        assert out.canvas is None
        assert not out.replace_blank

    def test_replace_white(self):
        white = _solid_image((255, 255, 255, 255), 1, 1)
        assert generate(white).directives[0].color is None
        replaced = generate(white, replace_white=True).directives[0]
        assert replaced.text.endswith("?replace;ffffff=fefefe")

    def test_malformed_ignore_color_fails_before_loading(self, tmp_path):
        missing = tmp_path / "missing.png"
        with pytest.raises(ValidationError) as exc:
            generate(missing, ignore_color="xyz")
        assert exc.value.value == "xyz"

    def test_missing_image(self, tmp_path):
        with pytest.raises(ValidationError, match="Could not load image"):
            generate(tmp_path / "missing.png")

    def test_loads_from_path(self, tmp_path):
        path = tmp_path / "sprite.png"
        Image.fromarray(_solid_image(MAGENTA, 2, 3)).save(path)
        out = generate(path)
        assert (out.width, out.height) == (3, 2)
        assert len(out.directives) == 1


class TestGenerateProperties:

    @pytest.mark.parametrize("seed", range(10))
    def test_offsets_always_even(self, seed):
        rng = np.random.default_rng(seed)
        hand_x, hand_y = (int(v) for v in rng.integers(-50, 50, size=2))
        out = generate(_random_image(seed), hand_x, hand_y, "0000ff", replace_blank=True)
        for d in out.directives + (out.canvas,):
            assert d.x % 2 == 0
            assert d.y % 2 == 0

    def test_deterministic(self):
        pixels = _random_image(11)
        first = generate(pixels, 3, -2, "ff00ff", replace_white=True)
        second = generate(pixels.copy(), 3, -2, "ff00ff", replace_white=True)
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_input_not_modified(self):
        pixels = _random_image(5)
        before = pixels.copy()
        generate(pixels, ignore_color="ff00ff")
        assert (pixels == before).all()


class TestPixelLimit:

    def test_threshold(self):
        assert not exceeds_pixel_limit(128, 256)
        assert exceeds_pixel_limit(129, 256)

    def test_large_image_warns_but_generates(self, caplog):
        with caplog.at_level(logging.WARNING, logger="drawables.generate.generator"):
            out = generate(_solid_image(RED, 4, 4), pixel_limit=8)
        assert "exceeds the limit of 8" in caplog.text
        assert len(out.directives) == 1


class TestGenerateScaled:

    def test_single_cell(self):
        pixels = _solid_image(CLEAR, 2, 2)
        pixels[0, 0] = RED
        out = generate_scaled(pixels, hand_x=2, hand_y=-1)
        assert out.scaled
        assert len(out.grid) == 1 and len(out.grid[0]) == 1
        d = out.grid[0][0]
        assert d.text == f"{keyed_source(2, 2)}?replace;00010001=ff0000?scalenearest=2"
        assert d.position == (-4, 2)

    def test_ignore_color(self):
        out = generate_scaled(_solid_image(MAGENTA), ignore_color="ff00ff")
        assert out.grid[0][0].text == f"{keyed_source(2, 2)}?scalenearest=2"

    def test_replace_white(self):
        out = generate_scaled(_solid_image((255, 255, 255, 255), 1, 1), replace_white=True)
        assert "=fefefe" in out.grid[0][0].text

    def test_too_large(self):
        with pytest.raises(CapacityError):
            generate_scaled(_solid_image(RED, 1, 65))
