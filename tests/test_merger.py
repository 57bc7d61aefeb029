# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""Tests for single-texture merging and the single-texture pipeline."""

import numpy as np
import pytest

from drawables import (
    GenerationConfig,
    build_icon,
    generate,
    generate_scaled,
    merge,
    render_single_texture,
)
from drawables.schema import CapacityError, ErrorKind, PolicyError, ValidationError
from drawables.generate.codec import BASE_TEXTURE, KEYED_TEXTURE, keyed_source, split_operations

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
WHITE = (255, 255, 255, 255)
CLEAR = (0, 0, 0, 0)


def _image(rows):
    return np.array(rows, dtype=np.uint8)


def _solid_image(color, height=2, width=2):
    return np.full((height, width, 4), color, dtype=np.uint8)


class TestMerge:

    def test_two_pixels(self):
        out = generate(_image([[RED, GREEN]]))
        merged = merge(out)
        assert merged.text == (
            f"{keyed_source(2, 1)}?replace;00010001=ff0000;01010001=00ff00"
        )
        assert merged.position == (0, 0)
        assert not merged.fade

    def test_region_expands_row_major(self):
        merged = merge(generate(_solid_image(RED)))
        _, ops = split_operations(merged.text)
        assert ops[-1] == (
            "replace",
            ["00010001=ff0000", "01010001=ff0000", "00010101=ff0000", "01010101=ff0000"],
        )

    def test_position_from_hand(self):
        merged = merge(generate(_solid_image(RED), hand_x=3, hand_y=2))
        assert merged.position == (-6, -4)

    def test_fade(self):
        merged = merge(generate(_image([[RED, CLEAR]])), fade=True)
        assert merged.text == (
            f"{keyed_source(2, 1)}?multiply=ffffff00?replace;00010000=ff0000"
        )
        assert merged.fade

    def test_white_pass_through_becomes_explicit(self):
        merged = merge(generate(_image([[WHITE]])))
        assert merged.text.endswith("?replace;00010001=ffffff")

    def test_empty_output(self):
        merged = merge(generate(_solid_image(CLEAR)))
        assert merged.text == keyed_source(2, 2)

    def test_deterministic(self):
        pixels = _image([[RED, GREEN, RED], [GREEN, GREEN, CLEAR]])
        assert merge(generate(pixels)) == merge(generate(pixels))

    def test_single_texture_outputs_start_from_base_texture(self):
        out = generate(_image([[RED, GREEN]]))
        texts = [
            merge(out).text,
            build_icon(out),
            generate_scaled(_image([[RED, GREEN]])).grid[0][0].text,
        ]
        for text in texts:
            assert text.startswith(BASE_TEXTURE)
            source, ops = split_operations(text)
            assert source == "/assetmissing.png"
            assert ("blendmult", [KEYED_TEXTURE, "0", "0"]) in ops


class TestMergeLimits:

    @pytest.mark.parametrize("width,height,limit", [(8, 8, 8), (16, 3, 16), (1, 64, 64)])
    def test_span_within_limit(self, width, height, limit):
        merged = merge(generate(_solid_image(RED, height, width)), limit)
        assert merged.text.startswith(keyed_source(width, height))
        assert (merged.width, merged.height) == (width, height)

    @pytest.mark.parametrize("width,height,limit", [(9, 8, 8), (16, 17, 16), (65, 1, 64)])
    def test_span_exceeded(self, width, height, limit):
        with pytest.raises(CapacityError) as exc:
            merge(generate(_solid_image(RED, height, width)), limit)
        assert exc.value.kind == ErrorKind.CAPACITY
        assert exc.value.limit == limit
        assert exc.value.value == (width, height)

    def test_chain_length_exceeded(self):
        with pytest.raises(CapacityError) as exc:
            merge(generate(_solid_image(RED)), max_chain_length=3)
        assert exc.value.value == 4

    def test_source_size_out_of_range(self):
        with pytest.raises(ValidationError):
            merge(generate(_solid_image(RED)), 300)


class TestMergePolicy:

    def test_scaled_output_rejected(self):
        with pytest.raises(PolicyError):
            merge(generate_scaled(_solid_image(RED)))

    def test_fade_on_replaced_blanks_rejected(self):
        out = generate(_solid_image(RED), replace_blank=True)
        with pytest.raises(PolicyError) as exc:
            merge(out, fade=True)
        assert exc.value.kind == ErrorKind.POLICY

    def test_replaced_blanks_merge_without_fade(self):
        out = generate(_solid_image(RED), replace_blank=True)
        assert "?multiply=ffffff00" not in merge(out).text


class TestRenderSingleTexture:

    def test_plain_replaces_white(self):
        text = render_single_texture(_image([[RED, WHITE]]), GenerationConfig())
        assert text.endswith("?replace;00010001=ff0000;01010001=fefefe")
        assert "?multiply=ffffff00" not in text

    def test_fade(self):
        text = render_single_texture(_image([[RED]]), GenerationConfig(fade=True))
        assert "?multiply=ffffff00" in text

    def test_scale(self):
        text = render_single_texture(_image([[RED]]), GenerationConfig(scale=True))
        assert text.endswith("?scalenearest=2")

    def test_source_size(self):
        config = GenerationConfig(max_source_size=4)
        with pytest.raises(CapacityError):
            render_single_texture(_solid_image(RED, 1, 5), config)
