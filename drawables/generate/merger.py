# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""
Single-texture merging.

Collapses a directive grid into one keyed directive: one draw call
instead of one per region, at the cost of one replace pair per covered
pixel and a source texture at least as large as the image.
"""

from __future__ import annotations

import logging

from drawables.schema import WHITE, Directive, DrawablesOutput, Pixel, PolicyError, Region
from drawables.generate.codec import (
    DEFAULT_SOURCE_SIZE,
    MAX_CHAIN_LENGTH,
    check_keyed_capacity,
    encode_keyed,
)
from drawables.generate.config import GenerationConfig, RenderMode
from drawables.generate.generator import generate, generate_scaled
from drawables.generate.image import ImageSource

logger = logging.getLogger(__name__)


def _expand(output: DrawablesOutput) -> list[Pixel]:
    """Covered pixels, row-major."""
    pixels: list[Pixel] = []
    for x, y, directive in output.cells():
        color = directive.color if directive.color is not None else WHITE
        region = Region(x, y, directive.width, directive.height, color)
        pixels.extend(region.pixels())
    pixels.sort(key=lambda p: (p.y, p.x))
    return pixels


def merge(
    output: DrawablesOutput,
    max_source_size: int = DEFAULT_SOURCE_SIZE,
    fade: bool = False,
    *,
    max_chain_length: int = MAX_CHAIN_LENGTH,
) -> Directive:
    """
    Merge a directive grid into a single keyed directive.

    Args:
        output: Regular (unscaled) generator output
        max_source_size: Keyed texture span per axis, 1-256
        fade: Uncovered pixels render fully transparent instead of as
            invisible filler
        max_chain_length: Maximum replace pairs in the chain

    Returns:
        Directive positioned at the image's bottom-left corner relative
        to the hand

    Raises:
        PolicyError: For scaled output, or ``fade`` on output built with
            replaced blanks
        ValidationError: For ``max_source_size`` outside 1-256
        CapacityError: If the image or chain exceeds the limits
    """
    if output.scaled:
        raise PolicyError("Scaled output is already a single directive", value="scaled")
    if fade and output.replace_blank:
        raise PolicyError(
            "Fade cannot be applied to output generated with replaced blanks",
            value=(fade, output.replace_blank),
        )

    pixels = _expand(output)
    check_keyed_capacity(
        output.width,
        output.height,
        len(pixels),
        max_source_size=max_source_size,
        max_chain_length=max_chain_length,
    )

    cells = ((p.x, p.y, p.color) for p in pixels)
    text = encode_keyed(cells, output.width, output.height, fade=fade)
    logger.debug(
        f"Merged {len(output.directives)} directives into one chain "
        f"of {len(pixels)} replacements ({len(text)} characters)"
    )

    return Directive(
        text=text,
        x=-output.hand_x * 2,
        y=-output.hand_y * 2,
        width=output.width,
        height=output.height,
        fade=fade,
    )


def render_single_texture(image: ImageSource, config: GenerationConfig) -> str:
    """
    Produce single-texture directive text for an image.

    Scale mode returns the 2× directive; otherwise the image is generated
    with white replacement (blanks filled unless fading) and merged.
    """
    if config.mode == RenderMode.SCALE:
        output = generate_scaled(
            image,
            config.hand_x,
            config.hand_y,
            config.ignore_color,
            replace_white=True,
            max_source_size=config.max_source_size,
            pixel_limit=config.pixel_limit,
        )
        return output.grid[0][0].text

    fade = config.mode == RenderMode.FADE
    output = generate(
        image,
        config.hand_x,
        config.hand_y,
        config.ignore_color,
        replace_white=True,
        replace_blank=not fade,
        pixel_limit=config.pixel_limit,
    )
    return merge(output, config.max_source_size, fade).text
