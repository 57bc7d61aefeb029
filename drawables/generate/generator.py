# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""
Main drawables generation API.

This is the primary entry point of the generation engine: image in,
positioned directive grid out.
"""

from __future__ import annotations

import logging
from typing import Optional

from drawables.schema import (
    PIXEL_LIMIT,
    WHITE,
    Directive,
    DrawablesOutput,
    IgnoreColor,
)
from drawables.generate.codec import (
    DEFAULT_SOURCE_SIZE,
    MAX_CHAIN_LENGTH,
    check_keyed_capacity,
    encode_canvas,
    encode_keyed,
    encode_region,
    parse_ignore_color,
    recolor_target,
)
from drawables.generate.image import ImageSource, load_pixels
from drawables.generate.regions import optimize_regions, pixel_regions

logger = logging.getLogger(__name__)

SCALE_FACTOR = 2


def exceeds_pixel_limit(width: int, height: int, limit: int = PIXEL_LIMIT) -> bool:
    """True if an image of this size should be confirmed by the caller."""
    return width * height > limit


def _warn_if_large(width: int, height: int, limit: int) -> None:
    if exceeds_pixel_limit(width, height, limit):
        logger.warning(
            f"Image ({width}x{height}={width * height}) exceeds the limit "
            f"of {limit} total pixels"
        )


def generate(
    image: ImageSource,
    hand_x: int = 0,
    hand_y: int = 0,
    ignore_color: Optional[str | IgnoreColor] = None,
    replace_white: bool = False,
    replace_blank: bool = False,
    *,
    pixel_limit: int = PIXEL_LIMIT,
) -> DrawablesOutput:
    """
    Generate a positioned directive grid from an image.

    Every renderable pixel ends up in exactly one region, and every region
    becomes one directive stored at the grid cell of its top-left pixel.

    Args:
        image: Path, PIL image, or (H, W, 4)/(H, W, 3) uint8 array
        hand_x: Origin column; may be negative or outside the image
        hand_y: Origin row counted up from the bottom edge
        ignore_color: RRGGBB or RRGGBBAA hex (or a parsed IgnoreColor);
            matching pixels are holes. Fully transparent pixels are
            always holes.
        replace_white: Recolour pure white to a near-white substitute
            instead of letting the white base texture pass through
        replace_blank: Attach a filler canvas covering the whole image;
            when False, blanks are simply absent (fade)
        pixel_limit: Size above which a warning is logged; generation
            still proceeds

    Returns:
        DrawablesOutput with one cell per source pixel

    Raises:
        ValidationError: For a malformed ignore colour (checked before the
            image is read) or an unreadable image

    Example:
        >>> import numpy as np
        >>> px = np.array([[[255, 0, 255, 255]]], dtype=np.uint8)
        >>> out = generate(px)
        >>> out.directives[0].position
        (0, 0)
    """
    ignore = parse_ignore_color(ignore_color)
    pixels = load_pixels(image)
    height, width = pixels.shape[:2]
    _warn_if_large(width, height, pixel_limit)

    regions = optimize_regions(pixels, ignore)
    logger.debug(f"Merged {width}x{height} image into {len(regions)} regions")

    grid: list[list[Optional[Directive]]] = [[None] * width for _ in range(height)]
    for region in regions:
        grid[region.y][region.x] = encode_region(
            region,
            (hand_x, hand_y),
            image_height=height,
            replace_white=replace_white,
        )

    canvas = encode_canvas(width, height, (hand_x, hand_y)) if replace_blank else None

    return DrawablesOutput(
        grid=tuple(tuple(row) for row in grid),
        width=width,
        height=height,
        hand_x=hand_x,
        hand_y=hand_y,
        canvas=canvas,
    )


def generate_scaled(
    image: ImageSource,
    hand_x: int = 0,
    hand_y: int = 0,
    ignore_color: Optional[str | IgnoreColor] = None,
    replace_white: bool = False,
    *,
    max_source_size: int = DEFAULT_SOURCE_SIZE,
    max_chain_length: int = MAX_CHAIN_LENGTH,
    pixel_limit: int = PIXEL_LIMIT,
) -> DrawablesOutput:
    """
    Generate one 2× upscaled directive covering the whole image.

    Each renderable pixel becomes its own 1×1 region and is recoloured
    individually on the keyed texture; the chain ends with a 2× nearest
    upscale. Blanks keep the invisible key filler. Hand offsets are in
    rendered (upscaled) pixels.

    Returns:
        DrawablesOutput with ``scaled=True`` and a 1×1 grid

    Raises:
        ValidationError: For a malformed ignore colour or image, or a
            ``max_source_size`` outside 1-256
        CapacityError: If the image does not fit the source texture or
            the chain would be too long
    """
    ignore = parse_ignore_color(ignore_color)
    pixels = load_pixels(image)
    height, width = pixels.shape[:2]
    _warn_if_large(width, height, pixel_limit)

    regions = pixel_regions(pixels, ignore)
    check_keyed_capacity(
        width,
        height,
        len(regions),
        max_source_size=max_source_size,
        max_chain_length=max_chain_length,
    )

    cells = (
        (r.x, r.y, recolor_target(r.color, replace_white) or WHITE)
        for r in regions
    )
    directive = Directive(
        text=encode_keyed(cells, width, height, scale=SCALE_FACTOR),
        x=-hand_x * 2,
        y=-hand_y * 2,
        width=width,
        height=height,
    )
    logger.debug(f"Encoded {len(regions)} pixels into one scaled directive")

    return DrawablesOutput(
        grid=((directive,),),
        width=width,
        height=height,
        hand_x=hand_x,
        hand_y=hand_y,
        scaled=True,
    )
