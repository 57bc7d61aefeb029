# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""
Region optimization.

Groups the renderable pixels of an image into uniformly coloured
axis-aligned rectangles, so each rectangle costs one directive.

Policy (greedy, deterministic, linear in pixel count):
1. Split every row into maximal same-colour horizontal runs
2. Stack runs with identical x, width and colour on consecutive rows

This is not a minimum rectangle cover, but the result always partitions
the renderable pixels exactly.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from drawables.schema import IgnoreColor, Region, Rgba


def ignored_mask(
    pixels: NDArray[np.uint8],
    ignore: Optional[IgnoreColor] = None,
) -> NDArray[np.bool_]:
    """
    Mark pixels that must never be rendered.

    Fully transparent pixels are always ignored, whatever the ignore
    colour.

    Args:
        pixels: Array of shape (H, W, 4)
        ignore: Optional colour to treat as a hole

    Returns:
        Boolean array of shape (H, W)
    """
    mask = pixels[:, :, 3] == 0
    if ignore is not None:
        channels = 4 if ignore.match_alpha else 3
        target = np.array(ignore.color[:channels], dtype=np.uint8)
        mask |= np.all(pixels[:, :, :channels] == target, axis=2)
    return mask


def _row_runs(
    pixels: NDArray[np.uint8],
    mask: NDArray[np.bool_],
) -> list[tuple[int, int, int, Rgba]]:
    """Maximal same-colour runs per row as (x, y, width, color)."""
    height, width = mask.shape
    runs: list[tuple[int, int, int, Rgba]] = []

    for y in range(height):
        row = pixels[y]
        start: Optional[int] = None
        color: Optional[Rgba] = None
        for x in range(width):
            if mask[y, x]:
                if start is not None:
                    runs.append((start, y, x - start, color))
                    start = None
                continue
            current = tuple(int(c) for c in row[x])
            if start is None:
                start, color = x, current
            elif current != color:
                runs.append((start, y, x - start, color))
                start, color = x, current
        if start is not None:
            runs.append((start, y, width - start, color))

    return runs


def _sort_key(region: Region) -> tuple:
    return (region.y, region.x, region.color)


def optimize_regions(
    pixels: NDArray[np.uint8],
    ignore: Optional[IgnoreColor] = None,
) -> tuple[Region, ...]:
    """
    Merge renderable pixels into uniform rectangles.

    Args:
        pixels: Array of shape (H, W, 4) with uint8 RGBA values
        ignore: Optional colour whose pixels are skipped

    Returns:
        Regions ordered by row, then column, then colour. Empty when no
        pixel is renderable.
    """
    mask = ignored_mask(pixels, ignore)

    # Group horizontal runs by extent and colour; rows arrive in order
    columns: dict[tuple[int, int, Rgba], list[int]] = defaultdict(list)
    for x, y, w, color in _row_runs(pixels, mask):
        columns[(x, w, color)].append(y)

    regions: list[Region] = []
    for (x, w, color), ys in columns.items():
        start = prev = ys[0]
        for y in ys[1:]:
            if y == prev + 1:
                prev = y
            else:
                regions.append(Region(x, start, w, prev - start + 1, color))
                start = prev = y
        regions.append(Region(x, start, w, prev - start + 1, color))

    return tuple(sorted(regions, key=_sort_key))


def pixel_regions(
    pixels: NDArray[np.uint8],
    ignore: Optional[IgnoreColor] = None,
) -> tuple[Region, ...]:
    """One 1×1 region per renderable pixel, in row-major order."""
    mask = ignored_mask(pixels, ignore)
    ys, xs = np.nonzero(~mask)
    return tuple(
        Region(int(x), int(y), 1, 1, tuple(int(c) for c in pixels[y, x]))
        for y, x in zip(ys, xs)
    )


def render_regions(
    regions: tuple[Region, ...],
    width: int,
    height: int,
) -> NDArray[np.uint8]:
    """
    Paint regions onto a transparent (H, W, 4) canvas.

    Raises:
        ValueError: If a region falls outside the canvas
    """
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    for region in regions:
        if region.right > width or region.bottom > height:
            raise ValueError(
                f"Region at ({region.x}, {region.y}) size "
                f"{region.width}x{region.height} exceeds {width}x{height} canvas"
            )
        canvas[region.y:region.bottom, region.x:region.right] = region.color
    return canvas
