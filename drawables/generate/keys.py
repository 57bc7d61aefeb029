# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""
Keys texture.

Single-texture directives multiply the white base by this texture, then
recolour each key. Pixel (x, y), counted from the top-left, holds the
colour ``xx01yy01``: red is the column, blue the row, green 1 and alpha
1, so an unreplaced key stays invisible. Save the image under the mod's
asset root at ``KEYED_TEXTURE``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from drawables.schema import ValidationError
from drawables.generate.codec import MAX_KEYED_SPAN


def build_keys_texture(size: int = MAX_KEYED_SPAN) -> Image.Image:
    """
    Build a square RGBA keys texture.

    Args:
        size: Side length, 1-256; must cover the largest source size
            directives will use

    Raises:
        ValidationError: If ``size`` is outside 1-256
    """
    if not 1 <= size <= MAX_KEYED_SPAN:
        raise ValidationError(
            f"Keys texture size must be 1-{MAX_KEYED_SPAN}, got {size}", value=size
        )

    ys, xs = np.mgrid[0:size, 0:size]
    pixels = np.empty((size, size, 4), dtype=np.uint8)
    pixels[:, :, 0] = xs
    pixels[:, :, 1] = 1
    pixels[:, :, 2] = ys
    pixels[:, :, 3] = 1
    return Image.fromarray(pixels)


def save_keys_texture(path: Union[str, Path], size: int = MAX_KEYED_SPAN) -> None:
    """Write the keys texture as PNG, e.g. to ``<mod>/drawables/keys.png``."""
    build_keys_texture(size).save(path, format="PNG")
