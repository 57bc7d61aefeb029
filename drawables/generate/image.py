# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""
Source image decoding.

Every input form is normalized to an (H, W, 4) uint8 RGBA array once,
before any region work starts.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

from drawables.schema import ValidationError

ImageSource = Union[str, Path, Image.Image, NDArray[np.uint8]]


def load_pixels(image: ImageSource) -> NDArray[np.uint8]:
    """
    Load an image as an RGBA pixel grid.

    Args:
        image: One of:
            - Path to an image file (str or Path), any format Pillow reads
            - A PIL image in any mode
            - NumPy array of shape (H, W, 4) or (H, W, 3) with uint8
              values; RGB arrays are treated as fully opaque

    Returns:
        Array of shape (H, W, 4), dtype uint8

    Raises:
        ValidationError: If the file is missing or unreadable, or the
            array has the wrong shape, dtype or an empty dimension
        TypeError: For any other input type
    """
    if isinstance(image, (str, Path)):
        try:
            with Image.open(image) as img:
                pixels = np.array(img.convert("RGBA"), dtype=np.uint8)
        except (FileNotFoundError, UnidentifiedImageError, OSError) as e:
            raise ValidationError(
                f"Could not load image '{image}': {e}", value=str(image)
            ) from e

    elif isinstance(image, Image.Image):
        pixels = np.array(image.convert("RGBA"), dtype=np.uint8)

    elif isinstance(image, np.ndarray):
        if image.ndim != 3 or image.shape[2] not in (3, 4):
            raise ValidationError(
                f"Expected (H, W, 4) or (H, W, 3) array, got shape {image.shape}",
                value=image.shape,
            )
        if image.dtype != np.uint8:
            raise ValidationError(
                f"Expected uint8 array, got {image.dtype}", value=str(image.dtype)
            )

        if image.shape[2] == 3:
            alpha = np.full(image.shape[:2] + (1,), 255, dtype=np.uint8)
            pixels = np.concatenate([image, alpha], axis=2)
        else:
            pixels = image.copy()

    else:
        raise TypeError(
            f"Expected file path, PIL image or numpy array, got {type(image)}"
        )

    height, width = pixels.shape[:2]
    if height < 1 or width < 1:
        raise ValidationError(
            f"Image has no pixels ({width}x{height})", value=(width, height)
        )

    return pixels
