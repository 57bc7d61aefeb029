# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""Inventory icon directives."""

from __future__ import annotations

from drawables.schema import DrawablesOutput
from drawables.generate.codec import DEFAULT_SOURCE_SIZE
from drawables.generate.merger import merge

# Inventory slots show 16×16 pixels; larger icons are scaled down to fit
ICON_SIZE = 16


def _format_factor(factor: float) -> str:
    return f"{factor:.3f}".rstrip("0").rstrip(".")


def build_icon(
    output: DrawablesOutput,
    *,
    max_source_size: int = DEFAULT_SOURCE_SIZE,
) -> str:
    """
    Build inventory icon directive text.

    The merged texture is always anchored at (0, 0): the hand offset used
    to build ``output`` has no effect. Blanks fade unless the output was
    built with replaced blanks.

    Raises:
        PolicyError: For scaled output
        CapacityError: If the image does not fit ``max_source_size``
    """
    merged = merge(output, max_source_size, fade=not output.replace_blank)

    largest = max(output.width, output.height)
    if largest <= ICON_SIZE:
        return merged.text
    return f"{merged.text}?scalenearest={_format_factor(ICON_SIZE / largest)}"
