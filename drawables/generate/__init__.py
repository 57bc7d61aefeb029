# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""
Generation core.

This module turns images into positioned directive grids and merges them
into single-texture and inventory icon directives. All operations are
pure functions of their inputs.
"""

from drawables.generate.generator import generate, generate_scaled
from drawables.generate.merger import merge, render_single_texture
from drawables.generate.icon import build_icon
from drawables.generate.keys import build_keys_texture, save_keys_texture

__all__ = [
    "generate",
    "generate_scaled",
    "merge",
    "render_single_texture",
    "build_icon",
    "build_keys_texture",
    "save_keys_texture",
]
