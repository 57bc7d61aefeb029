# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""
Drawables Generator -- Images as chained compositing directives.

Encodes a bitmap as directives applied to a single 1×1 base texture, so
an engine that cannot embed images in item definitions can still draw
them.

Quick start::

    from drawables import generate, build_icon, exporter_for

    out = generate("sword.png", hand_x=3, hand_y=2, ignore_color="ff00ff")
    icon = build_icon(out)
    exporter = exporter_for("Common Shortsword", out, icon=icon)
    exporter.to_document(group="weapon", include_icon=True)
    exporter.to_command()
"""

from __future__ import annotations

__version__ = "1.0.0"

from drawables.generate import (
    build_icon,
    build_keys_texture,
    generate,
    generate_scaled,
    merge,
    render_single_texture,
)
from drawables.generate.config import GenerationConfig, RenderMode
from drawables.runtime import DocumentFormat, exporter_for
from drawables.schema import (
    Directive,
    DrawablesError,
    DrawablesOutput,
    ErrorKind,
    IgnoreColor,
    Region,
)

__all__ = [
    # Core API
    "generate",
    "generate_scaled",
    "merge",
    "build_icon",
    "render_single_texture",
    "build_keys_texture",
    "exporter_for",
    # Configuration
    "GenerationConfig",
    "RenderMode",
    "DocumentFormat",
    # Types (commonly needed)
    "Directive",
    "DrawablesOutput",
    "Region",
    "IgnoreColor",
    # Errors
    "DrawablesError",
    "ErrorKind",
    # Version
    "__version__",
]
