# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""
Schema definitions for drawables generation.

All value types in this module are immutable (frozen dataclasses).
A DrawablesOutput is produced once per generation call and never altered.
"""

from drawables.schema.drawables import (
    PIXEL_LIMIT,
    TRANSPARENT,
    WHITE,
    Directive,
    DrawablesOutput,
    IgnoreColor,
    Pixel,
    Region,
    Rgba,
)
from drawables.schema.errors import (
    CapacityError,
    DrawablesError,
    ErrorKind,
    ExportArgumentError,
    PolicyError,
    TemplateError,
    ValidationError,
)

__all__ = [
    # Limits
    "PIXEL_LIMIT",
    # Colors
    "Rgba",
    "WHITE",
    "TRANSPARENT",
    # Pipeline values
    "Pixel",
    "IgnoreColor",
    "Region",
    "Directive",
    "DrawablesOutput",
    # Errors
    "ErrorKind",
    "DrawablesError",
    "ValidationError",
    "TemplateError",
    "ExportArgumentError",
    "CapacityError",
    "PolicyError",
]
