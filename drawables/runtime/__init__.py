# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""
Export runtime for generated drawables.

Turns a DrawablesOutput into text the game accepts:

1. Item Descriptor -- JSON document, pretty or compact
2. Spawn Command -- Single-line console command

Templates are supplied by value; the runtime performs no file I/O.
"""

from drawables.runtime.exporters import (
    DocumentFormat,
    Exporter,
    PistolExporter,
    ShortswordExporter,
    TemplateExporter,
    TeslaStaffExporter,
    exporter_for,
)

__all__ = [
    "DocumentFormat",
    "Exporter",
    "TemplateExporter",
    "PistolExporter",
    "ShortswordExporter",
    "TeslaStaffExporter",
    "exporter_for",
]
