# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""
Exporters for generated drawables.

Each exporter binds a DrawablesOutput into an item document and renders
it as JSON or as a spawn command. Exporters never modify the output.
"""

from drawables.runtime.exporters.base import (
    PLACEHOLDERS,
    DocumentFormat,
    Exporter,
    bind,
)
from drawables.runtime.exporters.template import TemplateExporter, parse_template
from drawables.runtime.exporters.items import (
    BUILTIN_EXPORTERS,
    ItemExporter,
    PistolExporter,
    ShortswordExporter,
    TeslaStaffExporter,
    exporter_for,
)

__all__ = [
    "PLACEHOLDERS",
    "DocumentFormat",
    "Exporter",
    "bind",
    "TemplateExporter",
    "parse_template",
    "ItemExporter",
    "PistolExporter",
    "ShortswordExporter",
    "TeslaStaffExporter",
    "BUILTIN_EXPORTERS",
    "exporter_for",
]
