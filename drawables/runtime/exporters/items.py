# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""
Built-in item exporters.

Each item type binds the generated drawables into a fixed skeleton with
its own item metadata. ``exporter_for`` selects between these and
caller-supplied templates by name.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from drawables.schema import DrawablesOutput, ExportArgumentError
from drawables.runtime.exporters.base import Exporter
from drawables.runtime.exporters.template import TemplateExporter

logger = logging.getLogger(__name__)


def _item_skeleton(name: str, description: str, category: str, two_handed: bool) -> dict:
    return {
        "name": name,
        "count": 1,
        "parameters": {
            "shortdescription": description,
            "description": "Drawables <width>x<height>",
            "category": category,
            "rarity": "Common",
            "level": 1,
            "twoHanded": two_handed,
            "inventoryIcon": "<inventoryIcon>",
            "drawablesGroup": "<group>",
            "drawablesSize": ["<width>", "<height>"],
            "drawables": "<drawables>",
        },
    }


class ItemExporter(Exporter):
    """Exporter with a built-in skeleton."""

    item_name: str = ""
    description: str = ""
    category: str = ""
    two_handed: bool = False

    def skeleton(self) -> dict:
        return _item_skeleton(
            self.item_name, self.description, self.category, self.two_handed
        )


class PistolExporter(ItemExporter):
    item_name = "commonpistol"
    description = "Drawable Pistol"
    category = "pistol"


class ShortswordExporter(ItemExporter):
    item_name = "commonshortsword"
    description = "Drawable Shortsword"
    category = "shortsword"


class TeslaStaffExporter(ItemExporter):
    item_name = "teslastaff"
    description = "Drawable Tesla Staff"
    category = "staff"
    two_handed = True


BUILTIN_EXPORTERS: dict[str, type[ItemExporter]] = {
    "Common Pistol": PistolExporter,
    "Common Shortsword": ShortswordExporter,
    "Tesla Staff": TeslaStaffExporter,
}


def exporter_for(
    name: Optional[str],
    output: DrawablesOutput,
    templates: Optional[Mapping[str, str]] = None,
    icon: Optional[str] = None,
) -> Exporter:
    """
    Select an exporter by display name.

    Args:
        name: A built-in item name, a key of ``templates``, or None for
            the pistol
        output: Generated drawables to bind
        templates: Caller-loaded ``{name: template_text}`` mapping
        icon: Inventory icon directive, if one was built

    Raises:
        ExportArgumentError: If the name is neither built in nor a template
        TemplateError: If the selected template is malformed
    """
    if name is None:
        return PistolExporter(output, icon)
    if name in BUILTIN_EXPORTERS:
        return BUILTIN_EXPORTERS[name](output, icon)

    templates = templates or {}
    if name not in templates:
        raise ExportArgumentError(f"Unknown exporter or template '{name}'", value=name)

    logger.debug(f"Using template '{name}'")
    return TemplateExporter(output, templates[name], icon)
