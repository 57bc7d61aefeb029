# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""Base types shared by all exporters."""

from __future__ import annotations

import json
import logging
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional

from drawables.schema import DrawablesOutput, ExportArgumentError, TemplateError

logger = logging.getLogger(__name__)

# Recognized placeholder names; anything else in angle brackets is literal
PLACEHOLDERS = ("drawables", "width", "height", "group", "inventoryIcon")

_TOKEN_RE = re.compile(r"<(" + "|".join(PLACEHOLDERS) + r")>")

_OMIT = object()


class DocumentFormat(Enum):
    """Output format for documents."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"


def dump_document(data: dict, format: DocumentFormat = DocumentFormat.JSON_PRETTY) -> str:
    """Serialize a document, indented or compact."""
    if format == DocumentFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))


class Exporter(ABC):
    """
    Binds a generated output into an item document.

    Subclasses implement ``skeleton``; binding, document and command
    rendering are shared.
    """

    def __init__(self, output: DrawablesOutput, icon: Optional[str] = None) -> None:
        self.output = output
        self.icon = icon

    @abstractmethod
    def skeleton(self) -> dict:
        """The unbound document; must not be mutated by callers."""

    def values(self, group: Optional[str] = None, include_icon: bool = False) -> dict:
        """
        Placeholder values for this output.

        Raises:
            ExportArgumentError: If an icon is requested but none was given
        """
        if include_icon and self.icon is None:
            raise ExportArgumentError(
                "An inventory icon was requested but none was generated",
                value="inventoryIcon",
            )

        parts = [d.to_dict() for d in self.output.directives]
        if self.output.canvas is not None:
            parts.insert(0, self.output.canvas.to_dict())

        return {
            "drawables": parts,
            "width": self.output.width,
            "height": self.output.height,
            "group": group,
            "inventoryIcon": self.icon if include_icon else None,
        }

    def descriptor(self, group: Optional[str] = None, include_icon: bool = False) -> dict:
        """Build the item descriptor document."""
        return bind(self.skeleton(), self.values(group, include_icon))

    def to_document(
        self,
        group: Optional[str] = None,
        include_icon: bool = False,
        *,
        format: DocumentFormat = DocumentFormat.JSON_PRETTY,
    ) -> str:
        """Serialize the descriptor as a JSON document."""
        return dump_document(self.descriptor(group, include_icon), format)

    def to_command(self, group: Optional[str] = None, include_icon: bool = False) -> str:
        """
        Render a spawn command for the item; always compact.

        Format: ``/spawnitem <name> <count> '<parameters>'``

        Raises:
            TemplateError: If the descriptor has no string ``name``
        """
        doc = self.descriptor(group, include_icon)
        name = doc.get("name")
        if not isinstance(name, str) or not name:
            raise TemplateError(
                "Template has no item 'name'; cannot build a command", value=name
            )

        count = doc.get("count", 1)
        # Single quotes would end the argument; \u0027 is the same JSON string
        parameters = dump_document(doc.get("parameters", {}), DocumentFormat.JSON)
        parameters = parameters.replace("'", "\\u0027")
        command = f"/spawnitem {name} {count} '{parameters}'"
        logger.debug(f"Built command for '{name}' ({len(command)} characters)")
        return command


# =============================================================================
# Placeholder Binding
# =============================================================================


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def _bind_string(text: str, values: dict) -> Any:
    whole = _TOKEN_RE.fullmatch(text)
    if whole:
        value = values.get(whole.group(1))
        return _OMIT if value is None else value
    return _TOKEN_RE.sub(lambda m: _as_text(values.get(m.group(1))), text)


def _bind_node(node: Any, values: dict) -> Any:
    if isinstance(node, dict):
        bound = {}
        for key, child in node.items():
            value = _bind_node(child, values)
            if value is not _OMIT:
                bound[key] = value
        return bound
    if isinstance(node, list):
        items = [_bind_node(child, values) for child in node]
        return [None if item is _OMIT else item for item in items]
    if isinstance(node, str):
        return _bind_string(node, values)
    return node


def bind(skeleton: dict, values: dict) -> dict:
    """
    Substitute placeholders into a document skeleton.

    A string that is exactly ``<token>`` is replaced by the typed value
    (a list, number or string). Tokens inside longer strings are replaced
    textually. Optional values that are None drop their object key, become
    null inside arrays, and render as empty text inside strings.
    Unrecognized tokens are left untouched. The skeleton is not modified.
    """
    return _bind_node(skeleton, values)
