# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""
Template-driven exporter.

Binds a generated output into a caller-supplied JSON skeleton. Templates
are passed by value; loading them from storage is the caller's concern.

Recognized placeholders::

    "<drawables>"      list of {"image": ..., "position": [x, y]} parts
    "<width>"          source width in pixels
    "<height>"         source height in pixels
    "<group>"          optional group tag
    "<inventoryIcon>"  optional inventory icon directive

Example template::

    {
      "name": "mydrawable",
      "count": 1,
      "parameters": {
        "shortdescription": "Drawable <width>x<height>",
        "inventoryIcon": "<inventoryIcon>",
        "drawables": "<drawables>"
      }
    }
"""

from __future__ import annotations

import json
from typing import Optional

from drawables.schema import DrawablesOutput, TemplateError
from drawables.runtime.exporters.base import Exporter

_EXCERPT_RADIUS = 20


def parse_template(text: str) -> dict:
    """
    Parse and validate a template document.

    Raises:
        TemplateError: If the text is not JSON or not a JSON object; the
            message names the position and nearby content
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        start = max(0, e.pos - _EXCERPT_RADIUS)
        excerpt = e.doc[start:e.pos + _EXCERPT_RADIUS]
        raise TemplateError(
            f"The template is not valid JSON ({e.msg} at line {e.lineno} "
            f"column {e.colno}, near '{excerpt}')",
            value=excerpt,
        ) from e

    if not isinstance(document, dict):
        raise TemplateError(
            f"The template must be a JSON object, got {type(document).__name__}",
            value=type(document).__name__,
        )
    return document


class TemplateExporter(Exporter):
    """Exporter over a caller-supplied skeleton."""

    def __init__(
        self,
        output: DrawablesOutput,
        template: str,
        icon: Optional[str] = None,
    ) -> None:
        super().__init__(output, icon)
        self._skeleton = parse_template(template)

    def skeleton(self) -> dict:
        return self._skeleton
