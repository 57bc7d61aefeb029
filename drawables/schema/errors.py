# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""
Error taxonomy for the generation engine.

Every failure carries an ``ErrorKind`` tag and the offending value, so
callers can branch on the kind instead of on the exception class:

- VALIDATION: malformed input (ignore colour, hand offset, image, template)
- CAPACITY: a result would exceed an engine limit
- POLICY: an impossible combination of options

Errors are always raised before a result is produced.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """Category of a generation or export failure."""

    VALIDATION = "validation"
    CAPACITY = "capacity"
    POLICY = "policy"


class DrawablesError(Exception):
    """Base class for all engine errors."""

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class ValidationError(DrawablesError, ValueError):
    """Malformed caller input."""

    kind = ErrorKind.VALIDATION


class TemplateError(ValidationError):
    """A template could not be parsed as a document skeleton."""


class ExportArgumentError(ValidationError):
    """An export referenced an asset or exporter that does not exist."""


class CapacityError(DrawablesError):
    """A chain or texture span exceeds an engine limit."""

    kind = ErrorKind.CAPACITY

    def __init__(self, message: str, value: Any = None, limit: Optional[int] = None) -> None:
        super().__init__(message, value)
        self.limit = limit


class PolicyError(DrawablesError, ValueError):
    """Options that cannot be combined."""

    kind = ErrorKind.POLICY
