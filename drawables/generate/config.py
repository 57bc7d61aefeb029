# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""
Generation settings.

Bundles the options of one generation request and parses them from the
text a caller collects (hand offsets and ignore colour typed by a user).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from drawables.schema import PIXEL_LIMIT, PolicyError, ValidationError
from drawables.generate.codec import DEFAULT_SOURCE_SIZE, parse_ignore_color


class RenderMode(Enum):
    """How blanks and scale are handled for single-texture output."""

    PLAIN = "plain"  # Blanks filled, 1:1 scale
    SCALE = "scale"  # One 2× upscaled directive
    FADE = "fade"    # Blanks fully transparent


def resolve_mode(scale: bool, fade: bool) -> RenderMode:
    """
    Pick the render mode for a pair of flags.

    Raises:
        PolicyError: If both scale and fade are requested
    """
    if scale and fade:
        raise PolicyError(
            "Scale and fade cannot be combined; choose one", value=(scale, fade)
        )
    if scale:
        return RenderMode.SCALE
    if fade:
        return RenderMode.FADE
    return RenderMode.PLAIN


def parse_offset(text: str) -> int:
    """
    Parse a hand offset typed as text; blank means 0.

    Raises:
        ValidationError: If the text is not a whole number
    """
    cleaned = text.strip()
    if not cleaned:
        return 0
    try:
        return int(cleaned)
    except ValueError as e:
        raise ValidationError(
            f"Could not convert hand offset '{text}' to a number", value=text
        ) from e


@dataclass(frozen=True)
class GenerationConfig:
    """Options for one generation request."""

    # Origin pixel; y counts up from the bottom row
    hand_x: int = 0
    hand_y: int = 0

    # RRGGBB or RRGGBBAA; None or blank for no ignore colour
    ignore_color: Optional[str] = None

    replace_white: bool = False
    replace_blank: bool = False

    # Mutually exclusive
    scale: bool = False
    fade: bool = False

    # Largest keyed texture span per axis for single-texture output
    max_source_size: int = DEFAULT_SOURCE_SIZE

    # Soft ceiling; above it generation logs a warning
    pixel_limit: int = PIXEL_LIMIT

    def __post_init__(self) -> None:
        """Reject impossible option combinations and bad colours early."""
        resolve_mode(self.scale, self.fade)
        parse_ignore_color(self.ignore_color)

    @property
    def mode(self) -> RenderMode:
        return resolve_mode(self.scale, self.fade)

    @property
    def hand_offset(self) -> tuple[int, int]:
        return (self.hand_x, self.hand_y)

    @classmethod
    def from_strings(
        cls,
        hand_x: str,
        hand_y: str,
        ignore_color: str = "",
        **options,
    ) -> GenerationConfig:
        """Build a config from text fields; remaining options pass through."""
        return cls(
            hand_x=parse_offset(hand_x),
            hand_y=parse_offset(hand_y),
            ignore_color=ignore_color or None,
            **options,
        )
