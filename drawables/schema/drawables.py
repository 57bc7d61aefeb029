# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""
Drawables schema: the values that flow through the generation pipeline.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same image and options → equal values
- Engine-shaped: Offsets are stored in the engine's half-pixel units

Coordinate systems:
    Image coordinates have their origin at the top-left pixel with y
    pointing down. Directive offsets are relative to the hand position,
    with y pointing up, and are doubled (one source pixel spans two
    engine units). Offsets are therefore always even.

        image (x, y)              directive offset
        ┌──────────────→ x        ↑ y
        │ (0,0)                   │
        │                         │   hand
        ↓ y                       └───●──────→ x
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


# =============================================================================
# Limits
# =============================================================================

# Images above this many pixels are accepted but callers should confirm
# intent first; the engine itself has no hard limit.
PIXEL_LIMIT = 32768


Rgba = tuple[int, int, int, int]

WHITE: Rgba = (255, 255, 255, 255)
TRANSPARENT: Rgba = (0, 0, 0, 0)


def _check_rgba(color: Rgba) -> None:
    if len(color) != 4 or any(not 0 <= c <= 255 for c in color):
        raise ValueError(f"Color must be four channels in 0-255, got {color}")


# =============================================================================
# Pixel Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class Pixel:
    """
    A single source pixel.

    Attributes:
        x: Column, 0 at the left edge
        y: Row, 0 at the top edge
        color: RGBA channels, 0-255 each
    """
    x: int
    y: int
    color: Rgba

    def __post_init__(self) -> None:
        _check_rgba(self.color)


@dataclass(frozen=True, slots=True)
class IgnoreColor:
    """
    A colour whose pixels are treated as holes.

    Attributes:
        color: The RGBA value to skip
        match_alpha: If False, only RGB is compared (parsed from 6 hex
            digits); if True, alpha must match too (8 hex digits)
    """
    color: Rgba
    match_alpha: bool = False

    def __post_init__(self) -> None:
        _check_rgba(self.color)

    def matches(self, color: Rgba) -> bool:
        """True if ``color`` should be skipped."""
        if self.match_alpha:
            return tuple(color) == self.color
        return tuple(color[:3]) == self.color[:3]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"color": list(self.color), "match_alpha": self.match_alpha}


# =============================================================================
# Region Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class Region:
    """
    An axis-aligned rectangle of source pixels sharing one colour.

    Attributes:
        x: Left column (image coordinates)
        y: Top row (image coordinates)
        width: Columns covered, at least 1
        height: Rows covered, at least 1
        color: The shared RGBA colour
    """
    x: int
    y: int
    width: int
    height: int
    color: Rgba

    def __post_init__(self) -> None:
        """Validate region geometry."""
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Region origin must be non-negative, got ({self.x}, {self.y})")
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Region must cover at least one pixel, got {self.width}x{self.height}"
            )
        _check_rgba(self.color)

    @property
    def right(self) -> int:
        """Exclusive right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Exclusive bottom edge."""
        return self.y + self.height

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def pixels(self) -> Iterator[Pixel]:
        """Yield covered pixels in row-major order."""
        for y in range(self.y, self.bottom):
            for x in range(self.x, self.right):
                yield Pixel(x, y, self.color)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "color": list(self.color),
        }


# =============================================================================
# Directive Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class Directive:
    """
    One chained compositing directive and where to draw it.

    Attributes:
        text: The operation chain evaluated by the renderer
        x: Horizontal offset from the hand position, engine units (even)
        y: Vertical offset from the hand position, engine units (even)
        width: Source pixels covered horizontally
        height: Source pixels covered vertically
        color: Recolour target, or None when the white base passes through
        fade: True if uncovered texture pixels render fully transparent
    """
    text: str
    x: int = 0
    y: int = 0
    width: int = 1
    height: int = 1
    color: Optional[Rgba] = None
    fade: bool = False

    def __post_init__(self) -> None:
        """Validate the half-pixel offset invariant."""
        if self.x % 2 or self.y % 2:
            raise ValueError(
                f"Directive offsets must be even engine units, got ({self.x}, {self.y})"
            )
        if not self.text:
            raise ValueError("Directive text cannot be empty")

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def to_dict(self) -> dict:
        """Serialize to the part shape used by exporters."""
        return {"image": self.text, "position": [self.x, self.y]}


@dataclass(frozen=True, slots=True)
class DrawablesOutput:
    """
    The positioned directive grid produced by one generation call.

    For regular output the grid has one cell per source pixel, rows
    top-down; a cell holds the directive of the region anchored (top-left)
    at that pixel, or None. Scaled output holds a single directive in a
    1×1 grid.

    Attributes:
        grid: Rows of optional directives
        width: Source image width in pixels
        height: Source image height in pixels
        hand_x: Hand origin column used for offsets
        hand_y: Hand origin row used for offsets (y up)
        canvas: Filler directive drawn under everything, when blanks are
            replaced; None when blanks fade
        scaled: True for output of ``generate_scaled``
    """
    grid: tuple[tuple[Optional[Directive], ...], ...]
    width: int
    height: int
    hand_x: int = 0
    hand_y: int = 0
    canvas: Optional[Directive] = None
    scaled: bool = False

    def __post_init__(self) -> None:
        """Validate grid shape against the image size."""
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        rows, cols = (1, 1) if self.scaled else (self.height, self.width)
        if len(self.grid) != rows or any(len(row) != cols for row in self.grid):
            raise ValueError(f"Grid must be {cols}x{rows} cells")

    @property
    def directives(self) -> tuple[Directive, ...]:
        """Non-empty cells in row-major order."""
        return tuple(cell for row in self.grid for cell in row if cell is not None)

    @property
    def is_empty(self) -> bool:
        return not self.directives

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def exceeds_pixel_limit(self) -> bool:
        """True if the source image is above ``PIXEL_LIMIT``."""
        return self.pixel_count > PIXEL_LIMIT

    @property
    def replace_blank(self) -> bool:
        """True if blanks were filled instead of faded."""
        return self.canvas is not None

    def cells(self) -> Iterator[tuple[int, int, Directive]]:
        """Yield ``(x, y, directive)`` for every non-empty cell."""
        for y, row in enumerate(self.grid):
            for x, cell in enumerate(row):
                if cell is not None:
                    yield x, y, cell

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "hand": [self.hand_x, self.hand_y],
            "scaled": self.scaled,
            "canvas": self.canvas.to_dict() if self.canvas is not None else None,
            "directives": [d.to_dict() for d in self.directives],
        }
