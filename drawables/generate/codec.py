# Copyright (c) 2026 Drawables Generator
# SPDX-License-Identifier: MIT

"""
Directive codec.

Encodes regions and pixel sets as chained compositing operations. Every
chain starts from a texture path and applies ``?``-separated operations
left to right:

    ?<op>=<v1>;<v2>...        parameterized operation
    ?replace;<old>=<new>;...  colour substitution pairs

Region directive::

    /assetmissing.png?crop=0;0;1;1?multiply=0000?replace;00000000=ffffff
        ?scalenearest=<W>;<H>?replace;ffffff=<HEX>

The prefix reduces the missing-asset texture to one opaque white pixel,
which is scaled to the region size and recoloured. A pure white region
has no trailing replace unless white replacement is requested.

Keyed (single texture) directive::

    <BASE>?scalenearest=<W>;<H>?blendmult=/drawables/keys.png;0;0
        [?multiply=ffffff00]?replace;<KEY>=<HEX>;...[?scalenearest=<S>]

The white base is scaled to the image size and multiplied by the keys
texture, which holds the colour ``xx01yy01`` at column xx, row yy (rows
counted from the top, two hex digits each), so every pixel can be
recoloured on its own. The keys texture is a mod asset; write it with
``drawables.generate.keys.build_keys_texture``.

With fade, keys are multiplied to alpha 0 first and every replaced key
ends in ``00``; unreplaced keys then vanish. Without fade they stay at
alpha 1, an invisible filler.

HEX is six lowercase digits for opaque colours, eight otherwise.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from drawables.schema import (
    WHITE,
    CapacityError,
    Directive,
    IgnoreColor,
    Region,
    Rgba,
    ValidationError,
)


BASE_TEXTURE = "/assetmissing.png?crop=0;0;1;1?multiply=0000?replace;00000000=ffffff"
# Mod asset path of the texture written by build_keys_texture
KEYED_TEXTURE = "/drawables/keys.png"

# Stand-in for pure white, so palette swaps on ffffff leave it untouched
WHITE_SUBSTITUTE: Rgba = (254, 254, 254, 255)

# Neutral filler for replaced blanks: white at alpha 1
FILLER_COLOR: Rgba = (255, 255, 255, 1)

MAX_KEYED_SPAN = 256  # Two hex digits per key axis
DEFAULT_SOURCE_SIZE = 64
MAX_CHAIN_LENGTH = 16384  # Replace pairs in one chain

_HEX_RE = re.compile(r"[0-9a-fA-F]{6}(?:[0-9a-fA-F]{2})?")


# =============================================================================
# Colors
# =============================================================================


def parse_color(text: str) -> IgnoreColor:
    """
    Parse a 6 or 8 digit hex colour.

    Six digits give an opaque colour whose alpha is not significant when
    matching; eight digits include alpha and match it exactly.

    Raises:
        ValidationError: If ``text`` is not 6 or 8 hex digits
    """
    cleaned = text.strip().lstrip("#")
    if not _HEX_RE.fullmatch(cleaned):
        raise ValidationError(
            f"Invalid color '{text}': expected hexadecimal RRGGBB or RRGGBBAA",
            value=text,
        )
    channels = [int(cleaned[i:i + 2], 16) for i in range(0, len(cleaned), 2)]
    if len(channels) == 3:
        return IgnoreColor(color=(*channels, 255), match_alpha=False)
    return IgnoreColor(color=tuple(channels), match_alpha=True)


def parse_ignore_color(
    value: Optional[str | IgnoreColor],
) -> Optional[IgnoreColor]:
    """Normalize an ignore colour option; None or blank means no ignore colour."""
    if value is None or isinstance(value, IgnoreColor):
        return value
    if not value.strip():
        return None
    return parse_color(value)


def format_color(color: Rgba) -> str:
    """Format as lowercase hex, dropping alpha when fully opaque."""
    r, g, b, a = color
    if a == 255:
        return f"{r:02x}{g:02x}{b:02x}"
    return f"{r:02x}{g:02x}{b:02x}{a:02x}"


# =============================================================================
# Region Directives
# =============================================================================


def recolor_target(color: Rgba, replace_white: bool = False) -> Optional[Rgba]:
    """The colour the white base must become, or None for pass-through."""
    if tuple(color) == WHITE:
        return WHITE_SUBSTITUTE if replace_white else None
    return tuple(color)


def encode_region(
    region: Region,
    hand_offset: tuple[int, int] = (0, 0),
    *,
    image_height: int,
    replace_white: bool = False,
) -> Directive:
    """
    Encode one region as a positioned directive.

    Args:
        region: Region in image coordinates
        hand_offset: (hand_x, hand_y) origin; y points up from the bottom row
        image_height: Source height, used to flip the y axis
        replace_white: Recolour pure white to ``WHITE_SUBSTITUTE``

    Returns:
        Directive whose offset is measured from the hand to the region's
        bottom-left corner, in engine units
    """
    hand_x, hand_y = hand_offset
    target = recolor_target(region.color, replace_white)

    text = f"{BASE_TEXTURE}?scalenearest={region.width};{region.height}"
    if target is not None:
        text += f"?replace;ffffff={format_color(target)}"

    return Directive(
        text=text,
        x=(region.x - hand_x) * 2,
        y=(image_height - region.bottom - hand_y) * 2,
        width=region.width,
        height=region.height,
        color=target,
    )


def encode_canvas(
    width: int,
    height: int,
    hand_offset: tuple[int, int] = (0, 0),
) -> Directive:
    """Encode the filler rectangle covering a whole image."""
    hand_x, hand_y = hand_offset
    text = (
        f"{BASE_TEXTURE}?scalenearest={width};{height}"
        f"?replace;ffffff={format_color(FILLER_COLOR)}"
    )
    return Directive(
        text=text,
        x=-hand_x * 2,
        y=-hand_y * 2,
        width=width,
        height=height,
        color=FILLER_COLOR,
    )


# =============================================================================
# Keyed Directives
# =============================================================================


def keyed_source(width: int, height: int) -> str:
    """The unrecoloured keys, sized to the image, drawn from the base texture."""
    return f"{BASE_TEXTURE}?scalenearest={width};{height}?blendmult={KEYED_TEXTURE};0;0"


def keyed_key(x: int, y: int, fade: bool = False) -> str:
    """Key colour of the keys texture at (x, y), after the optional fade."""
    return f"{x:02x}01{y:02x}{'00' if fade else '01'}"


def encode_keyed(
    cells: Iterable[tuple[int, int, Rgba]],
    width: int,
    height: int,
    *,
    fade: bool = False,
    scale: int = 1,
) -> str:
    """
    Encode pixels as one keyed single-texture chain.

    Args:
        cells: (x, y, color) in image coordinates; order is preserved
        width: Image width, at most the keys texture size
        height: Image height, at most the keys texture size
        fade: Make unreplaced keys fully transparent
        scale: Nearest-neighbour upscale factor applied last

    Returns:
        Directive text
    """
    ops = [keyed_source(width, height)]
    if fade:
        ops.append("?multiply=ffffff00")

    pairs = [f"{keyed_key(x, y, fade)}={format_color(color)}" for x, y, color in cells]
    if pairs:
        ops.append("?replace;" + ";".join(pairs))

    if scale != 1:
        ops.append(f"?scalenearest={scale}")

    return "".join(ops)


def check_keyed_capacity(
    width: int,
    height: int,
    entries: int,
    *,
    max_source_size: int,
    max_chain_length: int = MAX_CHAIN_LENGTH,
) -> None:
    """
    Verify a keyed chain fits the engine limits.

    Raises:
        ValidationError: If ``max_source_size`` is outside 1..MAX_KEYED_SPAN
        CapacityError: If the image is larger than the source texture on
            either axis, or the chain needs more than ``max_chain_length``
            replace pairs
    """
    if not 1 <= max_source_size <= MAX_KEYED_SPAN:
        raise ValidationError(
            f"Source texture size must be 1-{MAX_KEYED_SPAN}, got {max_source_size}",
            value=max_source_size,
        )
    if width > max_source_size or height > max_source_size:
        raise CapacityError(
            f"Image ({width}x{height}) exceeds the source texture size "
            f"of {max_source_size}x{max_source_size}",
            value=(width, height),
            limit=max_source_size,
        )
    if entries > max_chain_length:
        raise CapacityError(
            f"Directive chain needs {entries} replacements, "
            f"limit is {max_chain_length}",
            value=entries,
            limit=max_chain_length,
        )


# =============================================================================
# Inspection
# =============================================================================


def split_operations(text: str) -> tuple[str, list[tuple[str, list[str]]]]:
    """
    Split a chain into its texture path and operations.

    Example:
        >>> split_operations("/a.png?scalenearest=2;3?replace;ffffff=ff00ff")
        ('/a.png', [('scalenearest', ['2', '3']), ('replace', ['ffffff=ff00ff'])])
    """
    source, *raw_ops = text.split("?")
    ops: list[tuple[str, list[str]]] = []
    for raw in raw_ops:
        eq, semi = raw.find("="), raw.find(";")
        if eq != -1 and (semi == -1 or eq < semi):
            name, _, args = raw.partition("=")
        else:
            name, _, args = raw.partition(";")
        ops.append((name, args.split(";") if args else []))
    return source, ops
