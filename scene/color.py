"""Color conversion utilities.

This module provides the colour parsing and interpolation used by the sky
and the other layer renderers.

Design Note:
    These are pure functions with no pygame dependency. Malformed colour
    strings are programming errors, so parsing fails fast with
    ColorParseError instead of returning a placeholder.
"""

import math
import re
from typing import Tuple, Union

from scene.exceptions import ColorParseError

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]
ColorLike = Union[str, RGB]

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def hex_to_rgb(hex_color: str) -> RGB:
    """Parse a ``#RRGGBB`` (or ``RRGGBB``) string into an RGB tuple.

    Args:
        hex_color: Six-digit hex colour, case-insensitive, optional leading '#'

    Returns:
        Tuple of (R, G, B) values, each 0-255

    Raises:
        ColorParseError: If the string is not a six-digit hex colour

    Example:
        >>> hex_to_rgb("#87CEEB")
        (135, 206, 235)
    """
    match = _HEX_PATTERN.match(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        raise ColorParseError(f"Not a #RRGGBB colour: {hex_color!r}")
    return tuple(int(part, 16) for part in match.groups())  # type: ignore[return-value]


def to_rgb(color: ColorLike) -> RGB:
    """Accept either a hex string or an RGB tuple."""
    if isinstance(color, str):
        return hex_to_rgb(color)
    if len(color) != 3:
        raise ColorParseError(f"Expected an RGB triple, got {color!r}")
    return (int(color[0]), int(color[1]), int(color[2]))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def lerp_color(start: ColorLike, end: ColorLike, factor: float) -> RGB:
    """Linearly interpolate between two colours channel by channel.

    Channels are rounded half-up, so factor 0 returns ``start`` and
    factor 1 returns ``end`` exactly.

    Args:
        start: Colour at factor 0.0
        end: Colour at factor 1.0
        factor: Interpolation factor, normally 0.0 to 1.0

    Returns:
        Interpolated (R, G, B) tuple
    """
    r1, g1, b1 = to_rgb(start)
    r2, g2, b2 = to_rgb(end)
    return (
        _round_half_up(r1 + (r2 - r1) * factor),
        _round_half_up(g1 + (g2 - g1) * factor),
        _round_half_up(b1 + (b2 - b1) * factor),
    )


def with_alpha(color: ColorLike, alpha: float) -> RGBA:
    """Attach a 0.0-1.0 alpha (clamped) to a colour as a 0-255 channel."""
    r, g, b = to_rgb(color)
    a = max(0.0, min(1.0, alpha))
    return (r, g, b, _round_half_up(a * 255))
