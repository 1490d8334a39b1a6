# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Describe one color in every representation.

This is the primary entry point for callers that want the full picture
(hex, RGB, HSB, HSL, CMYK and contrast pick) in one call.
"""

from __future__ import annotations

from swatchkit.convert.colorspace import (
    hex_to_rgb,
    normalize_hex,
    rgb_to_cmyk,
    rgb_to_hsb,
    rgb_to_hsl,
)
from swatchkit.convert.contrast import get_contrast_color
from swatchkit.schema import ColorSummary


def describe(color: str) -> ColorSummary:
    """
    Build a ColorSummary for a hex color.

    Args:
        color: Hex color, optionally '#'-prefixed, 3 or 6 digits, any case

    Returns:
        ColorSummary with the normalized hex and all derived values

    Raises:
        InvalidInput: If the normalized color is not 6 hex digits

    Example:
        >>> s = describe("#f00")
        >>> s.hex, s.rgb, s.contrast
        ('FF0000', RGB(r=255, g=0, b=0), '000000')
    """
    hex_color = normalize_hex(color)
    # Validate before converting; the conversions themselves are lenient
    contrast = get_contrast_color(hex_color)
    rgb = hex_to_rgb(hex_color)

    return ColorSummary(
        hex=hex_color,
        rgb=rgb,
        hsb=rgb_to_hsb(rgb),
        hsl=rgb_to_hsl(rgb),
        cmyk=rgb_to_cmyk(rgb),
        contrast=contrast,
    )
