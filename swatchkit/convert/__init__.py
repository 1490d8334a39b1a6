# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Conversion core for Swatchkit.

Pure, stateless functions between hex, RGB, HSB, HSL and CMYK, plus the
WCAG contrast resolver. Conversions are lenient; the contrast resolver
and describe() validate their input.
"""

from swatchkit.convert.colorspace import (
    cmyk_to_rgb,
    hex_to_hsb,
    hex_to_rgb,
    hex_to_rgb_array,
    hsb_to_hex,
    hsb_to_rgb,
    normalize_hex,
    rgb_array_to_hsb,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsb,
    rgb_to_hsl,
)
from swatchkit.convert.contrast import (
    CONTRAST_CANDIDATES,
    InvalidInput,
    contrast_ratio,
    get_contrast_color,
    get_contrast_colors,
    relative_luminance,
    relative_luminance_batch,
)
from swatchkit.convert.summary import describe

__all__ = [
    # Hex
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "hex_to_rgb_array",
    # HSB
    "rgb_to_hsb",
    "hsb_to_rgb",
    "hex_to_hsb",
    "hsb_to_hex",
    "rgb_array_to_hsb",
    # HSL / CMYK
    "rgb_to_hsl",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    # Contrast (strict)
    "CONTRAST_CANDIDATES",
    "InvalidInput",
    "relative_luminance",
    "relative_luminance_batch",
    "contrast_ratio",
    "get_contrast_color",
    "get_contrast_colors",
    # Summary
    "describe",
]
