# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Swatchkit -- Color conversions, contrast picks and palette presets.

Converts colors between hex, RGB, HSB, HSL and CMYK, picks a legible
black or white text color for any background, and ships a catalog of
tonal ramps.

Quick start::

    from swatchkit import describe, get_contrast_color

    s = describe("#3b82f6")
    s.hsb                          # HSB(h=217.2..., s=76.0..., b=96.4...)
    get_contrast_color("1E293B")   # 'ffffff'
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from swatchkit.convert import (
    InvalidInput,
    describe,
    get_contrast_color,
    hex_to_rgb,
    normalize_hex,
    rgb_to_hex,
)
from swatchkit.presets import PRESETS, get_preset
from swatchkit.schema import (
    CMYK,
    HSB,
    HSL,
    RGB,
    ColorSummary,
    Palette,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "describe",
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "get_contrast_color",
    "InvalidInput",
    # Types (commonly needed)
    "RGB",
    "HSB",
    "HSL",
    "CMYK",
    "Palette",
    "ColorSummary",
    # Catalog
    "PRESETS",
    "get_preset",
    # Version
    "__version__",
]
