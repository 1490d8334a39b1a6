# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Schema definitions for color values.

All types in this module are immutable (frozen dataclasses).
Conversions never mutate their input; they return new values.
"""

from swatchkit.schema.color_values import (
    CMYK,
    HSB,
    HSL,
    RGB,
    ColorSummary,
    Palette,
)

__all__ = [
    # Channel types
    "RGB",
    "HSB",
    "HSL",
    "CMYK",
    # Catalog record
    "Palette",
    # Every representation of one color
    "ColorSummary",
]
