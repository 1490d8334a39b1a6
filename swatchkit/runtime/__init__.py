# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Output runtime for Swatchkit.

Turns color values into text for other systems:

1. Swatch Output -- One ColorSummary as JSON or natural text
2. Palette Block -- A whole ramp as CSS custom properties, JSON or Markdown
"""

from swatchkit.runtime.serializers import (
    BlockFormat,
    SerializerFormat,
    to_palette_block,
    to_swatch_output,
)

__all__ = [
    "to_swatch_output",
    "to_palette_block",
    "SerializerFormat",
    "BlockFormat",
]
