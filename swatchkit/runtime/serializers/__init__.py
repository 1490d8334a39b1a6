# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Serializers for swatches and palettes.

All serializers preserve the values they are given -- no conversion
beyond display rounding.
"""

from swatchkit.runtime.serializers.base import SerializerFormat
from swatchkit.runtime.serializers.block import BlockFormat, palette_slug, to_palette_block
from swatchkit.runtime.serializers.swatch import to_swatch_output

__all__ = [
    "SerializerFormat",
    "BlockFormat",
    "palette_slug",
    "to_swatch_output",
    "to_palette_block",
]
