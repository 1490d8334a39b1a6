# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Named palette catalog.

Read-only tonal ramps that callers can feed into the conversion core.
"""

from swatchkit.presets.catalog import (
    PRESETS,
    find_presets_containing,
    get_preset,
    preset_names,
)

__all__ = [
    "PRESETS",
    "get_preset",
    "preset_names",
    "find_presets_containing",
]
