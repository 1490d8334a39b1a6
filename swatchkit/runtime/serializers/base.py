# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

import math
from enum import Enum


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"
    NATURAL = "natural"


def round_channel(value: float, precision: int):
    """Round a channel for display, halves up; precision 0 yields an int."""
    if precision <= 0:
        return int(math.floor(value + 0.5))
    scale = 10 ** precision
    return math.floor(value * scale + 0.5) / scale


def round_hue(value: float, precision: int):
    """Round a hue for display, wrapped into [0, 360)."""
    return round_channel(value, precision) % 360
