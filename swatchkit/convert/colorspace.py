# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion hub: every representation passes through RGB.

    Hex ↔ RGB ↔ HSB
          RGB → HSL
          RGB ↔ CMYK

Conversions are lenient: inputs are not validated and malformed values
produce well-defined garbage instead of exceptions. Callers that need a
validation gate use swatchkit.convert.contrast.get_contrast_color or
swatchkit.convert.summary.describe.

Scalar functions operate on the schema types. The *_array variants are
vectorized NumPy equivalents for whole ramps.
"""

from __future__ import annotations

import math
import re
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from swatchkit.schema import CMYK, HSB, HSL, RGB


_HEX_PAIR_RE = re.compile(r"[0-9A-Fa-f]{2}")


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, halves up; NaN and infinities become 0."""
    if not math.isfinite(value):
        return 0
    return int(math.floor(value + 0.5))


def _to_int(value) -> int:
    """Truncate a channel to int; NaN and infinities become 0."""
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return int(value)


# =============================================================================
# Hex ↔ RGB
# =============================================================================


def normalize_hex(color: str) -> str:
    """
    Normalize a hex color to 6 uppercase digits without '#'.

    Accepts an optional leading '#' and 3-digit shorthand ("abc" → "AABBCC").
    Characters are not checked: anything that is not 3 digits long after
    stripping '#' is only uppercased.
    """
    normalized = color[1:] if color.startswith("#") else color

    if len(normalized) == 3:
        normalized = "".join(ch * 2 for ch in normalized)

    return normalized.upper()


def _parse_channel(pair: str) -> int:
    """Parse a 2-digit hex pair, 0 for anything unparseable."""
    if not _HEX_PAIR_RE.fullmatch(pair):
        return 0
    return int(pair, 16)


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Convert a 6-digit hex string (no '#') to RGB.

    The string is split into three 2-digit pairs. Normalizing first is the
    caller's job; an unparseable pair yields 0 for that channel.
    """
    return RGB(
        r=_parse_channel(hex_color[0:2]),
        g=_parse_channel(hex_color[2:4]),
        b=_parse_channel(hex_color[4:6]),
    )


def rgb_to_hex(rgb: RGB) -> str:
    """
    Convert RGB to a 6-digit lowercase hex string without '#'.

    Channels are packed behind a sentinel bit (1 << 24) which is dropped
    after formatting. Channels are truncated with int(), NaN and infinities
    become 0. Values outside [0, 255] bleed into neighbouring channels
    instead of raising.
    """
    packed = 1 << 24 | _to_int(rgb.r) << 16 | _to_int(rgb.g) << 8 | _to_int(rgb.b)
    return format(packed, "x")[1:]


def hex_to_rgb_array(colors: Sequence[str]) -> NDArray[np.uint8]:
    """
    Convert a sequence of 6-digit hex strings to an (N, 3) uint8 array.

    Entries go through hex_to_rgb unchanged, so they must already be
    normalized.
    """
    rows = [hex_to_rgb(c).as_tuple() for c in colors]
    return np.array(rows, dtype=np.uint8).reshape(-1, 3)


# =============================================================================
# RGB ↔ HSB
# =============================================================================


def rgb_to_hsb(rgb: RGB) -> HSB:
    """
    Convert RGB to HSB.

    Max/min chroma decomposition:
    - v = max(r, g, b), chroma = v - min(r, g, b)
    - Hue sector picked by the channel equal to v (red, then green, then blue)
    - Saturation is 0 for black, chroma / v otherwise
    """
    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255
    v = max(r, g, b)
    chroma = v - min(r, g, b)

    if chroma == 0:
        h = 0.0
    elif v == r:
        h = (g - b) / chroma
    elif v == g:
        h = 2 + (b - r) / chroma
    else:
        h = 4 + (r - g) / chroma

    return HSB(
        h=60 * (h + 6 if h < 0 else h),
        s=0.0 if v == 0 else chroma / v * 100,
        b=v * 100,
    )


def hsb_to_rgb(hsb: HSB) -> RGB:
    """
    Convert HSB to RGB.

    Each output channel n (5 for red, 3 for green, 1 for blue) is
    b * (1 - s * clamp(min(k, 4 - k, 1), 0, ∞)) with k = (n + h/60) mod 6.
    Results are scaled to [0, 255] and rounded half-up.
    """
    s = hsb.s / 100
    b = hsb.b / 100

    def channel(n: int) -> int:
        k = (n + hsb.h / 60) % 6
        value = b * (1 - s * max(0, min(k, 4 - k, 1)))
        return _round_half_up(255 * value)

    return RGB(r=channel(5), g=channel(3), b=channel(1))


def hex_to_hsb(hex_color: str) -> HSB:
    """Convert a 6-digit hex string to HSB (through RGB)."""
    return rgb_to_hsb(hex_to_rgb(hex_color))


def hsb_to_hex(hsb: HSB) -> str:
    """Convert HSB to a 6-digit lowercase hex string (through RGB)."""
    return rgb_to_hex(hsb_to_rgb(hsb))


def rgb_array_to_hsb(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """
    Vectorized rgb_to_hsb.

    Args:
        pixels: Array of shape (..., 3) with RGB values [0, 255]

    Returns:
        Array of shape (..., 3) with (H, S, B), matching rgb_to_hsb
        element-wise (same sector precedence red → green → blue)
    """
    srgb = np.asarray(pixels, dtype=np.float64) / 255
    r = srgb[..., 0]
    g = srgb[..., 1]
    b = srgb[..., 2]

    v = srgb.max(axis=-1)
    chroma = v - srgb.min(axis=-1)

    # Avoid division by zero; masked out below
    safe_chroma = np.where(chroma == 0, 1.0, chroma)
    safe_v = np.where(v == 0, 1.0, v)

    h = np.where(
        v == r,
        (g - b) / safe_chroma,
        np.where(v == g, 2 + (b - r) / safe_chroma, 4 + (r - g) / safe_chroma),
    )
    h = np.where(chroma == 0, 0.0, h)
    h = 60 * np.where(h < 0, h + 6, h)

    s = np.where(v == 0, 0.0, chroma / safe_v * 100)

    return np.stack([h, s, v * 100], axis=-1)


# =============================================================================
# RGB → HSL
# =============================================================================


def rgb_to_hsl(rgb: RGB) -> HSL:
    """
    Convert RGB to HSL.

    Hue uses the same sector selection as rgb_to_hsb and is normalized
    into [0, 360). The saturation branch is chosen on the maximum channel
    (l_max <= 0.5), not on the final lightness.
    """
    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255

    l_max = max(r, g, b)
    delta = l_max - min(r, g, b)

    if delta == 0:
        h = 0.0
    elif l_max == r:
        h = (g - b) / delta
    elif l_max == g:
        h = 2 + (b - r) / delta
    else:
        h = 4 + (r - g) / delta

    degrees = 60 * h
    if degrees < 0:
        degrees += 360

    if l_max <= 0.5:
        denominator = 2 * l_max - delta
    else:
        denominator = 2 - (2 * l_max - delta)
    # Only out-of-range channels reach a zero denominator with delta > 0
    s = 0.0 if delta == 0 or denominator == 0 else delta / denominator

    return HSL(
        h=degrees,
        s=100 * s,
        l=100 * (2 * l_max - delta) / 2,
    )


# =============================================================================
# RGB ↔ CMYK
# =============================================================================


def rgb_to_cmyk(rgb: RGB) -> CMYK:
    """
    Convert RGB to CMYK (percent).

    Pure black is special-cased to (0, 0, 0, 100). Out-of-range channels
    that push k to 1 or above get the same result, since the rescale
    denominator (1 - k) would be zero or negative.
    """
    if rgb.r == 0 and rgb.g == 0 and rgb.b == 0:
        return CMYK(c=0.0, m=0.0, y=0.0, k=100.0)

    c = 1 - rgb.r / 255
    m = 1 - rgb.g / 255
    y = 1 - rgb.b / 255

    k = min(c, m, y)
    if k >= 1:
        return CMYK(c=0.0, m=0.0, y=0.0, k=100.0)

    c = (c - k) / (1 - k)
    m = (m - k) / (1 - k)
    y = (y - k) / (1 - k)

    return CMYK(c=c * 100, m=m * 100, y=y * 100, k=k * 100)


def cmyk_to_rgb(cmyk: CMYK) -> RGB:
    """Convert CMYK (percent) to RGB, rounding half-up."""
    k = cmyk.k / 100

    def channel(value: float) -> int:
        return _round_half_up(255 * (1 - value / 100) * (1 - k))

    return RGB(r=channel(cmyk.c), g=channel(cmyk.m), b=channel(cmyk.y))
