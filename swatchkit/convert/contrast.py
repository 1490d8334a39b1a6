# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
WCAG 2.x contrast utilities.

Relative luminance:
    Each sRGB channel c in [0, 1] is linearized with
    - c / 12.92                       for c <= 0.03928
    - ((c + 0.055) / 1.055) ^ 2.4     otherwise
    then weighted 0.2126 R + 0.7152 G + 0.0722 B.

Contrast ratio:
    (lighter + 0.05) / (darker + 0.05), from 1.0 (identical) to 21.0
    (black on white).

Unlike the conversions in swatchkit.convert.colorspace, the contrast
resolver validates its input strictly and raises InvalidInput.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Sequence

import numpy as np
from numpy.typing import NDArray

from swatchkit.convert.colorspace import hex_to_rgb, hex_to_rgb_array

logger = logging.getLogger(__name__)


# Candidates in evaluation order; on equal ratios the earlier one wins
CONTRAST_CANDIDATES: tuple[str, ...] = ("ffffff", "000000")

_HEX6_RE = re.compile(r"[0-9a-f]{6}", re.IGNORECASE)

_LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


class InvalidInput(ValueError):
    """Raised when a color handed to the strict path is not 6 hex digits."""


def _check_hex6(color: str, parameter: str = "reference_color") -> None:
    if not isinstance(color, str) or not _HEX6_RE.fullmatch(color):
        raise InvalidInput(
            f"The parameter '{parameter}' must be a 6-digit hex color "
            f"of the format AAbb00, got {color!r}"
        )


# =============================================================================
# Luminance
# =============================================================================


def _srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Gamma-expand sRGB values [0,1] with the WCAG 2.x threshold."""
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.03928,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


def relative_luminance(color: str) -> float:
    """
    Relative luminance of a 6-digit hex color.

    Returns:
        Luminance in [0, 1] (0 = black, 1 = white)
    """
    rgb = np.array(hex_to_rgb(color).as_tuple(), dtype=np.float64) / 255
    return float(_srgb_to_linear(rgb) @ _LUMINANCE_WEIGHTS)


def relative_luminance_batch(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """
    Vectorized relative luminance.

    Args:
        pixels: Array of shape (..., 3) with RGB values [0, 255]

    Returns:
        Array of shape (...,) with luminance values
    """
    srgb = np.asarray(pixels, dtype=np.float64) / 255
    return _srgb_to_linear(srgb) @ _LUMINANCE_WEIGHTS


# =============================================================================
# Contrast
# =============================================================================


def _ratio(
    l1: NDArray[np.float64],
    l2: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Element-wise WCAG contrast ratio between luminance arrays."""
    return (np.maximum(l1, l2) + 0.05) / (np.minimum(l1, l2) + 0.05)


def contrast_ratio(color1: str, color2: str) -> float:
    """WCAG contrast ratio between two 6-digit hex colors."""
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def get_contrast_color(
    color: str,
    *,
    candidates: Sequence[str] = CONTRAST_CANDIDATES,
) -> str:
    """
    Pick the candidate with the highest contrast ratio against a color.

    Candidates are evaluated in order and only a strictly greater ratio
    replaces the current pick, so the first candidate reaching the
    maximum wins.

    Args:
        color: Reference color, exactly 6 hex digits (no '#', any case)
        candidates: Colors to choose from (default: white, then black)

    Returns:
        The winning candidate as given ("ffffff" or "000000" by default)

    Raises:
        InvalidInput: If color or any candidate is not exactly 6 hex digits

    Example:
        >>> get_contrast_color("1E293B")
        'ffffff'
    """
    _check_hex6(color)
    candidates = tuple(candidates)
    for candidate in candidates:
        _check_hex6(candidate, "candidates")

    best_ratio = 0.0
    best = ""
    for candidate in candidates:
        ratio = contrast_ratio(candidate, color)
        if ratio > best_ratio:
            best_ratio = ratio
            best = candidate

    logger.debug("Contrast pick for %s: %s (ratio %.3f)", color, best, best_ratio)
    return best


def get_contrast_colors(
    colors: Iterable[str],
    *,
    candidates: Sequence[str] = CONTRAST_CANDIDATES,
) -> tuple[str, ...]:
    """
    Vectorized get_contrast_color for a whole ramp.

    Every entry and every candidate is validated like get_contrast_color;
    the first invalid one raises. Any iterable of colors is accepted. Ties
    resolve to the earliest candidate (argmax keeps the first maximum).

    Returns:
        One pick per input color, in input order
    """
    colors = tuple(colors)
    candidates = tuple(candidates)
    for color in colors:
        _check_hex6(color)
    for candidate in candidates:
        _check_hex6(candidate, "candidates")
    if not colors or not candidates:
        return tuple("" for _ in colors)

    luminance = relative_luminance_batch(hex_to_rgb_array(colors))
    candidate_luminance = relative_luminance_batch(hex_to_rgb_array(candidates))

    # (N, K) ratio matrix, one column per candidate
    ratios = _ratio(luminance[:, None], candidate_luminance[None, :])
    picks = np.argmax(ratios, axis=1)

    return tuple(candidates[i] for i in picks)
