# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Swatch serializer.

Formats a ColorSummary for display or transport: compact JSON for
tools and APIs, or a short natural-language block for humans.
"""

from __future__ import annotations

import json

from swatchkit.runtime.serializers.base import (
    SerializerFormat,
    round_channel,
    round_hue,
)
from swatchkit.schema import ColorSummary


def to_swatch_output(
    summary: ColorSummary,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    precision: int = 0,
    preamble: bool = True,
) -> str:
    """Serialize a ColorSummary.

    Args:
        summary: The ColorSummary to serialize.
        format: JSON, JSON_PRETTY or NATURAL.
        precision: Decimal places for HSB/HSL/CMYK channels. 0 rounds
            to integers.
        preamble: NATURAL only. Include the heading line.

    Returns:
        Serialized string.

    Example (JSON)::

        {"hex":"#FF0000","rgb":{"r":255,"g":0,"b":0},
         "hsb":{"h":0,"s":100,"b":100},"hsl":{"h":0,"s":100,"l":50},
         "cmyk":{"c":0,"m":100,"y":100,"k":0},"contrast":"#000000"}

    Example (NATURAL)::

        ## Swatch #FF0000

        HEX   #FF0000
        RGB   255, 0, 0
        HSB   0°, 100%, 100%
        HSL   0°, 100%, 50%
        CMYK  0%, 100%, 100%, 0%
        Text  #000000
    """
    if format == SerializerFormat.NATURAL:
        return _to_natural(summary, precision, preamble)

    data = _build_swatch_data(summary, precision)
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def _build_swatch_data(summary: ColorSummary, precision: int) -> dict:
    def rounded(values: dict) -> dict:
        return {
            k: round_hue(v, precision) if k == "h" else round_channel(v, precision)
            for k, v in values.items()
        }

    return {
        "hex": f"#{summary.hex}",
        "rgb": summary.rgb.to_dict(),
        "hsb": rounded(summary.hsb.to_dict()),
        "hsl": rounded(summary.hsl.to_dict()),
        "cmyk": rounded(summary.cmyk.to_dict()),
        "contrast": f"#{summary.contrast.upper()}",
    }


def _to_natural(summary: ColorSummary, precision: int, preamble: bool) -> str:
    """Generate natural language representation."""
    def fmt(value: float) -> str:
        return str(round_channel(value, precision))

    def fmt_hue(value: float) -> str:
        return str(round_hue(value, precision))

    hsb, hsl, cmyk = summary.hsb, summary.hsl, summary.cmyk
    lines: list[str] = []

    if preamble:
        lines.extend([f"## Swatch #{summary.hex}", ""])

    lines.extend([
        f"HEX   #{summary.hex}",
        f"RGB   {summary.rgb.r}, {summary.rgb.g}, {summary.rgb.b}",
        f"HSB   {fmt_hue(hsb.h)}°, {fmt(hsb.s)}%, {fmt(hsb.b)}%",
        f"HSL   {fmt_hue(hsl.h)}°, {fmt(hsl.s)}%, {fmt(hsl.l)}%",
        f"CMYK  {fmt(cmyk.c)}%, {fmt(cmyk.m)}%, {fmt(cmyk.y)}%, {fmt(cmyk.k)}%",
        f"Text  #{summary.contrast.upper()}",
    ])
    return "\n".join(lines)
