# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Palette block serializer.

Formats a Palette as a block that can be pasted into a stylesheet,
a document, or a JSON payload.
"""

from __future__ import annotations

import json
import re
from enum import Enum
from typing import Optional

from swatchkit.convert.colorspace import normalize_hex
from swatchkit.convert.contrast import get_contrast_colors
from swatchkit.schema import Palette


class BlockFormat(Enum):
    """Block format options."""

    CSS = "css"
    JSON = "json"
    MARKDOWN = "markdown"


_SLUG_RE = re.compile(r"[^a-z0-9]+")


def palette_slug(name: str) -> str:
    """CSS-friendly identifier for a palette name ("TW slate" → "tw-slate")."""
    return _SLUG_RE.sub("-", name.lower()).strip("-")


def to_palette_block(
    palette: Palette,
    *,
    format: BlockFormat = BlockFormat.CSS,
    include_contrast: bool = False,
    prefix: Optional[str] = None,
) -> str:
    """Serialize a Palette as a block.

    Ramp steps are numbered from 1 (lightest) in catalog order.

    Args:
        palette: The Palette to serialize.
        format: Block format (CSS, JSON, or MARKDOWN).
        include_contrast: Add each step's legible text color.
        prefix: Custom property prefix for CSS (default: slug of the name).

    Returns:
        Formatted block string.

    Raises:
        InvalidInput: If include_contrast is set and an entry is not a
            valid hex color.

    Example (CSS)::

        /* TW slate (key #64748B) */
        :root {
          --tw-slate-1: #F8FAFC;
          --tw-slate-2: #F1F5F9;
          ...
        }
    """
    rows = _build_rows(palette, include_contrast)

    if format == BlockFormat.CSS:
        return _to_css(palette, rows, prefix or palette_slug(palette.name))
    elif format == BlockFormat.JSON:
        return _to_json(palette, rows)
    else:
        return _to_markdown(palette, rows, include_contrast)


def _build_rows(palette: Palette, include_contrast: bool) -> list[dict]:
    colors = palette.normalized_colors
    contrasts = get_contrast_colors(colors) if include_contrast else None

    rows = []
    for i, hex_color in enumerate(colors):
        row = {"step": i + 1, "hex": f"#{hex_color}"}
        if contrasts is not None:
            row["contrast"] = f"#{contrasts[i].upper()}"
        rows.append(row)
    return rows


def _key_hex(palette: Palette) -> str:
    return f"#{normalize_hex(palette.key_color)}"


def _to_css(palette: Palette, rows: list[dict], prefix: str) -> str:
    """Generate a :root block of custom properties."""
    lines = [f"/* {palette.name} (key {_key_hex(palette)}) */", ":root {"]
    for row in rows:
        lines.append(f"  --{prefix}-{row['step']}: {row['hex']};")
        if "contrast" in row:
            lines.append(f"  --{prefix}-{row['step']}-contrast: {row['contrast']};")
    lines.append("}")
    return "\n".join(lines)


def _to_json(palette: Palette, rows: list[dict]) -> str:
    """Generate JSON block with wrapper."""
    data = {
        "palette": {
            "name": palette.name,
            "key_color": _key_hex(palette),
            "colors": rows,
        }
    }
    return json.dumps(data, indent=2)


def _to_markdown(palette: Palette, rows: list[dict], include_contrast: bool) -> str:
    """Generate a markdown table."""
    if include_contrast:
        lines = ["| Step | Hex | Contrast |", "|------|-----|----------|"]
    else:
        lines = ["| Step | Hex |", "|------|-----|"]

    for row in rows:
        cells = [str(row["step"]), row["hex"]]
        if include_contrast:
            cells.append(row["contrast"])
        lines.append("| " + " | ".join(cells) + " |")

    return "\n".join([f"### {palette.name}", "", *lines])
