# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Static palette catalog.

Tonal ramps ordered from lightest to darkest:
- Tailwind CSS ramps (11 steps, 50 → 950), prefixed "TW"
- Material 3 neutral surface ramp (23 steps)
- A custom neutral surface ramp (23 steps)

The catalog is a process-wide constant; palettes are frozen and the
table itself is a tuple. Entries are stored as listed ('#'-prefixed,
lowercase) and are not validated here.
"""

from __future__ import annotations

import logging

from swatchkit.convert.colorspace import normalize_hex
from swatchkit.schema import Palette

logger = logging.getLogger(__name__)


PRESETS: tuple[Palette, ...] = (
    Palette(
        name="TW slate",
        key_color="#64748b",
        colors=(
            "#f8fafc", "#f1f5f9", "#e2e8f0", "#cbd5e1", "#94a3b8", "#64748b",
            "#475569", "#334155", "#1e293b", "#0f172a", "#020617",
        ),
    ),
    Palette(
        name="TW gray",
        key_color="#6b7280",
        colors=(
            "#f9fafb", "#f3f4f6", "#e5e7eb", "#d1d5db", "#9ca3af", "#6b7280",
            "#4b5563", "#374151", "#1f2937", "#111827", "#030712",
        ),
    ),
    Palette(
        name="TW zinc",
        key_color="#71717a",
        colors=(
            "#fafafa", "#f4f4f5", "#e4e4e7", "#d4d4d8", "#a1a1aa", "#71717a",
            "#52525b", "#3f3f46", "#27272a", "#18181b", "#09090b",
        ),
    ),
    Palette(
        name="TW neutral",
        key_color="#737373",
        colors=(
            "#fafafa", "#f5f5f5", "#e5e5e5", "#d4d4d4", "#a3a3a3", "#737373",
            "#525252", "#404040", "#262626", "#171717", "#0a0a0a",
        ),
    ),
    Palette(
        name="TW stone",
        key_color="#78716c",
        colors=(
            "#fafaf9", "#f5f5f4", "#e7e5e4", "#d6d3d1", "#a8a29e", "#78716c",
            "#57534e", "#44403c", "#292524", "#1c1917", "#0c0a09",
        ),
    ),
    Palette(
        name="TW red",
        key_color="#ef4444",
        colors=(
            "#fef2f2", "#fee2e2", "#fecaca", "#fca5a5", "#f87171", "#ef4444",
            "#dc2626", "#b91c1c", "#991b1b", "#7f1d1d", "#450a0a",
        ),
    ),
    Palette(
        name="TW orange",
        key_color="#f97316",
        colors=(
            "#fff7ed", "#ffedd5", "#fed7aa", "#fdba74", "#fb923c", "#f97316",
            "#ea580c", "#c2410c", "#9a3412", "#7c2d12", "#431407",
        ),
    ),
    Palette(
        name="TW amber",
        key_color="#f59e0b",
        colors=(
            "#fffbeb", "#fef3c7", "#fde68a", "#fcd34d", "#fbbf24", "#f59e0b",
            "#d97706", "#b45309", "#92400e", "#78350f", "#451a03",
        ),
    ),
    Palette(
        name="TW yellow",
        key_color="#eab308",
        colors=(
            "#fefce8", "#fef9c3", "#fef08a", "#fde047", "#facc15", "#eab308",
            "#ca8a04", "#a16207", "#854d0e", "#713f12", "#422006",
        ),
    ),
    Palette(
        name="TW lime",
        key_color="#84cc16",
        colors=(
            "#f7fee7", "#ecfccb", "#d9f99d", "#bef264", "#a3e635", "#84cc16",
            "#65a30d", "#4d7c0f", "#3f6212", "#365314", "#1a2e05",
        ),
    ),
    Palette(
        name="TW green",
        key_color="#22c55e",
        colors=(
            "#f0fdf4", "#dcfce7", "#bbf7d0", "#86efac", "#4ade80", "#22c55e",
            "#16a34a", "#15803d", "#166534", "#14532d", "#052e16",
        ),
    ),
    Palette(
        name="TW emerald",
        key_color="#10b981",
        colors=(
            "#ecfdf5", "#d1fae5", "#a7f3d0", "#6ee7b7", "#34d399", "#10b981",
            "#059669", "#047857", "#065f46", "#064e3b", "#022c22",
        ),
    ),
    Palette(
        name="TW teal",
        key_color="#14b8a6",
        colors=(
            "#f0fdfa", "#ccfbf1", "#99f6e4", "#5eead4", "#2dd4bf", "#14b8a6",
            "#0d9488", "#0f766e", "#115e59", "#134e4a", "#042f2e",
        ),
    ),
    Palette(
        name="TW cyan",
        key_color="#06b6d4",
        colors=(
            "#ecfeff", "#cffafe", "#a5f3fc", "#67e8f9", "#22d3ee", "#06b6d4",
            "#0891b2", "#0e7490", "#155e75", "#164e63", "#083344",
        ),
    ),
    Palette(
        name="TW sky",
        key_color="#0ea5e9",
        colors=(
            "#f0f9ff", "#e0f2fe", "#bae6fd", "#7dd3fc", "#38bdf8", "#0ea5e9",
            "#0284c7", "#0369a1", "#075985", "#0c4a6e", "#082f49",
        ),
    ),
    Palette(
        name="TW blue",
        key_color="#3b82f6",
        colors=(
            "#eff6ff", "#dbeafe", "#bfdbfe", "#93c5fd", "#60a5fa", "#3b82f6",
            "#2563eb", "#1d4ed8", "#1e40af", "#1e3a8a", "#172554",
        ),
    ),
    Palette(
        name="TW indigo",
        key_color="#6366f1",
        colors=(
            "#eef2ff", "#e0e7ff", "#c7d2fe", "#a5b4fc", "#818cf8", "#6366f1",
            "#4f46e5", "#4338ca", "#3730a3", "#312e81", "#1e1b4b",
        ),
    ),
    Palette(
        name="TW violet",
        key_color="#8b5cf6",
        colors=(
            "#f5f3ff", "#ede9fe", "#ddd6fe", "#c4b5fd", "#a78bfa", "#8b5cf6",
            "#7c3aed", "#6d28d9", "#5b21b6", "#4c1d95", "#2e1065",
        ),
    ),
    Palette(
        name="TW purple",
        key_color="#a855f7",
        colors=(
            "#faf5ff", "#f3e8ff", "#e9d5ff", "#d8b4fe", "#c084fc", "#a855f7",
            "#9333ea", "#7e22ce", "#6b21a8", "#581c87", "#3b0764",
        ),
    ),
    Palette(
        name="TW fuchsia",
        key_color="#d946ef",
        colors=(
            "#fdf4ff", "#fae8ff", "#f5d0fe", "#f0abfc", "#e879f9", "#d946ef",
            "#c026d3", "#a21caf", "#86198f", "#701a75", "#4a044e",
        ),
    ),
    Palette(
        name="TW pink",
        key_color="#ec4899",
        colors=(
            "#fdf2f8", "#fce7f3", "#fbcfe8", "#f9a8d4", "#f472b6", "#ec4899",
            "#db2777", "#be185d", "#9d174d", "#831843", "#500724",
        ),
    ),
    Palette(
        name="TW rose",
        key_color="#f43f5e",
        colors=(
            "#fff1f2", "#ffe4e6", "#fecdd3", "#fda4af", "#fb7185", "#f43f5e",
            "#e11d48", "#be123c", "#9f1239", "#881337", "#4c0519",
        ),
    ),
    Palette(
        name="M3 surface",
        key_color="#79767d",
        colors=(
            "#ffffff", "#fffbff", "#f7f2fa", "#f5eff7", "#f3edf7", "#ece6f0",
            "#e6e0e9", "#ded8e1", "#cac5cd", "#aea9b1", "#938f96", "#79767d",
            "#605d64", "#48464c", "#3b383e", "#36343b", "#322f35", "#2b2930",
            "#211f26", "#1d1b20", "#141218", "#0f0d13", "#000000",
        ),
    ),
    Palette(
        name="Custom surface v1",
        key_color="#79767d",
        colors=(
            "#ffffff", "#fcfcfc", "#f4f4f4", "#f1f1f2", "#efeeef", "#e9e9ea",
            "#e4e3e4", "#dbdbdd", "#c8c7ca", "#adabaf", "#928f95", "#79767d",
            "#605e63", "#48464a", "#39373b", "#343336", "#2f2e30", "#282729",
            "#1b1a1c", "#161617", "#0c0c0d", "#070708", "#000000",
        ),
    ),
)

_BY_NAME = {p.name: p for p in PRESETS}


def preset_names() -> tuple[str, ...]:
    """Names of all catalog palettes, in catalog order."""
    return tuple(p.name for p in PRESETS)


def get_preset(name: str) -> Palette:
    """
    Look up a palette by its exact name.

    Raises:
        KeyError: If no palette has that name
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        logger.debug("Unknown preset requested: %r", name)
        raise KeyError(f"No preset named '{name}'") from None


def find_presets_containing(color: str) -> tuple[Palette, ...]:
    """
    Palettes whose ramp contains a color.

    Colors are compared after normalize_hex, so '#fff', 'FFFFFF' and
    '#ffffff' are the same entry.
    """
    target = normalize_hex(color)
    return tuple(p for p in PRESETS if target in p.normalized_colors)
