# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""
Color value types.

Design principles:
- Immutable: All types are frozen dataclasses
- Value semantics: Two colors are equal when their channels are equal
- Lenient: Channel types are not range-checked on construction
- Serializable: JSON-ready via to_dict / from_dict

Channel domains:
- RGB: integers 0-255
- HSB / HSL: hue in degrees [0, 360), saturation/brightness/lightness in percent
- CMYK: every channel in percent [0, 100]
- Hex: 6 uppercase digits, no leading '#'
"""

from __future__ import annotations

from dataclasses import dataclass


# =============================================================================
# Channel Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGB:
    """
    A color as red, green and blue channels.

    Channels are expected in [0, 255]. Values outside that range are
    accepted and flow through the conversions unchecked.
    """
    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGB:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])


@dataclass(frozen=True, slots=True)
class HSB:
    """
    A color in HSB (a.k.a. HSV) space.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation in percent [0, 100]
        b: Brightness (value) in percent [0, 100]
    """
    h: float
    s: float
    b: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.h, self.s, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> HSB:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], b=data["b"])


@dataclass(frozen=True, slots=True)
class HSL:
    """
    A color in HSL space.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation in percent [0, 100]
        l: Lightness in percent [0, 100]
    """
    h: float
    s: float
    l: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.h, self.s, self.l)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HSL:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"])


@dataclass(frozen=True, slots=True)
class CMYK:
    """A color as cyan, magenta, yellow and key (black), each in percent."""
    c: float
    m: float
    y: float
    k: float

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.c, self.m, self.y, self.k)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"c": self.c, "m": self.m, "y": self.y, "k": self.k}

    @classmethod
    def from_dict(cls, data: dict) -> CMYK:
        """Deserialize from dictionary."""
        return cls(c=data["c"], m=data["m"], y=data["y"], k=data["k"])


# =============================================================================
# Palette
# =============================================================================


@dataclass(frozen=True, slots=True)
class Palette:
    """
    A named tonal ramp.

    Palettes are static data: the colors are stored exactly as listed
    in the catalog (usually '#'-prefixed lowercase hex) and ordered from
    lightest to darkest. Ramp length is not fixed.

    Attributes:
        name: Display name (e.g., "TW slate")
        key_color: Representative color of the ramp
        colors: Ordered hex strings
    """
    name: str
    key_color: str
    colors: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate palette structure."""
        if not self.name:
            raise ValueError("Palette name cannot be empty")
        if not self.colors:
            raise ValueError(f"Palette '{self.name}' must contain at least one color")

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self):
        return iter(self.colors)

    @property
    def normalized_colors(self) -> tuple[str, ...]:
        """Ramp entries as 6-digit uppercase hex without '#'."""
        from swatchkit.convert.colorspace import normalize_hex
        return tuple(normalize_hex(c) for c in self.colors)

    def index_of(self, color: str) -> int:
        """
        Position of a color in the ramp.

        The color is compared after hex normalization, so "#64748B",
        "64748b" and the catalog entry all match.

        Raises:
            ValueError: If the color is not part of the ramp
        """
        from swatchkit.convert.colorspace import normalize_hex
        return self.normalized_colors.index(normalize_hex(color))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "key_color": self.key_color,
            "colors": list(self.colors),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Palette:
        """Deserialize from dictionary."""
        return cls(
            name=data["name"],
            key_color=data["key_color"],
            colors=tuple(data["colors"]),
        )


# =============================================================================
# Summary
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorSummary:
    """
    One color in every supported representation.

    Attributes:
        hex: Normalized hex (6 uppercase digits, no '#')
        rgb: RGB channels
        hsb: HSB representation
        hsl: HSL representation
        cmyk: CMYK representation
        contrast: Legible text color on top of this one ("ffffff" or "000000")
    """
    hex: str
    rgb: RGB
    hsb: HSB
    hsl: HSL
    cmyk: CMYK
    contrast: str

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hex": self.hex,
            "rgb": self.rgb.to_dict(),
            "hsb": self.hsb.to_dict(),
            "hsl": self.hsl.to_dict(),
            "cmyk": self.cmyk.to_dict(),
            "contrast": self.contrast,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ColorSummary:
        """Deserialize from dictionary."""
        return cls(
            hex=data["hex"],
            rgb=RGB.from_dict(data["rgb"]),
            hsb=HSB.from_dict(data["hsb"]),
            hsl=HSL.from_dict(data["hsl"]),
            cmyk=CMYK.from_dict(data["cmyk"]),
            contrast=data["contrast"],
        )
