# Copyright (c) 2026 Termhue
# SPDX-License-Identifier: MIT

"""
Palette schema — value types for terminal color scheme generation.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same config → same palette, compared structurally
- Serializable: ``to_dict()`` output is JSON-ready

OKLCH Color Space:
- l (Lightness): 0.0 = black, 1.0 = white
- c (Chroma): 0.0 = gray, ~0.32 = max saturation in sRGB
- h (Hue): 0-360 degrees (≈25=red, ≈95=yellow, ≈142=green, ≈264=blue)
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Iterator, Union


# =============================================================================
# Strategies
# =============================================================================


class BrightStrategy(Enum):
    """How the bright row is derived from the normal row."""

    VIBRANT = "vibrant"
    PASTEL = "pastel"
    TRADITIONAL = "traditional"

    @classmethod
    def resolve(cls, value: Union[BrightStrategy, str]) -> BrightStrategy:
        """Coerce a member or its string id; unknown ids fall back to VIBRANT."""
        try:
            return cls(value)
        except ValueError:
            return cls.VIBRANT


class DimStrategy(Enum):
    """How the dim row is derived from the normal row."""

    SUBTLE = "subtle"
    MUTED = "muted"
    DEEP = "deep"

    @classmethod
    def resolve(cls, value: Union[DimStrategy, str]) -> DimStrategy:
        """Coerce a member or its string id; unknown ids fall back to SUBTLE."""
        try:
            return cls(value)
        except ValueError:
            return cls.SUBTLE


@dataclass(frozen=True, slots=True)
class StrategyInfo:
    """Display metadata for a strategy choice."""
    id: str
    label: str
    description: str


# =============================================================================
# Colors
# =============================================================================


@dataclass(frozen=True, slots=True)
class OklchValues:
    """
    A bare OKLCH triple, as returned by ``hex_to_oklch``.

    Not validated: malformed hex input yields NaN fields.
    """
    l: float
    c: float
    h: float

    def to_dict(self) -> dict:
        return {"l": self.l, "c": self.c, "h": self.h}


@dataclass(frozen=True, slots=True)
class PaletteColor:
    """
    One named color of a generated palette.

    ``css`` and ``hex`` are two serializations of the same (l, c, h)
    triple and are produced together by the palette engine.

    Attributes:
        name: Display name, e.g. ``"BrRed"``
        l: Lightness, already clamped to [0.01, 0.99]
        c: Chroma
        h: Hue in degrees [0, 360)
        css: ``oklch(l c h)`` string
        hex: ``#rrggbb`` lowercase sRGB
    """
    name: str
    l: float
    c: float
    h: float
    css: str
    hex: str

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "l": self.l,
            "c": self.c,
            "h": self.h,
            "css": self.css,
            "hex": self.hex,
        }


# =============================================================================
# Config
# =============================================================================


@dataclass(frozen=True, slots=True)
class PaletteConfig:
    """
    The sole input to palette derivation.

    Attributes:
        bg_lightness: Background lightness
        fg_lightness: Foreground lightness
        chroma_scale: Chroma of the normal chromatic colors
        lightness_scale: Lightness of the normal chromatic colors
        hue_shift: Signed rotation in degrees applied to every base hue
        bright_strategy: Bright row policy (member or string id)
        dim_strategy: Dim row policy (member or string id)
    """
    bg_lightness: float
    fg_lightness: float
    chroma_scale: float
    lightness_scale: float
    hue_shift: float = 0
    bright_strategy: Union[BrightStrategy, str] = BrightStrategy.VIBRANT
    dim_strategy: Union[DimStrategy, str] = DimStrategy.SUBTLE

    def replace(self, **changes) -> PaletteConfig:
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """Serialize to dictionary, strategies as their string ids."""
        d = {f.name: getattr(self, f.name) for f in fields(self)}
        for key in ("bright_strategy", "dim_strategy"):
            if isinstance(d[key], Enum):
                d[key] = d[key].value
        return d

    @classmethod
    def from_dict(cls, data: dict) -> PaletteConfig:
        """Deserialize from dictionary."""
        return cls(
            bg_lightness=data["bg_lightness"],
            fg_lightness=data["fg_lightness"],
            chroma_scale=data["chroma_scale"],
            lightness_scale=data["lightness_scale"],
            hue_shift=data.get("hue_shift", 0),
            bright_strategy=BrightStrategy.resolve(data.get("bright_strategy", "vibrant")),
            dim_strategy=DimStrategy.resolve(data.get("dim_strategy", "subtle")),
        )


# =============================================================================
# Palette
# =============================================================================

COLOR_KEYS = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


@dataclass(frozen=True, slots=True)
class ColorRow:
    """
    The eight ANSI colors of one row (normal, bright or dim).

    Field order is the display order. Supports both ``row.blue`` and
    ``row["blue"]``.
    """
    black: PaletteColor
    red: PaletteColor
    green: PaletteColor
    yellow: PaletteColor
    blue: PaletteColor
    magenta: PaletteColor
    cyan: PaletteColor
    white: PaletteColor

    def __getitem__(self, key: str) -> PaletteColor:
        if key not in COLOR_KEYS:
            raise KeyError(key)
        return getattr(self, key)

    def __contains__(self, key: object) -> bool:
        return key in COLOR_KEYS

    def __iter__(self) -> Iterator[str]:
        return iter(COLOR_KEYS)

    def __len__(self) -> int:
        return len(COLOR_KEYS)

    def keys(self) -> tuple[str, ...]:
        return COLOR_KEYS

    def values(self) -> list[PaletteColor]:
        return [getattr(self, key) for key in COLOR_KEYS]

    def items(self) -> list[tuple[str, PaletteColor]]:
        return [(key, getattr(self, key)) for key in COLOR_KEYS]

    def to_dict(self) -> dict:
        return {key: color.to_dict() for key, color in self.items()}


@dataclass(frozen=True, slots=True)
class Palette:
    """
    A complete derived terminal color scheme.

    Rebuilt from a PaletteConfig on every change; never updated in place.

    Attributes:
        normal: ANSI colors 0-7
        bright: ANSI colors 8-15
        dim: Dimmed variants of the normal row
        background: Terminal background
        foreground: Terminal foreground
        badge_black: Fixed dark text color for yellow/green badges
    """
    normal: ColorRow
    bright: ColorRow
    dim: ColorRow
    background: PaletteColor
    foreground: PaletteColor
    badge_black: PaletteColor

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "normal": self.normal.to_dict(),
            "bright": self.bright.to_dict(),
            "dim": self.dim.to_dict(),
            "background": self.background.to_dict(),
            "foreground": self.foreground.to_dict(),
            "badge_black": self.badge_black.to_dict(),
        }
