# Copyright (c) 2026 Termhue
# SPDX-License-Identifier: MIT

"""
Palette derivation.

Maps a PaletteConfig onto a full terminal palette:
- Normal row: six base hues at (lightness_scale, chroma_scale), plus gray black/white
- Bright row: lightness/chroma from the bright strategy table
- Dim row: lightness/chroma from the dim strategy table
- Background, foreground and a fixed badge text color

Strategies are closed enumerations dispatched through lookup tables. All
constants below are visual tuning values.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Callable

from termhue.engine.colorspace import clamp, hex_to_oklch, oklch_to_hex
from termhue.schema import (
    BrightStrategy,
    ColorRow,
    DimStrategy,
    Palette,
    PaletteColor,
    PaletteConfig,
    StrategyInfo,
)


# =============================================================================
# Constants
# =============================================================================

# Table order is the tie-break order for find_closest_base_hue.
BASE_HUES = MappingProxyType({
    "red": 25,
    "yellow": 95,
    "green": 142,
    "cyan": 195,
    "blue": 264,
    "magenta": 320,
})

DEFAULT_CONFIG = PaletteConfig(
    bg_lightness=0.18,
    fg_lightness=0.9,
    chroma_scale=0.12,
    lightness_scale=0.55,
    hue_shift=0,
    bright_strategy=BrightStrategy.VIBRANT,
    dim_strategy=DimStrategy.SUBTLE,
)

BRIGHT_STRATEGIES = (
    StrategyInfo("vibrant", "Vibrant", "Rich & Deep Pop (No Washout)"),
    StrategyInfo("pastel", "Pastel", "High Lightness, Low Chroma"),
    StrategyInfo("traditional", "Classic", "Simple Lightness Boost"),
)

DIM_STRATEGIES = (
    StrategyInfo("subtle", "Subtle", "Slightly Darker & Desaturated"),
    StrategyInfo("muted", "Muted", "Low Chroma (Grayish)"),
    StrategyInfo("deep", "Deep", "Significantly Darker"),
)

# (min, max, step) of the editor controls.
SLIDER_RANGES = MappingProxyType({
    "chroma_scale": (0.01, 0.3, 0.005),
    "lightness_scale": (0.3, 0.9, 0.01),
    "hue_shift": (-180, 180, 5),
})

# Custom accent colors are pulled into these bounds.
ACCENT_LIGHTNESS_RANGE = (0.3, 0.95)
ACCENT_CHROMA_RANGE = (0.01, 0.3)

GRAYSCALE_CHROMA = 0.01
BADGE_BLACK_LIGHTNESS = 0.20
_MIN_LIGHTNESS = 0.01
_MAX_LIGHTNESS = 0.99

_CHROMATIC_NAMES = {
    "red": "Red",
    "green": "Green",
    "yellow": "Yellow",
    "blue": "Blue",
    "magenta": "Magenta",
    "cyan": "Cyan",
}


# =============================================================================
# Strategy tables
# =============================================================================

# (lightness_scale, chroma_scale) -> (bright_l, bright_c)
_BRIGHT_RULES: dict[BrightStrategy, Callable[[float, float], tuple[float, float]]] = {
    BrightStrategy.PASTEL: lambda l, c: (min(l + 0.25, 0.98), c * 0.75),
    BrightStrategy.TRADITIONAL: lambda l, c: (min(l + 0.10, 0.98), c),
    BrightStrategy.VIBRANT: lambda l, c: (min(l + 0.04, 0.90), min(c * 1.6, 0.45)),
}

# (lightness_scale, chroma_scale, bg_lightness) -> (dim_l, dim_c)
_DIM_RULES: dict[DimStrategy, Callable[[float, float, float], tuple[float, float]]] = {
    DimStrategy.MUTED: lambda l, c, bg: (max(l - 0.05, bg + 0.05), c * 0.5),
    DimStrategy.DEEP: lambda l, c, bg: (max(l - 0.20, bg + 0.02), c * 0.9),
    DimStrategy.SUBTLE: lambda l, c, bg: (max(l - 0.15, bg + 0.05), c * 0.8),
}


def bright_levels(config: PaletteConfig) -> tuple[float, float]:
    """Lightness and chroma of the bright chromatic colors."""
    rule = _BRIGHT_RULES[BrightStrategy.resolve(config.bright_strategy)]
    return rule(config.lightness_scale, config.chroma_scale)


def dim_levels(config: PaletteConfig) -> tuple[float, float]:
    """Lightness and chroma of the dim chromatic colors."""
    rule = _DIM_RULES[DimStrategy.resolve(config.dim_strategy)]
    return rule(config.lightness_scale, config.chroma_scale, config.bg_lightness)


# =============================================================================
# Color construction
# =============================================================================


def wrap_hue(hue: float) -> float:
    """Wrap a hue angle into [0, 360), including negative angles."""
    return hue % 360


def _format_number(value: float) -> str:
    return f"{value:.15g}"


def make_color(
    name: str,
    base_hue: float,
    l: float,
    c: float,
    hue_shift: float,
    grayscale: bool = False,
) -> PaletteColor:
    """
    Build one palette color.

    Grayscale colors keep a small fixed chroma instead of zero. Lightness is
    clamped away from pure black and white.
    """
    h = wrap_hue(base_hue + hue_shift)
    final_c = GRAYSCALE_CHROMA if grayscale else c
    safe_l = clamp(l, _MIN_LIGHTNESS, _MAX_LIGHTNESS)
    css = f"oklch({_format_number(safe_l)} {_format_number(final_c)} {_format_number(h)})"
    return PaletteColor(
        name=name,
        l=safe_l,
        c=final_c,
        h=h,
        css=css,
        hex=oklch_to_hex(safe_l, final_c, h),
    )


def _build_row(
    prefix: str,
    l: float,
    c: float,
    black_l: float,
    white_l: float,
    hue_shift: float,
) -> ColorRow:
    colors = {
        key: make_color(prefix + label, BASE_HUES[key], l, c, hue_shift)
        for key, label in _CHROMATIC_NAMES.items()
    }
    return ColorRow(
        black=make_color(prefix + "Black", 0, black_l, GRAYSCALE_CHROMA, hue_shift, grayscale=True),
        white=make_color(prefix + "White", 0, white_l, GRAYSCALE_CHROMA, hue_shift, grayscale=True),
        **colors,
    )


def build_palette(config: PaletteConfig) -> Palette:
    """
    Derive the full palette from a config.

    Pure: equal configs produce equal palettes. Never raises for numeric
    input; unknown strategy ids use the default strategy.

    Example::

        >>> p = build_palette(DEFAULT_CONFIG)
        >>> p.normal.blue.hex == compute_hex_input(DEFAULT_CONFIG, BASE_HUES["blue"])
        True
    """
    bg = config.bg_lightness
    fg = config.fg_lightness
    shift = config.hue_shift

    normal = _build_row(
        "", config.lightness_scale, config.chroma_scale,
        black_l=bg + 0.1, white_l=fg - 0.1, hue_shift=shift,
    )

    bright_l, bright_c = bright_levels(config)
    bright = _build_row(
        "Br", bright_l, bright_c,
        black_l=bg + 0.25, white_l=fg, hue_shift=shift,
    )

    dim_l, dim_c = dim_levels(config)
    dim = _build_row(
        "Dim", dim_l, dim_c,
        black_l=bg + 0.05, white_l=fg - 0.3, hue_shift=shift,
    )

    return Palette(
        normal=normal,
        bright=bright,
        dim=dim,
        background=make_color("Background", 0, bg, GRAYSCALE_CHROMA, shift, grayscale=True),
        foreground=make_color("Foreground", 0, fg, GRAYSCALE_CHROMA, shift, grayscale=True),
        badge_black=make_color(
            "BadgeBlack", 0, BADGE_BLACK_LIGHTNESS, GRAYSCALE_CHROMA, shift, grayscale=True
        ),
    )


# =============================================================================
# Base hue helpers
# =============================================================================


def compute_hex_input(config: PaletteConfig, base_hue: float) -> str:
    """Hex of the normal color at ``base_hue`` under ``config``."""
    h = wrap_hue(base_hue + config.hue_shift)
    return oklch_to_hex(config.lightness_scale, config.chroma_scale, h)


def find_closest_base_hue(target_hue: float) -> float:
    """
    Return the base hue nearest to ``target_hue`` on the color wheel.

    Ties go to the earlier entry in BASE_HUES.
    """
    min_diff = 360.0
    closest = 0
    for base in BASE_HUES.values():
        diff = abs(target_hue - base)
        if diff > 180:
            diff = 360 - diff
        if diff < min_diff:
            min_diff = diff
            closest = base
    return closest


def resolve_base_hue_key(hue: float) -> str:
    """Name of the base hue equal to ``hue``; ``"blue"`` if none matches."""
    for key, value in BASE_HUES.items():
        if value == hue:
            return key
    return "blue"


def signed_hue_offset(hue: float, base_hue: float) -> float:
    """``hue - base_hue`` normalised into (-180, 180]."""
    offset = hue - base_hue
    while offset > 180:
        offset -= 360
    while offset <= -180:
        offset += 360
    return offset


def snap_hue_shift(hue: float, base_hue: float) -> int:
    """Signed offset from ``base_hue`` to ``hue`` rounded to a whole degree, halves up."""
    return int(math.floor(signed_hue_offset(hue, base_hue) + 0.5))


def config_from_hex(config: PaletteConfig, hex_color: str) -> tuple[PaletteConfig, float]:
    """
    Fit ``config`` so its nearest base hue reproduces ``hex_color``.

    The hex must already be a valid 6-digit color. Lightness and chroma are
    pulled into the accent ranges; other fields are kept.

    Returns:
        (new config, the base hue the color was snapped to)
    """
    lch = hex_to_oklch(hex_color)
    closest = find_closest_base_hue(lch.h)
    fitted = config.replace(
        hue_shift=snap_hue_shift(lch.h, closest),
        lightness_scale=clamp(lch.l, *ACCENT_LIGHTNESS_RANGE),
        chroma_scale=clamp(lch.c, *ACCENT_CHROMA_RANGE),
    )
    return fitted, closest
