# Copyright (c) 2026 Termhue
# SPDX-License-Identifier: MIT

"""
Schema definitions for palettes.

All types in this module are immutable (frozen dataclasses).
A palette is derived from its config and never edited afterwards.
"""

from termhue.schema.palette import (
    COLOR_KEYS,
    BrightStrategy,
    ColorRow,
    DimStrategy,
    OklchValues,
    Palette,
    PaletteColor,
    PaletteConfig,
    StrategyInfo,
)

__all__ = [
    # Colors
    "OklchValues",
    "PaletteColor",
    # Input
    "PaletteConfig",
    "BrightStrategy",
    "DimStrategy",
    "StrategyInfo",
    # Output
    "COLOR_KEYS",
    "ColorRow",
    "Palette",
]
