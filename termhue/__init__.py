# Copyright (c) 2026 Termhue
# SPDX-License-Identifier: MIT

"""
Termhue -- Perceptual terminal color scheme generator.

Derives a 24-color ANSI palette (normal, bright and dim rows plus
background/foreground) from a handful of OKLCH parameters.

Quick start::

    from termhue import DEFAULT_CONFIG, build_palette
    from termhue.runtime import to_ghostty

    palette = build_palette(DEFAULT_CONFIG.replace(hue_shift=-10))
    palette.normal.blue.hex   # "#..."
    to_ghostty(palette)       # Paste into the Ghostty config
"""

from __future__ import annotations

__version__ = "1.0.0"

from termhue.engine import (
    BASE_HUES,
    DEFAULT_CONFIG,
    build_palette,
    compute_hex_input,
    find_closest_base_hue,
    hex_to_oklch,
    oklch_to_hex,
)
from termhue.schema import (
    BrightStrategy,
    DimStrategy,
    OklchValues,
    Palette,
    PaletteColor,
    PaletteConfig,
)

__all__ = [
    # Core API
    "build_palette",
    "compute_hex_input",
    "find_closest_base_hue",
    "oklch_to_hex",
    "hex_to_oklch",
    "BASE_HUES",
    "DEFAULT_CONFIG",
    # Types
    "PaletteConfig",
    "Palette",
    "PaletteColor",
    "OklchValues",
    "BrightStrategy",
    "DimStrategy",
    # Version
    "__version__",
]
