# Copyright (c) 2026 Termhue
# SPDX-License-Identifier: MIT

"""
Palette engine for Termhue.

Color conversion and palette derivation. Everything here is pure: no I/O,
no shared mutable state.
"""

from termhue.engine.colorspace import (
    HEX_PATTERN,
    InvalidHexError,
    clamp,
    contrast_ratio,
    delta_e_oklch,
    hex_to_oklch,
    is_valid_hex,
    normalize_hex,
    oklch_to_hex,
    relative_luminance,
)
from termhue.engine.palette import (
    BASE_HUES,
    BRIGHT_STRATEGIES,
    DEFAULT_CONFIG,
    DIM_STRATEGIES,
    build_palette,
    compute_hex_input,
    config_from_hex,
    find_closest_base_hue,
    resolve_base_hue_key,
    snap_hue_shift,
)

__all__ = [
    # Color math
    "clamp",
    "oklch_to_hex",
    "hex_to_oklch",
    "HEX_PATTERN",
    "InvalidHexError",
    "is_valid_hex",
    "normalize_hex",
    "delta_e_oklch",
    "relative_luminance",
    "contrast_ratio",
    # Palette
    "BASE_HUES",
    "DEFAULT_CONFIG",
    "BRIGHT_STRATEGIES",
    "DIM_STRATEGIES",
    "build_palette",
    "compute_hex_input",
    "find_closest_base_hue",
    "resolve_base_hue_key",
    "snap_hue_shift",
    "config_from_hex",
]
