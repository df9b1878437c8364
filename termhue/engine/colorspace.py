# Copyright (c) 2026 Termhue
# SPDX-License-Identifier: MIT

"""
Color space conversions between hex sRGB and OKLCH.

Conversion chain: hex → sRGB → Linear RGB → LMS → OKLab → OKLCH (and back)

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- CSS Color 4 ``oklch()``

The array stages accept shape ``(..., 3)`` so whole palettes can be converted
at once. The scalar hex helpers at the bottom are what the palette engine
uses. Out-of-gamut colors are clipped per channel; there is no gamut mapping.
"""

from __future__ import annotations

import math
import re

import numpy as np
from numpy.typing import NDArray

from termhue.schema import OklchValues


# =============================================================================
# Hex validation
# =============================================================================

HEX_PATTERN = re.compile(r"^#?([0-9A-F]{3}){1,2}$", re.IGNORECASE)


class InvalidHexError(ValueError):
    """Raised when a string is not a 3- or 6-digit hex color."""


def is_valid_hex(value: str) -> bool:
    """True if ``value`` matches ``HEX_PATTERN``."""
    return HEX_PATTERN.match(value) is not None


def normalize_hex(value: str) -> str:
    """
    Validate a hex color and return it as ``#rrggbb``.

    Three-digit shorthand is expanded (``#abc`` → ``#aabbcc``).

    Raises:
        InvalidHexError: If ``value`` does not match ``HEX_PATTERN``.
    """
    if not is_valid_hex(value):
        raise InvalidHexError(f"Invalid hex color: {value!r}")
    digits = value.lstrip("#").lower()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits}"


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Restrict ``value`` to ``[min_value, max_value]``."""
    return min(max(value, min_value), max_value)


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert gamma-encoded sRGB values [0,1] to linear RGB.

    Piecewise transfer curve:
    - v > 0.04045: ((v + 0.055) / 1.055) ^ 2.4
    - otherwise:   v / 12.92
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb > 0.04045,
        np.power((srgb + 0.055) / 1.055, 2.4),
        srgb / 12.92,
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to gamma-encoded sRGB, clipped to [0,1].

    Negative channels encode to 0 anyway, so they are floored first to keep
    the power branch real-valued.
    """
    linear = np.maximum(np.asarray(linear, dtype=np.float64), 0.0)
    srgb = np.where(
        linear > 0.0031308,
        1.055 * np.power(linear, 1.0 / 2.4) - 0.055,
        12.92 * linear,
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Published constants. The inverse pair is written out, not derived with
# np.linalg.inv.

# Linear sRGB → LMS
_RGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS′ (cube root) → OKLab
_LMS_TO_LAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# OKLab → LMS′
_LAB_TO_LMS = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
], dtype=np.float64)

# LMS → linear sRGB
_LMS_TO_RGB = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
], dtype=np.float64)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    lms = np.einsum('...j,ij->...i', rgb, _RGB_TO_LMS)
    return np.einsum('...j,ij->...i', np.cbrt(lms), _LMS_TO_LAB)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB (unclipped).

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values; channels outside
        [0, 1] mean the color is outside the sRGB gamut.
    """
    lab = np.asarray(lab, dtype=np.float64)
    lms = np.einsum('...j,ij->...i', lab, _LAB_TO_LMS) ** 3
    return np.einsum('...j,ij->...i', lms, _LMS_TO_RGB)


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cartesian OKLab → polar OKLCH, hue in degrees [0, 360)."""
    lab = np.asarray(lab, dtype=np.float64)
    a = lab[..., 1]
    b = lab[..., 2]

    chroma = np.sqrt(a**2 + b**2)
    hue = np.degrees(np.arctan2(b, a))
    hue = np.where(hue < 0.0, hue + 360.0, hue)

    return np.stack([lab[..., 0], chroma, hue], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """Polar OKLCH (hue in degrees) → Cartesian OKLab."""
    lch = np.asarray(lch, dtype=np.float64)
    hue_rad = lch[..., 2] * math.pi / 180.0
    a = lch[..., 1] * np.cos(hue_rad)
    b = lch[..., 1] * np.sin(hue_rad)
    return np.stack([lch[..., 0], a, b], axis=-1)


# =============================================================================
# Full chain
# =============================================================================


def srgb_to_oklch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to OKLCH.

    Returns:
        Array of shape (..., 3) with (L, C, H):
        - L: Lightness [0, 1]
        - C: Chroma [0, ~0.4 for sRGB]
        - H: Hue in degrees [0, 360)
    """
    return oklab_to_oklch(linear_rgb_to_oklab(srgb_to_linear(srgb)))


def oklch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert OKLCH to sRGB [0,1], clipping each channel independently."""
    return linear_to_srgb(oklab_to_linear_rgb(oklch_to_oklab(lch)))


def in_srgb_gamut(l: float, c: float, h: float, tolerance: float = 1e-6) -> bool:
    """True if (l, c, h) maps to linear sRGB channels within [0, 1]."""
    rgb = oklab_to_linear_rgb(oklch_to_oklab(np.array([l, c, h], dtype=np.float64)))
    return bool(np.all(rgb >= -tolerance) and np.all(rgb <= 1.0 + tolerance))


# =============================================================================
# Hex helpers
# =============================================================================


def _to_byte(value: float) -> int:
    # Half-up rounding; np.round would round halves to even.
    return int(math.floor(value * 255.0 + 0.5))


def oklch_to_hex(l: float, c: float, h: float) -> str:
    """
    Convert OKLCH values to a lowercase hex color string.

    Args:
        l: Lightness [0, 1]
        c: Chroma (>= 0)
        h: Hue in degrees

    Returns:
        Hex string like ``"#3b82f6"``. Non-finite input never raises:
        NaN channels encode as 0 and overflowed channels clip.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        srgb = oklch_to_srgb(np.array([l, c, h], dtype=np.float64))
    srgb = np.nan_to_num(srgb, nan=0.0, posinf=1.0, neginf=0.0)
    r, g, b = (_to_byte(v) for v in srgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def _parse_channel(pair: str) -> float:
    # Malformed pairs propagate as NaN; callers validate with HEX_PATTERN.
    try:
        return int(pair, 16) / 255.0
    except ValueError:
        return math.nan


def hex_to_oklch(hex_color: str) -> OklchValues:
    """
    Convert a 6-digit hex color to OKLCH.

    The input is not validated. Expand shorthand and check ``HEX_PATTERN``
    first (``normalize_hex`` does both); malformed input yields NaN fields.

    Args:
        hex_color: Hex string like ``"#3b82f6"`` or ``"3b82f6"``

    Returns:
        OklchValues with hue in [0, 360)
    """
    digits = hex_color.lstrip("#")
    srgb = np.array(
        [_parse_channel(digits[i:i + 2]) for i in (0, 2, 4)],
        dtype=np.float64,
    )
    lch = srgb_to_oklch(srgb)
    return OklchValues(l=float(lch[0]), c=float(lch[1]), h=float(lch[2]))


# =============================================================================
# Distance and contrast
# =============================================================================


def delta_e_oklch(
    l1: float, c1: float, h1: float,
    l2: float, c2: float, h2: float,
) -> float:
    """
    Perceptual color difference (ΔE) between two OKLCH colors.

    Measured as Euclidean distance in OKLab; hue is angular so a direct
    OKLCH distance would be wrong.

    Rough thresholds: 0.02 barely perceptible, 0.04 noticeable, 0.08+
    clearly different.
    """
    lab1 = oklch_to_oklab(np.array([l1, c1, h1], dtype=np.float64))
    lab2 = oklch_to_oklab(np.array([l2, c2, h2], dtype=np.float64))
    return float(np.sqrt(np.sum((lab1 - lab2) ** 2)))


_LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


def relative_luminance(hex_color: str) -> float:
    """WCAG 2 relative luminance of a 6-digit hex color."""
    digits = hex_color.lstrip("#")
    srgb = np.array([_parse_channel(digits[i:i + 2]) for i in (0, 2, 4)])
    return float(np.dot(srgb_to_linear(srgb), _LUMINANCE_WEIGHTS))


def contrast_ratio(hex1: str, hex2: str) -> float:
    """WCAG 2 contrast ratio, 1.0 (identical) to 21.0 (black on white)."""
    lum1 = relative_luminance(hex1)
    lum2 = relative_luminance(hex2)
    lighter, darker = max(lum1, lum2), min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)
