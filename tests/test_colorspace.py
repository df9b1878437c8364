# Copyright (c) 2026 Termhue
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (hex ↔ sRGB ↔ OKLab ↔ OKLCH)."""

import math

import numpy as np
import pytest

from termhue.engine.colorspace import (
    InvalidHexError,
    clamp,
    contrast_ratio,
    delta_e_oklch,
    hex_to_oklch,
    in_srgb_gamut,
    is_valid_hex,
    linear_rgb_to_oklab,
    linear_to_srgb,
    normalize_hex,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_hex,
    oklch_to_oklab,
    oklch_to_srgb,
    srgb_to_linear,
    srgb_to_oklch,
)
from termhue.schema import OklchValues


class TestClamp:

    def test_above_range(self):
        assert clamp(2, 0, 1) == 1

    def test_below_range(self):
        assert clamp(-1, 0, 1) == 0

    def test_inside_range(self):
        assert clamp(0.5, 0, 1) == 0.5


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values at or below 0.04045 use the linear segment."""
        linear = srgb_to_linear(np.array([0.03]))
        assert float(linear[0]) == pytest.approx(0.03 / 12.92, abs=1e-12)

    def test_negative_linear_clips_to_zero(self):
        srgb = linear_to_srgb(np.array([-0.2, 0.5, 1.3]))
        assert srgb[0] == 0.0
        assert srgb[2] == 1.0

    def test_batch_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)


class TestOKLabStages:

    def test_white_lightness_is_one(self):
        lab = linear_rgb_to_oklab(np.array([1.0, 1.0, 1.0]))
        assert lab[0] == pytest.approx(1.0, abs=1e-6)
        assert lab[1] == pytest.approx(0.0, abs=1e-6)
        assert lab[2] == pytest.approx(0.0, abs=1e-6)

    def test_black_lightness_is_zero(self):
        lab = linear_rgb_to_oklab(np.array([0.0, 0.0, 0.0]))
        assert lab[0] == pytest.approx(0.0, abs=1e-9)

    def test_batch_roundtrip(self):
        rgb = np.random.RandomState(7).random((50, 3))
        np.testing.assert_allclose(oklab_to_linear_rgb(linear_rgb_to_oklab(rgb)), rgb, atol=1e-6)

    def test_polar_roundtrip(self):
        lab = np.array([0.7, 0.1, -0.05])
        np.testing.assert_allclose(oklch_to_oklab(oklab_to_oklch(lab)), lab, atol=1e-12)

    def test_hue_normalised_positive(self):
        lch = oklab_to_oklch(np.array([0.5, 0.1, -0.1]))
        assert lch[2] == pytest.approx(315.0)

    def test_batch_shape_preserved(self):
        srgb = np.random.RandomState(3).random((4, 5, 3))
        assert srgb_to_oklch(srgb).shape == (4, 5, 3)
        assert oklch_to_srgb(srgb_to_oklch(srgb)).shape == (4, 5, 3)


class TestOklchToHex:

    def test_format(self):
        hex_val = oklch_to_hex(0.6, 0.2, 30.0)
        assert len(hex_val) == 7
        assert hex_val.startswith("#")
        assert hex_val == hex_val.lower()

    @pytest.mark.parametrize("l", [0.05, 0.3, 0.5, 0.77, 0.99])
    @pytest.mark.parametrize("h", [0.0, 90.0, 200.0, 359.0])
    def test_zero_chroma_is_gray(self, l, h):
        hex_val = oklch_to_hex(l, 0.0, h)
        assert hex_val[1:3] == hex_val[3:5] == hex_val[5:7]

    def test_extremes(self):
        assert oklch_to_hex(0.0, 0.0, 0.0) == "#000000"
        assert oklch_to_hex(1.0, 0.0, 0.0) == "#ffffff"

    def test_out_of_gamut_clamps_silently(self):
        hex_val = oklch_to_hex(0.9, 0.4, 30.0)
        assert len(hex_val) == 7
        assert in_srgb_gamut(0.9, 0.4, 30.0) is False

    def test_non_finite_input(self):
        assert oklch_to_hex(math.nan, 0.1, 30.0) == "#000000"
        assert oklch_to_hex(0.6, 0.1, math.inf) == "#000000"
        hex_val = oklch_to_hex(0.6, 1e200, 30.0)
        assert len(hex_val) == 7
        int(hex_val[1:], 16)

    def test_hue_is_periodic(self):
        assert oklch_to_hex(0.6, 0.1, 15.0) == oklch_to_hex(0.6, 0.1, 375.0)
        assert oklch_to_hex(0.6, 0.1, 350.0) == oklch_to_hex(0.6, 0.1, -10.0)


class TestHexToOklch:

    def test_returns_oklch_values(self):
        assert isinstance(hex_to_oklch("#3b82f6"), OklchValues)

    def test_expected_ranges(self):
        v = hex_to_oklch("#3b82f6")
        assert 0.0 < v.l <= 1.0
        assert v.c > 0.0
        assert 0.0 <= v.h < 360.0

    def test_srgb_red(self):
        v = hex_to_oklch("#ff0000")
        assert v.l == pytest.approx(0.628, abs=0.002)
        assert v.c == pytest.approx(0.2577, abs=0.002)
        assert v.h == pytest.approx(29.23, abs=0.1)

    def test_srgb_blue(self):
        v = hex_to_oklch("0000ff")
        assert v.l == pytest.approx(0.452, abs=0.002)
        assert v.h == pytest.approx(264.05, abs=0.1)

    def test_black_and_white(self):
        assert hex_to_oklch("#000000").l == pytest.approx(0.0, abs=1e-9)
        white = hex_to_oklch("#FFFFFF")
        assert white.l == pytest.approx(1.0, abs=1e-6)
        assert white.c == pytest.approx(0.0, abs=1e-6)

    def test_malformed_yields_nan(self):
        v = hex_to_oklch("#zzzzzz")
        assert math.isnan(v.l)
        assert math.isnan(v.c)

    def test_short_input_yields_nan(self):
        assert math.isnan(hex_to_oklch("#abc").l)


class TestRoundtrip:

    @pytest.mark.parametrize(
        "hex_val",
        ["#3b82f6", "#10b981", "#808080", "#ff0000", "#000000", "#ffffff", "#f5a623"],
    )
    def test_hex_roundtrip_exact(self, hex_val):
        v = hex_to_oklch(hex_val)
        assert oklch_to_hex(v.l, v.c, v.h) == hex_val

    def test_sampled_oklch_roundtrip(self):
        # Below code value 32 in every channel one 8-bit step moves L or C by
        # about 0.01, and L < 0.053 collapses to #000000.
        rng = np.random.RandomState(42)
        checked = 0
        for _ in range(1000):
            l = rng.uniform(0.05, 0.95)
            c = rng.uniform(0.0, 0.3)
            h = rng.uniform(0.0, 360.0)
            if not in_srgb_gamut(l, c, h):
                continue
            hex_val = oklch_to_hex(l, c, h)
            v = hex_to_oklch(hex_val)
            dark = max(int(hex_val[i:i + 2], 16) for i in (1, 3, 5)) < 32
            tolerance = 0.06 if dark else 0.01
            assert v.l == pytest.approx(l, abs=tolerance)
            assert v.c == pytest.approx(c, abs=tolerance)
            if c >= 0.15 and not dark:
                hue_error = abs((v.h - h + 180.0) % 360.0 - 180.0)
                assert hue_error <= 2.0
            checked += 1
        assert checked > 100


class TestHexValidation:

    @pytest.mark.parametrize("value", ["#3b82f6", "3B82F6", "#abc", "ABC"])
    def test_valid(self, value):
        assert is_valid_hex(value)

    @pytest.mark.parametrize("value", ["", "#", "#12345", "#1234567", "#ggg", "##abc", "3b82f6 "])
    def test_invalid(self, value):
        assert not is_valid_hex(value)

    def test_normalize_expands_shorthand(self):
        assert normalize_hex("#ABC") == "#aabbcc"
        assert normalize_hex("3B82F6") == "#3b82f6"

    def test_normalize_rejects(self):
        with pytest.raises(InvalidHexError):
            normalize_hex("#12")

    def test_invalid_hex_error_is_value_error(self):
        assert issubclass(InvalidHexError, ValueError)


class TestGamut:

    def test_gray_in_gamut(self):
        assert in_srgb_gamut(0.5, 0.0, 0.0)

    def test_high_chroma_green_out_of_gamut(self):
        assert not in_srgb_gamut(0.5, 0.4, 150.0)


class TestDeltaEAndContrast:

    def test_identical_colors_zero(self):
        assert delta_e_oklch(0.5, 0.1, 200.0, 0.5, 0.1, 200.0) == pytest.approx(0.0, abs=1e-12)

    def test_black_white_large_distance(self):
        assert delta_e_oklch(0.0, 0.0, 0.0, 1.0, 0.0, 0.0) > 0.5

    def test_hue_wrap_is_zero_distance(self):
        assert delta_e_oklch(0.5, 0.1, 0.0, 0.5, 0.1, 360.0) == pytest.approx(0.0, abs=1e-12)

    def test_black_on_white(self):
        assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0, abs=0.01)

    def test_symmetric(self):
        assert contrast_ratio("#3b82f6", "#171717") == pytest.approx(
            contrast_ratio("#171717", "#3b82f6")
        )

    def test_identical_is_one(self):
        assert contrast_ratio("#808080", "#808080") == pytest.approx(1.0)
