# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (sRGB ↔ linear ↔ OKLab / XYZ / Lab, HSL)."""

import numpy as np
import pytest

from blockhue.color.colorspace import (
    hex_to_rgb,
    hsl_to_srgb,
    lab_to_xyz,
    linear_rgb_to_oklab,
    linear_rgb_to_xyz,
    linear_to_srgb,
    oklab_distance_batch,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    rgb_to_hex,
    srgb_to_hsl,
    srgb_to_linear,
    srgb_to_uint8,
    xyz_to_lab,
    xyz_to_linear_rgb,
)


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_roundtrip_primary_red(self):
        srgb = np.array([1.0, 0.0, 0.0])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values below 0.04045 use linear segment."""
        val = 0.03
        linear = srgb_to_linear(np.array([val]))
        assert float(linear[0]) == pytest.approx(val / 12.92, abs=1e-10)

    def test_batch_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_out_of_gamut_is_clipped(self):
        srgb = linear_to_srgb(np.array([-0.2, 0.5, 1.7]))
        assert srgb[0] == 0.0
        assert srgb[2] == 1.0


class TestQuantization:
    """8-bit quantization rounds, never truncates."""

    def test_every_level_maps_back(self):
        levels = np.arange(256)
        np.testing.assert_array_equal(srgb_to_uint8(levels / 255.0), levels)

    def test_rounds_to_nearest(self):
        # 100.6 / 255 would truncate to 100
        assert srgb_to_uint8(np.array([100.6 / 255.0]))[0] == 101

    def test_clamps(self):
        np.testing.assert_array_equal(srgb_to_uint8(np.array([-0.5, 1.5])), [0, 255])


class TestOKLabRoundtrip:
    """Linear RGB ↔ OKLab conversions must roundtrip accurately."""

    def test_roundtrip_white(self):
        rgb = np.array([1.0, 1.0, 1.0])
        recovered = oklab_to_linear_rgb(linear_rgb_to_oklab(rgb))
        np.testing.assert_allclose(recovered, rgb, atol=1e-8)

    def test_white_lightness_is_one(self):
        lab = linear_rgb_to_oklab(np.array([1.0, 1.0, 1.0]))
        assert lab[0] == pytest.approx(1.0, abs=1e-6)

    def test_black_lightness_is_zero(self):
        lab = linear_rgb_to_oklab(np.array([0.0, 0.0, 0.0]))
        assert lab[0] == pytest.approx(0.0, abs=1e-6)

    def test_batch_roundtrip(self):
        rgb = np.random.RandomState(42).random((50, 3))
        recovered = oklab_to_linear_rgb(linear_rgb_to_oklab(rgb))
        np.testing.assert_allclose(recovered, rgb, atol=1e-8)


class TestOKLCH:
    """OKLab ↔ OKLCH conversions."""

    def test_roundtrip_chromatic(self):
        lab = np.array([0.7, 0.1, -0.05])
        recovered = oklch_to_oklab(oklab_to_oklch(lab))
        np.testing.assert_allclose(recovered, lab, atol=1e-10)

    def test_chroma_calculation(self):
        lch = oklab_to_oklch(np.array([0.5, 0.3, 0.4]))
        assert lch[1] == pytest.approx(0.5, abs=1e-10)

    def test_hue_range(self):
        lch = oklab_to_oklch(np.array([0.5, -0.1, -0.1]))
        assert 0.0 <= lch[2] < 360.0


class TestCIELab:
    """Linear RGB ↔ XYZ ↔ CIE Lab (D65)."""

    def test_white_is_l100(self):
        lab = xyz_to_lab(linear_rgb_to_xyz(np.array([1.0, 1.0, 1.0])))
        np.testing.assert_allclose(lab, [100.0, 0.0, 0.0], atol=1e-3)

    def test_black_is_l0(self):
        lab = xyz_to_lab(linear_rgb_to_xyz(np.array([0.0, 0.0, 0.0])))
        np.testing.assert_allclose(lab, [0.0, 0.0, 0.0], atol=1e-9)

    def test_red_reference(self):
        lab = xyz_to_lab(linear_rgb_to_xyz(np.array([1.0, 0.0, 0.0])))
        np.testing.assert_allclose(lab, [53.24, 80.09, 67.20], atol=0.05)

    def test_batch_roundtrip(self):
        rgb = np.random.RandomState(7).random((100, 3))
        xyz = linear_rgb_to_xyz(rgb)
        recovered = xyz_to_linear_rgb(lab_to_xyz(xyz_to_lab(xyz)))
        np.testing.assert_allclose(recovered, rgb, atol=1e-9)

    def test_dark_linear_segment_roundtrip(self):
        xyz = np.array([0.001, 0.002, 0.003])
        np.testing.assert_allclose(lab_to_xyz(xyz_to_lab(xyz)), xyz, atol=1e-12)


class TestHSL:
    """sRGB ↔ HSL conversions."""

    @pytest.mark.parametrize("srgb,expected", [
        ([1.0, 0.0, 0.0], [0.0, 1.0, 0.5]),
        ([0.0, 1.0, 0.0], [120.0, 1.0, 0.5]),
        ([0.0, 0.0, 1.0], [240.0, 1.0, 0.5]),
        ([1.0, 1.0, 1.0], [0.0, 0.0, 1.0]),
        ([0.0, 0.0, 0.0], [0.0, 0.0, 0.0]),
    ])
    def test_reference_colors(self, srgb, expected):
        np.testing.assert_allclose(srgb_to_hsl(np.array(srgb)), expected, atol=1e-12)

    def test_gray_has_zero_hue_and_saturation(self):
        h, s, l = srgb_to_hsl(np.array([0.5, 0.5, 0.5]))
        assert h == 0.0
        assert s == 0.0
        assert l == pytest.approx(0.5)

    def test_hue_in_range(self):
        hsl = srgb_to_hsl(np.random.RandomState(3).random((200, 3)))
        assert np.all(hsl[:, 0] >= 0.0)
        assert np.all(hsl[:, 0] < 360.0)

    def test_batch_roundtrip(self):
        srgb = np.random.RandomState(11).random((200, 3))
        recovered = hsl_to_srgb(srgb_to_hsl(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-9)

    def test_hue_taken_modulo_360(self):
        np.testing.assert_allclose(
            hsl_to_srgb(np.array([370.0, 1.0, 0.5])),
            hsl_to_srgb(np.array([10.0, 1.0, 0.5])),
            atol=1e-12,
        )


class TestHex:
    """Hex string helpers."""

    def test_parse_long_form(self):
        assert hex_to_rgb("#8B7355") == (139, 115, 85)

    def test_parse_without_hash_and_lower_case(self):
        assert hex_to_rgb("7cfc00") == (124, 252, 0)

    def test_parse_short_form(self):
        assert hex_to_rgb("#FFF") == (255, 255, 255)

    @pytest.mark.parametrize("bad", ["", "#12345", "#GGGGGG", "0x1234", "#+FFFFF", "#1234567"])
    def test_malformed_raises(self, bad):
        with pytest.raises(ValueError):
            hex_to_rgb(bad)

    def test_format_is_upper_case(self):
        assert rgb_to_hex(139, 115, 85) == "#8B7355"
        assert rgb_to_hex(0, 0, 0) == "#000000"


class TestDistanceBatch:
    """Vectorized OKLab distance."""

    def test_identical_is_zero(self):
        colors = np.array([[0.5, 0.1, -0.1], [0.2, 0.0, 0.0]])
        np.testing.assert_array_equal(oklab_distance_batch(colors, colors), [0.0, 0.0])

    def test_broadcast_against_single_color(self):
        colors = np.array([[0.5, 0.0, 0.0], [0.8, 0.0, 0.0]])
        d = oklab_distance_batch(colors, np.array([0.5, 0.0, 0.0]))
        np.testing.assert_allclose(d, [0.0, 0.3], atol=1e-12)
