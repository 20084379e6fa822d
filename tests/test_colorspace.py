# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (sRGB ↔ XYZ ↔ Lab ↔ LCh) and contrast."""

import numpy as np
import pytest

from tonekit.errors import InvalidHexError
from tonekit.schema import LCHColor
from tonekit.engine.colorspace import (
    contrast_ratio,
    hex_to_perceptual,
    hex_to_rgb,
    hue_distance,
    is_valid_hex,
    lab_to_lch,
    lab_to_xyz,
    lch_to_hex,
    lch_to_lab,
    linear_rgb_to_xyz,
    linear_to_srgb,
    normalize_hex,
    normalize_hue,
    perceptual_to_hex,
    relative_luminance,
    srgb_to_linear,
    srgb_to_lch,
    lch_to_srgb,
    xyz_to_lab,
    xyz_to_linear_rgb,
)


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values below 0.04045 use linear segment."""
        linear = srgb_to_linear(np.array([0.03]))
        assert float(linear[0]) == pytest.approx(0.03 / 12.92, abs=1e-10)

    def test_batch_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)

    def test_out_of_gamut_is_clipped(self):
        srgb = linear_to_srgb(np.array([-0.2, 0.5, 1.7]))
        assert srgb.min() >= 0.0
        assert srgb.max() <= 1.0


class TestXYZLabRoundtrip:
    """Linear RGB ↔ XYZ ↔ Lab conversions must roundtrip accurately."""

    def test_xyz_roundtrip(self):
        rgb = np.random.RandomState(7).random((50, 3))
        np.testing.assert_allclose(xyz_to_linear_rgb(linear_rgb_to_xyz(rgb)), rgb, atol=1e-10)

    def test_lab_roundtrip(self):
        xyz = linear_rgb_to_xyz(np.random.RandomState(3).random((50, 3)))
        np.testing.assert_allclose(lab_to_xyz(xyz_to_lab(xyz)), xyz, atol=1e-10)

    def test_lab_roundtrip_dark_segment(self):
        """Very dark colors use the linear segment of the Lab curve."""
        xyz = linear_rgb_to_xyz(np.array([0.001, 0.002, 0.001]))
        np.testing.assert_allclose(lab_to_xyz(xyz_to_lab(xyz)), xyz, atol=1e-12)

    def test_white_lightness_is_hundred(self):
        lab = xyz_to_lab(linear_rgb_to_xyz(np.array([1.0, 1.0, 1.0])))
        assert lab[0] == pytest.approx(100.0, abs=1e-4)
        assert lab[1] == pytest.approx(0.0, abs=1e-3)
        assert lab[2] == pytest.approx(0.0, abs=1e-3)

    def test_lch_roundtrip(self):
        lab = np.array([60.0, 20.0, -35.0])
        np.testing.assert_allclose(lch_to_lab(lab_to_lch(lab)), lab, atol=1e-10)

    def test_hue_range(self):
        lch = lab_to_lch(np.array([50.0, -10.0, -10.0]))
        assert 0.0 <= lch[2] < 360.0

    def test_full_chain_roundtrip(self):
        srgb = np.array([[0.2, 0.5, 0.8], [0.9, 0.1, 0.3]])
        np.testing.assert_allclose(lch_to_srgb(srgb_to_lch(srgb)), srgb, atol=1e-6)


class TestHexConversion:

    def test_red_reference_values(self):
        red = hex_to_perceptual("#ff0000")
        assert red.L == pytest.approx(54.29, abs=0.3)
        assert red.C == pytest.approx(106.8, abs=0.6)
        assert red.H == pytest.approx(40.85, abs=0.5)

    def test_black_and_white(self):
        assert hex_to_perceptual("#000000").L == pytest.approx(0.0, abs=1e-6)
        white = hex_to_perceptual("#FFFFFF")
        assert white.L == pytest.approx(100.0, abs=1e-3)
        assert white.H is None

    def test_gray_is_achromatic(self):
        assert hex_to_perceptual("#808080").is_achromatic

    @pytest.mark.parametrize(
        "value",
        ["#3b82f6", "#22c55e", "#eab308", "#ef4444", "#7c3aed", "#0f172a", "#fafafa", "#123456"],
    )
    def test_roundtrip_within_one_step(self, value):
        recovered = perceptual_to_hex(hex_to_perceptual(value))
        for got, want in zip(hex_to_rgb(recovered), hex_to_rgb(value)):
            assert abs(got - want) <= 1

    def test_gray_literal(self):
        """L=65 gray renders exactly."""
        assert lch_to_hex(65.0, 0.0, None) == "#9e9e9e"

    def test_undefined_hue_ignores_chroma(self):
        assert lch_to_hex(65.0, 40.0, None) == "#9e9e9e"

    def test_lightness_clamped(self):
        assert perceptual_to_hex((150.0, 0.0, None)) == "#ffffff"
        assert perceptual_to_hex((-20.0, 0.0, None)) == "#000000"

    def test_out_of_gamut_clipped_not_failed(self):
        value = perceptual_to_hex(LCHColor(L=90.0, C=150.0, H=300.0))
        assert is_valid_hex(value)

    def test_output_is_lowercase(self):
        assert perceptual_to_hex(hex_to_perceptual("#ABCDEF")) == perceptual_to_hex(
            hex_to_perceptual("#abcdef")
        )
        value = lch_to_hex(50.0, 30.0, 200.0)
        assert value == value.lower()


class TestHexValidation:

    @pytest.mark.parametrize("value", ["#3b82f6", "3b82f6", "#ABCDEF", " #abcdef "])
    def test_valid(self, value):
        assert is_valid_hex(value)

    @pytest.mark.parametrize("value", ["", "#fff", "#12345", "#1234567", "zzzzzz", "#gg0000", None, 123])
    def test_invalid(self, value):
        assert not is_valid_hex(value)

    def test_normalize(self):
        assert normalize_hex("3B82F6") == "#3b82f6"

    @pytest.mark.parametrize("value", ["", "#fff", "red", None])
    def test_parse_failure_raises(self, value):
        with pytest.raises(InvalidHexError):
            hex_to_perceptual(value)

    def test_invalid_hex_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_hex("nope")


class TestHue:

    def test_distance_wraps(self):
        assert hue_distance(350.0, 10.0) == pytest.approx(20.0)
        assert hue_distance(10.0, 350.0) == pytest.approx(20.0)

    def test_distance_max(self):
        assert hue_distance(0.0, 180.0) == pytest.approx(180.0)
        assert hue_distance(90.0, 270.0) == pytest.approx(180.0)

    def test_normalize(self):
        assert normalize_hue(370.0) == pytest.approx(10.0)
        assert normalize_hue(-20.0) == pytest.approx(340.0)
        assert 0.0 <= normalize_hue(-1e-18) < 360.0


class TestContrast:

    def test_black_white(self):
        assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0, abs=1e-6)

    def test_identical(self):
        assert contrast_ratio("#3b82f6", "#3b82f6") == pytest.approx(1.0)

    def test_symmetric(self):
        assert contrast_ratio("#3b82f6", "#ffffff") == pytest.approx(
            contrast_ratio("#ffffff", "#3b82f6")
        )

    def test_known_gray(self):
        """#767676 is the classic lightest gray passing AA on white."""
        assert contrast_ratio("#767676", "#ffffff") == pytest.approx(4.54, abs=0.01)

    def test_accepts_lch(self):
        white = LCHColor(L=100.0, C=0.0)
        assert contrast_ratio(white, "#000000") == pytest.approx(21.0, abs=1e-3)

    def test_luminance_range(self):
        assert relative_luminance("#000000") == pytest.approx(0.0)
        assert relative_luminance("#ffffff") == pytest.approx(1.0)
