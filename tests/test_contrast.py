# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""Tests for WCAG contrast auto-correction."""

import pytest

from tonekit.engine.colorspace import contrast_ratio, hex_to_perceptual
from tonekit.engine.contrast import (
    BLACK,
    CORRECTION_PAIRS,
    WHITE,
    ContrastConfig,
    auto_fix_color,
    best_fallback,
    correct_palette,
    correct_scale,
    is_accessible,
)
from tonekit.engine.pipeline import generate_palette
from tonekit.engine.scale import generate_scale


PAIRS = [
    ("#ffffff", "#eeeeee"),
    ("#ffffff", "#93c5fd"),
    ("#111111", "#222222"),
    ("#0f172a", "#1e3a8a"),
    ("#fef9c3", "#facc15"),
    ("#777777", "#787878"),
    ("#3b82f6", "#60a5fa"),
]


class TestAutoFix:

    def test_passing_pair_unchanged(self):
        assert auto_fix_color("#ffffff", "#000000") == "#000000"

    def test_light_background_darkens(self):
        fixed = auto_fix_color("#ffffff", "#eeeeee")
        assert hex_to_perceptual(fixed).L < hex_to_perceptual("#eeeeee").L
        assert contrast_ratio("#ffffff", fixed) >= 4.5

    def test_dark_background_lightens(self):
        fixed = auto_fix_color("#111111", "#222222")
        assert hex_to_perceptual(fixed).L > hex_to_perceptual("#222222").L
        assert contrast_ratio("#111111", fixed) >= 4.5

    @pytest.mark.parametrize("bg,fg", PAIRS)
    def test_result_passes_or_falls_back(self, bg, fg):
        fixed = auto_fix_color(bg, fg)
        assert contrast_ratio(bg, fixed) >= 4.5 or fixed in (WHITE, BLACK)

    def test_hue_kept_while_walking(self):
        fixed = auto_fix_color("#ffffff", "#93c5fd")
        if fixed not in (WHITE, BLACK):
            assert abs(hex_to_perceptual(fixed).H - hex_to_perceptual("#93c5fd").H) < 10.0

    def test_impossible_target_falls_back(self):
        config = ContrastConfig(min_ratio=22.0)
        assert auto_fix_color("#ffffff", "#eeeeee", config) == BLACK
        assert auto_fix_color("#000000", "#111111", config) == WHITE

    def test_is_accessible(self):
        assert is_accessible("#ffffff", "#000000")
        assert not is_accessible("#ffffff", "#eeeeee")

    def test_best_fallback(self):
        assert best_fallback("#ffffff") == BLACK
        assert best_fallback("#000000") == WHITE
        assert best_fallback("#fef9c3") == BLACK


class TestCorrectScale:

    @pytest.mark.parametrize("seed", ["#3b82f6", "#eab308", "#22c55e", "#808080"])
    def test_pairs_satisfied(self, seed):
        corrected = correct_scale(generate_scale(seed))
        for background, fg_step in CORRECTION_PAIRS:
            bg = background if isinstance(background, str) else corrected[background]
            fg = corrected[fg_step]
            assert contrast_ratio(bg, fg) >= 4.5 or fg in (WHITE, BLACK)

    def test_backgrounds_untouched(self):
        scale = generate_scale("#eab308")
        corrected = correct_scale(scale)
        for step in (50, 100, 200, 300, 400, 600):
            assert corrected[step] == scale[step]

    def test_input_not_mutated(self):
        scale = generate_scale("#eab308")
        before = scale.copy()
        correct_scale(scale)
        assert scale == before

    def test_yellow_main_darkened(self):
        """Yellow at L65 cannot carry white text."""
        scale = generate_scale("#eab308")
        corrected = correct_scale(scale)
        assert corrected[500] != scale[500]
        assert contrast_ratio(WHITE, corrected[500]) >= 4.5


class TestCorrectPalette:

    def test_returns_new_palette(self):
        palette = generate_palette("#eab308")
        before = palette.copy()
        corrected = correct_palette(palette)
        assert palette == before
        assert corrected is not palette

    def test_every_role_corrected(self):
        corrected = correct_palette(generate_palette("#eab308"))
        for role, scale in corrected.items():
            fg = scale[500]
            assert contrast_ratio(WHITE, fg) >= 4.5 or fg in (WHITE, BLACK), role
