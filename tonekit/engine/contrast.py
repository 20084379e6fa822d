# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
WCAG contrast auto-correction.

A foreground color that fails the target ratio against its background is
walked away from the background in lightness (keeping hue and chroma)
until it passes. When that is impossible the result is whichever of pure
white or pure black reads better on the background.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from tonekit.schema import Palette, Scale
from tonekit.engine.colorspace import (
    contrast_ratio,
    hex_to_perceptual,
    lch_to_hex,
    normalize_hex,
)


WHITE = "#ffffff"
BLACK = "#000000"

# (background, foreground) cell pairs checked in accessibility mode.
# A string background is a literal color, an int is a step of the same scale.
CORRECTION_PAIRS: tuple[tuple[object, int], ...] = (
    (WHITE, 500),  # Buttons: main color under white text
    (50, 900),  # Headings on background
    (100, 800),  # Body text on surface
    (200, 700),  # Emphasis on surface alt
)


@dataclass(frozen=True)
class ContrastConfig:
    """Configuration for contrast correction."""

    # WCAG 2.1 AA for normal text
    min_ratio: float = 4.5

    # Lightness change per iteration (CIE L*)
    step: float = 2.0

    max_iterations: int = 50


def is_accessible(
    bg: str,
    fg: str,
    config: Optional[ContrastConfig] = None,
) -> bool:
    """True if ``fg`` on ``bg`` meets the configured minimum ratio."""
    config = config or ContrastConfig()
    return contrast_ratio(bg, fg) >= config.min_ratio


def best_fallback(bg: str) -> str:
    """Pure white or pure black, whichever contrasts more with ``bg``."""
    if contrast_ratio(bg, WHITE) > contrast_ratio(bg, BLACK):
        return WHITE
    return BLACK


def auto_fix_color(
    bg: str,
    fg: str,
    config: Optional[ContrastConfig] = None,
) -> str:
    """
    Adjust ``fg`` until it meets the target contrast against ``bg``.

    Lightness moves darker when the background is light (L > 50) and
    lighter otherwise, in fixed steps, re-rendering hex each time.

    Args:
        bg: Background hex color
        fg: Foreground hex color
        config: Target ratio and walk settings (defaults if None)

    Returns:
        ``fg`` unchanged if it already passes, else the first passing
        color on the walk, else ``#ffffff`` or ``#000000``.

    Raises:
        InvalidHexError: if either color is not a valid hex
    """
    config = config or ContrastConfig()
    bg = normalize_hex(bg)
    if contrast_ratio(bg, fg) >= config.min_ratio:
        return fg

    bg_lch = hex_to_perceptual(bg)
    fg_lch = hex_to_perceptual(fg)
    direction = -1.0 if bg_lch.L > 50.0 else 1.0

    lightness = fg_lch.L
    for _ in range(config.max_iterations):
        lightness = min(max(lightness + direction * config.step, 0.0), 100.0)
        candidate = lch_to_hex(lightness, fg_lch.C, fg_lch.H)
        if contrast_ratio(bg, candidate) >= config.min_ratio:
            return candidate
        if lightness in (0.0, 100.0):
            break

    fallback = best_fallback(bg)
    logger.debug("No lightness of {} passes on {}; using {}", fg, bg, fallback)
    return fallback


def correct_scale(scale: Scale, config: Optional[ContrastConfig] = None) -> Scale:
    """
    Return a copy of ``scale`` with each correction pair's foreground fixed.

    Pairs are processed in CORRECTION_PAIRS order. Backgrounds are never
    modified.
    """
    corrected = scale.copy()
    for background, fg_step in CORRECTION_PAIRS:
        bg = background if isinstance(background, str) else corrected[background]
        corrected[fg_step] = auto_fix_color(bg, corrected[fg_step], config)
    return corrected


def correct_palette(
    palette: Palette,
    config: Optional[ContrastConfig] = None,
) -> Palette:
    """Apply correct_scale to every role. The input palette is untouched."""
    return Palette({role: correct_scale(scale, config) for role, scale in palette.items()})
