# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Tonal scale generation.

A seed color becomes a ten-step ramp by pinning each step to a fixed
lightness target and scaling the seed's chroma by a per-step factor.
Hue is carried through unchanged. The very light steps get reduced
chroma so backgrounds and surfaces do not look tinted.

Scale generation never fails: an unparseable seed yields a fixed gray
ramp so that palette generation always completes.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from loguru import logger

from tonekit.errors import InvalidHexError
from tonekit.schema import Role, Scale, STEPS
from tonekit.engine.colorspace import hex_to_perceptual, lch_to_hex


class ScaleProfile(Enum):
    """Chroma treatment for a role's ramp."""
    VIVID = "vivid"
    NEUTRAL = "neutral"


# Lightness target per step (CIE L*, 0-100)
# 50 background, 100 surface, 200 surface alt, 300 border/disabled,
# 400 border strong, 500 main, 600 main strong, 700 emphasis/hover,
# 800 text, 900 heading
LIGHTNESS_TARGETS: dict[int, float] = {
    50: 99.0,
    100: 97.0,
    200: 94.0,
    300: 88.0,
    400: 80.0,
    500: 65.0,
    600: 50.0,
    700: 35.0,
    800: 20.0,
    900: 10.0,
}

_VIVID_CHROMA: dict[int, float] = {50: 0.2, 100: 0.5, 200: 0.8}
_NEUTRAL_CHROMA: dict[int, float] = {50: 0.5, 100: 0.8}

# Neutral ramps keep only a hint of the seed's hue
NEUTRAL_CHROMA_SCALE = 0.15
NEUTRAL_CHROMA_CAP = 6.0

FALLBACK_SCALE: tuple[str, ...] = (
    "#f9fafb",
    "#f3f4f6",
    "#e5e7eb",
    "#d1d5db",
    "#9ca3af",
    "#6b7280",
    "#4b5563",
    "#374151",
    "#1f2937",
    "#111827",
)


def chroma_factor(step: int, profile: ScaleProfile = ScaleProfile.VIVID) -> float:
    """Fraction of the (profile-adjusted) seed chroma used at ``step``."""
    table = _NEUTRAL_CHROMA if profile is ScaleProfile.NEUTRAL else _VIVID_CHROMA
    return table.get(step, 1.0)


def fallback_scale() -> Scale:
    """The fixed gray ramp used when a seed cannot be parsed."""
    return Scale.from_list(list(FALLBACK_SCALE))


def generate_scale(
    seed: str,
    profile: ScaleProfile = ScaleProfile.VIVID,
) -> Scale:
    """
    Generate a ten-step tonal ramp from a seed color.

    Args:
        seed: Hex color the ramp is built around
        profile: VIVID keeps the seed chroma from step 300 on; NEUTRAL
            first dampens it to min(C * 0.15, 6)

    Returns:
        Scale whose lightness does not increase from step 50 to 900.
        Identical seeds always produce identical scales.
    """
    try:
        lch = hex_to_perceptual(seed)
    except InvalidHexError:
        logger.warning("Invalid seed {!r}; using gray fallback scale", seed)
        return fallback_scale()

    chroma = lch.C
    if profile is ScaleProfile.NEUTRAL:
        chroma = min(chroma * NEUTRAL_CHROMA_SCALE, NEUTRAL_CHROMA_CAP)

    return Scale({
        step: lch_to_hex(
            LIGHTNESS_TARGETS[step],
            chroma * chroma_factor(step, profile),
            lch.H,
        )
        for step in STEPS
    })


def generate_neutral_scale(seed: str) -> Scale:
    """Neutral ramp tinted by ``seed`` (normally the primary seed)."""
    return generate_scale(seed, ScaleProfile.NEUTRAL)


def profile_for(role: Union[Role, str]) -> ScaleProfile:
    """Neutral gets the dampened profile; every other role is vivid."""
    if Role.parse(role) is Role.NEUTRAL:
        return ScaleProfile.NEUTRAL
    return ScaleProfile.VIVID


def scale_for_role(role: Union[Role, str], seed: str) -> Scale:
    """Generate the scale for ``role`` from ``seed`` with the right profile."""
    return generate_scale(seed, profile_for(role))
