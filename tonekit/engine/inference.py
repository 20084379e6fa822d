# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Missing brand-role inference.

Fills whichever of primary/secondary/accent are missing from the ones
that are known, using fixed hue relationships:

- Secondary is analogous to primary (+20°), primary is analogous to
  secondary in reverse (-20°).
- Accent is complementary to primary (+180°) with boosted chroma.

Lightness is always inherited from the color a role is derived from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from tonekit.schema import BRAND_ROLES, LCHColor, Role, SeedSet
from tonekit.engine.colorspace import (
    hex_to_perceptual,
    is_valid_hex,
    normalize_hex,
    normalize_hue,
    perceptual_to_hex,
)


DEFAULT_PRIMARY = "#3b82f6"

# Hue assumed for achromatic seeds before any shift (blue)
ACHROMATIC_HUE = 250.0

ANALOGOUS_SHIFT = 20.0
COMPLEMENTARY_SHIFT = 180.0

ANALOGOUS_MIN_CHROMA = 30.0
ACCENT_MIN_CHROMA = 40.0
ACCENT_CHROMA_BOOST = 1.5
ACCENT_MAX_CHROMA = 130.0


@dataclass(frozen=True, slots=True)
class InferredSeeds:
    """A complete set of brand seeds."""
    primary: str
    secondary: str
    accent: str

    def as_dict(self) -> dict[Role, str]:
        return {
            Role.PRIMARY: self.primary,
            Role.SECONDARY: self.secondary,
            Role.ACCENT: self.accent,
        }


def _hue(color: LCHColor) -> float:
    return color.H if color.H is not None else ACHROMATIC_HUE


def _shifted(color: LCHColor, shift: float, chroma: float) -> LCHColor:
    return LCHColor(L=color.L, C=chroma, H=normalize_hue(_hue(color) + shift))


def analogous(color: LCHColor, shift: float = ANALOGOUS_SHIFT) -> LCHColor:
    """Hue-shifted neighbour with at least ANALOGOUS_MIN_CHROMA chroma."""
    return _shifted(color, shift, max(color.C, ANALOGOUS_MIN_CHROMA))


def complementary(color: LCHColor) -> LCHColor:
    """Opposite hue with chroma boosted (capped), floored at ACCENT_MIN_CHROMA."""
    chroma = min(color.C * ACCENT_CHROMA_BOOST, ACCENT_MAX_CHROMA)
    return _shifted(color, COMPLEMENTARY_SHIFT, max(chroma, ACCENT_MIN_CHROMA))


def _usable(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    if not is_valid_hex(value):
        logger.warning("Ignoring invalid seed {!r}", value)
        return None
    return normalize_hex(value)


def infer_missing_roles(
    primary: Optional[str] = None,
    secondary: Optional[str] = None,
    accent: Optional[str] = None,
) -> InferredSeeds:
    """
    Complete a partial set of brand seeds.

    Known seeds are returned as given (normalized); invalid ones are
    treated as missing. With neither primary nor secondary known the
    primary defaults to blue.

    Returns:
        InferredSeeds with three valid lowercase hex colors
    """
    p, s, a = _usable(primary), _usable(secondary), _usable(accent)
    known = [role.value for role, v in zip(BRAND_ROLES, (p, s, a)) if v]

    if p is None and s is None:
        p = DEFAULT_PRIMARY

    if p is not None:
        p_lch = hex_to_perceptual(p)
        if s is None:
            s = perceptual_to_hex(analogous(p_lch))
        if a is None:
            a = perceptual_to_hex(complementary(p_lch))
    else:
        p_lch = analogous(hex_to_perceptual(s), -ANALOGOUS_SHIFT)
        p = perceptual_to_hex(p_lch)
        if a is None:
            # Complementary of the derived primary, not of its rendered hex
            a = perceptual_to_hex(complementary(p_lch))

    logger.debug("Inferred seeds (known: {}): {} {} {}", known, p, s, a)
    return InferredSeeds(primary=p, secondary=s, accent=a)


def complete_seed_set(seeds: SeedSet) -> SeedSet:
    """
    Fill every UNSET brand seed in place, marking it DERIVED.

    USER_SET and DERIVED seeds are never touched, so a derived seed stays
    fixed when the seeds it came from change later.

    Returns:
        The same SeedSet, for chaining
    """
    known = seeds.known()
    inferred = infer_missing_roles(
        known.get(Role.PRIMARY),
        known.get(Role.SECONDARY),
        known.get(Role.ACCENT),
    )
    for role, value in inferred.as_dict().items():
        if not seeds.is_set(role):
            seeds.set_derived(role, value)
    return seeds
