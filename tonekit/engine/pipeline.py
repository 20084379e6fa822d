# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Palette generation pipeline.

seeds (manual or extracted) → role inference → one scale per role →
optional contrast correction → Palette
"""

from __future__ import annotations

from typing import Mapping, Optional, Union

from loguru import logger

from tonekit.schema import BRAND_ROLES, Palette, Role, SeedSet
from tonekit.engine.contrast import ContrastConfig, correct_palette
from tonekit.engine.extract import ExtractionConfig, ImageInput, extract_seed_colors
from tonekit.engine.inference import complete_seed_set
from tonekit.engine.scale import generate_neutral_scale, generate_scale


# Canonical seeds for the status roles
STATUS_SEEDS: dict[Role, str] = {
    Role.SUCCESS: "#22c55e",
    Role.WARNING: "#eab308",
    Role.ERROR: "#ef4444",
}


def _status_seeds(
    overrides: Optional[Mapping[Union[Role, str], str]],
) -> dict[Role, str]:
    seeds = dict(STATUS_SEEDS)
    for role, value in (overrides or {}).items():
        parsed = Role.parse(role)
        if parsed not in STATUS_SEEDS:
            raise KeyError(f"'{parsed.value}' is not a status role")
        seeds[parsed] = value
    return seeds


def build_palette(
    seeds: SeedSet,
    *,
    accessible: bool = False,
    status_seeds: Optional[Mapping[Union[Role, str], str]] = None,
    contrast: Optional[ContrastConfig] = None,
) -> Palette:
    """
    Build a complete Palette from the session's seeds.

    UNSET brand seeds are filled in place (marked DERIVED) first, so the
    SeedSet afterwards holds exactly the seeds the palette was built from.

    Args:
        seeds: Brand seeds; completed in place
        accessible: Apply contrast correction to every role
        status_seeds: Overrides for the success/warning/error seeds
        contrast: Contrast settings used when ``accessible`` is True

    Returns:
        Palette with all seven roles populated
    """
    complete_seed_set(seeds)
    status = _status_seeds(status_seeds)

    palette = Palette({
        Role.PRIMARY: generate_scale(seeds.hex(Role.PRIMARY)),
        Role.SECONDARY: generate_scale(seeds.hex(Role.SECONDARY)),
        Role.ACCENT: generate_scale(seeds.hex(Role.ACCENT)),
        Role.NEUTRAL: generate_neutral_scale(seeds.hex(Role.PRIMARY)),
        **{role: generate_scale(seed) for role, seed in status.items()},
    })

    if accessible:
        palette = correct_palette(palette, contrast)

    logger.debug("Built palette {} (accessible={})", palette, accessible)
    return palette


def generate_palette(
    primary: Optional[str] = None,
    secondary: Optional[str] = None,
    accent: Optional[str] = None,
    *,
    accessible: bool = False,
    status_seeds: Optional[Mapping[Union[Role, str], str]] = None,
) -> Palette:
    """
    Generate a Palette from up to three brand hex colors.

    Invalid values are treated as missing rather than failing.
    """
    seeds = SeedSet()
    for role, value in zip(BRAND_ROLES, (primary, secondary, accent)):
        if value:
            try:
                seeds.set_user(role, value)
            except ValueError:
                logger.warning("Ignoring invalid {} seed {!r}", role.value, value)
    return build_palette(seeds, accessible=accessible, status_seeds=status_seeds)


def palette_from_image(
    image: ImageInput,
    *,
    accessible: bool = False,
    config: Optional[ExtractionConfig] = None,
) -> tuple[Palette, SeedSet]:
    """
    Extract seeds from an image, infer the rest, and build a Palette.

    Extraction and inference run as two separate passes over the same
    SeedSet: an unresolved secondary stays UNSET until inference.

    Raises:
        ExtractionError: nothing is built when extraction fails
    """
    result = extract_seed_colors(image, config=config)
    seeds = SeedSet.from_extraction(result)
    return build_palette(seeds, accessible=accessible), seeds
