# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Schema definitions for palettes, seeds, and edits.

Palettes and scales are fixed-shape containers validated at construction.
Colors and edit requests are immutable values.
"""

from tonekit.schema.palette import (
    BRAND_ROLES,
    DERIVED_ROLES,
    ROLES,
    SEED_STEP,
    STEPS,
    EditRequest,
    LCHColor,
    Palette,
    Role,
    Scale,
    Seed,
    SeedSet,
    SeedState,
)

__all__ = [
    # Keys
    "Role",
    "ROLES",
    "BRAND_ROLES",
    "DERIVED_ROLES",
    "STEPS",
    "SEED_STEP",
    # Values
    "LCHColor",
    "Scale",
    "Palette",
    # Session state
    "SeedState",
    "Seed",
    "SeedSet",
    "EditRequest",
]
