# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Single-cell edit propagation.

Decides how far an edit to one swatch reaches:

- A new seed (step 500) regenerates the whole scale; a new primary seed
  also regenerates neutral, which is tinted by the primary.
- A clear hue change elsewhere in a brand scale moves the whole scale to
  the new hue while keeping the seed's lightness and chroma.
- Everything else (gray picks, lightness/chroma tweaks, non-seed cells of
  derived roles) changes exactly one cell.

Edits mutate the caller's Palette and SeedSet in place. They are applied
one at a time; callers must not interleave edits.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from loguru import logger

from tonekit.schema import EditRequest, Palette, Role, SeedSet
from tonekit.engine.colorspace import hex_to_perceptual, hue_distance, lch_to_hex
from tonekit.engine.contrast import ContrastConfig, correct_scale
from tonekit.engine.scale import scale_for_role


class EditKind(Enum):
    """How an edit was applied."""
    LOCAL = "local"  # One cell replaced
    HUE_PROPAGATED = "hue_propagated"  # Seed re-hued, scale(s) regenerated
    SEED_REPLACED = "seed_replaced"  # New seed, scale(s) regenerated


@dataclass(frozen=True, slots=True)
class EditOutcome:
    """
    Result of applying an EditRequest.

    Attributes:
        kind: How the edit was applied
        roles: Roles whose cells changed, in the order they were updated
        seed: The new seed when one was set, else None
    """
    kind: EditKind
    roles: tuple[Role, ...]
    seed: Optional[str] = None

    @property
    def is_local(self) -> bool:
        return self.kind is EditKind.LOCAL


@dataclass(frozen=True)
class EditConfig:
    """Thresholds for edit propagation (heuristic, tunable)."""

    # New colors below this chroma are treated as grays: local edit only
    min_chroma: float = 5.0

    # Hue change (degrees) above which a brand scale follows the new hue
    hue_threshold: float = 10.0


class EditPropagationController:
    """
    Applies EditRequests to a live Palette and its SeedSet.

    Args:
        palette: Palette to edit in place
        seeds: The session's brand seeds, updated on seed-level edits
        accessible: When True, regenerated scales go through contrast
            correction like a freshly built accessible palette
        config: Propagation thresholds (defaults if None)
        contrast: Contrast settings used when ``accessible`` is True
    """

    def __init__(
        self,
        palette: Palette,
        seeds: SeedSet,
        *,
        accessible: bool = False,
        config: Optional[EditConfig] = None,
        contrast: Optional[ContrastConfig] = None,
    ) -> None:
        self.palette = palette
        self.seeds = seeds
        self.accessible = accessible
        self.config = config or EditConfig()
        self.contrast = contrast

    def apply(self, request: EditRequest) -> EditOutcome:
        """Apply one edit and report its reach."""
        if request.role.is_brand:
            outcome = self._apply_brand(request)
        elif request.is_seed_step:
            self._regenerate(request.role, request.new_hex)
            outcome = EditOutcome(EditKind.SEED_REPLACED, (request.role,), request.new_hex)
        else:
            outcome = self._local(request)

        logger.info(
            "Edit {}[{}] -> {}: {} {}",
            request.role.value, request.step, request.new_hex,
            outcome.kind.value, [r.value for r in outcome.roles],
        )
        return outcome

    def edit(self, role, step: int, new_hex: str) -> EditOutcome:
        """Shorthand for ``apply(EditRequest(role, step, new_hex))``."""
        return self.apply(EditRequest(role, step, new_hex))

    # ------------------------------------------------------------------

    def _apply_brand(self, request: EditRequest) -> EditOutcome:
        role = request.role
        if request.is_seed_step:
            self.seeds.set_user(role, request.new_hex)
            roles = self._reseed(role, request.new_hex)
            return EditOutcome(EditKind.SEED_REPLACED, roles, request.new_hex)

        new = hex_to_perceptual(request.new_hex)
        if new.C < self.config.min_chroma:
            return self._local(request)

        old = hex_to_perceptual(self.palette[role][request.step])
        old_hue = old.H if old.H is not None else 0.0
        new_hue = new.H if new.H is not None else 0.0
        if hue_distance(old_hue, new_hue) <= self.config.hue_threshold:
            return self._local(request)

        current = self.seeds.hex(role)
        if current is None:
            return self._local(request)

        seed_lch = hex_to_perceptual(current)
        seed = lch_to_hex(seed_lch.L, seed_lch.C, new.H)
        self.seeds.set_derived(role, seed)
        roles = self._reseed(role, seed)
        return EditOutcome(EditKind.HUE_PROPAGATED, roles, seed)

    def _reseed(self, role: Role, seed: str) -> tuple[Role, ...]:
        self._regenerate(role, seed)
        if role is Role.PRIMARY:
            self._regenerate(Role.NEUTRAL, seed)
            return (Role.PRIMARY, Role.NEUTRAL)
        return (role,)

    def _regenerate(self, role: Role, seed: str) -> None:
        scale = scale_for_role(role, seed)
        if self.accessible:
            scale = correct_scale(scale, self.contrast)
        self.palette[role] = scale

    def _local(self, request: EditRequest) -> EditOutcome:
        self.palette[request.role][request.step] = request.new_hex
        return EditOutcome(EditKind.LOCAL, (request.role,))
