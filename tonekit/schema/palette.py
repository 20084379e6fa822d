# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Palette data model: canonical types for a generated color system.

Design principles:
- Fixed shape: a Palette has exactly seven roles, a Scale exactly ten steps.
  Both are validated at construction; keys can never be added or removed.
- Hex is the canonical I/O form: every cell stores a lowercase ``#rrggbb``.
- Colors are immutable values; Scales and Palettes are mutable containers
  so that interactive edits can be applied in place.

CIE LCh Color Space (D50):
- L (Lightness): 0 = black, 100 = white
- C (Chroma): 0 = gray, ~130 = most saturated sRGB colors
- H (Hue): 0-360 degrees (≈40=red, ≈100=yellow, ≈140=green, ≈280=blue)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Mapping, Optional, Union


# =============================================================================
# Roles and Steps
# =============================================================================


class Role(str, Enum):
    """The seven semantic color purposes of a palette."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"
    NEUTRAL = "neutral"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"

    @property
    def is_brand(self) -> bool:
        """True for roles generated from a user/extracted brand seed."""
        return self in BRAND_ROLES

    @classmethod
    def parse(cls, value: Union[str, Role]) -> Role:
        """Coerce a role name (case-insensitive) to a Role."""
        if isinstance(value, Role):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise KeyError(f"Unknown role '{value}'") from None


ROLES: tuple[Role, ...] = tuple(Role)

BRAND_ROLES: tuple[Role, ...] = (Role.PRIMARY, Role.SECONDARY, Role.ACCENT)

DERIVED_ROLES: tuple[Role, ...] = (
    Role.NEUTRAL,
    Role.SUCCESS,
    Role.WARNING,
    Role.ERROR,
)

STEPS: tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)

# The step a role's seed is rendered at
SEED_STEP = 500


def _check_step(step: int) -> int:
    step = int(step)
    if step not in STEPS:
        raise KeyError(f"Unknown scale step {step}; expected one of {STEPS}")
    return step


def _normalize(value: str) -> str:
    from tonekit.engine.colorspace import normalize_hex
    return normalize_hex(value)


# =============================================================================
# Color
# =============================================================================


@dataclass(frozen=True, slots=True)
class LCHColor:
    """
    A single color in CIE LCh (D50).

    Attributes:
        L: Lightness (0 = black, 100 = white)
        C: Chroma (0 = neutral gray)
        H: Hue in degrees [0, 360), None for achromatic colors
    """
    L: float
    C: float
    H: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate color values are within expected ranges."""
        if not 0.0 <= self.L <= 100.0:
            raise ValueError(f"Lightness must be 0-100, got {self.L}")
        if self.C < 0.0:
            raise ValueError(f"Chroma must be >= 0, got {self.C}")
        if self.H is not None and not 0.0 <= self.H < 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.H}")

    @property
    def is_achromatic(self) -> bool:
        """True if the color has no defined hue."""
        return self.H is None

    @property
    def hex(self) -> str:
        """Hex rendering of this color (gamut-clipped)."""
        from tonekit.engine.colorspace import perceptual_to_hex
        return perceptual_to_hex(self)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"L": self.L, "C": self.C, "H": self.H}

    @classmethod
    def from_dict(cls, data: dict) -> LCHColor:
        """Deserialize from dictionary."""
        return cls(L=data["L"], C=data["C"], H=data.get("H"))


# =============================================================================
# Scale and Palette
# =============================================================================


class Scale:
    """
    A ten-step tonal ramp for one role, keyed 50…900.

    The step set is fixed. Values may be reassigned (in-place edits) but
    every value is validated and normalized to lowercase ``#rrggbb``.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Mapping[int, str]) -> None:
        keys = {int(k) for k in cells}
        if keys != set(STEPS):
            missing = sorted(set(STEPS) - keys)
            extra = sorted(keys - set(STEPS))
            raise ValueError(
                f"Scale must have exactly steps {STEPS} "
                f"(missing={missing}, extra={extra})"
            )
        normalized = {int(k): _normalize(v) for k, v in cells.items()}
        self._cells = {step: normalized[step] for step in STEPS}

    @classmethod
    def from_list(cls, hexes: list[str]) -> Scale:
        """Build a Scale from ten hex values in step order."""
        if len(hexes) != len(STEPS):
            raise ValueError(f"Expected {len(STEPS)} colors, got {len(hexes)}")
        return cls(dict(zip(STEPS, hexes)))

    def __getitem__(self, step: int) -> str:
        return self._cells[_check_step(step)]

    def __setitem__(self, step: int, value: str) -> None:
        self._cells[_check_step(step)] = _normalize(value)

    def __iter__(self) -> Iterator[int]:
        return iter(STEPS)

    def __len__(self) -> int:
        return len(STEPS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scale):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Scale({self._cells!r})"

    def items(self) -> Iterator[tuple[int, str]]:
        return iter(self._cells.items())

    def values(self) -> list[str]:
        return list(self._cells.values())

    @property
    def seed(self) -> str:
        """The step-500 value."""
        return self._cells[SEED_STEP]

    def copy(self) -> Scale:
        return Scale(dict(self._cells))

    def to_dict(self) -> dict[str, str]:
        """Serialize to dictionary (string step keys, JSON-ready)."""
        return {str(step): value for step, value in self._cells.items()}

    @classmethod
    def from_dict(cls, data: Mapping) -> Scale:
        """Deserialize from dictionary (int or string step keys)."""
        return cls({int(k): v for k, v in data.items()})


class Palette:
    """
    A complete color system: exactly one Scale for each of the seven roles.

    Always fully populated. Roles can be addressed by Role or by name.
    """

    __slots__ = ("_scales",)

    def __init__(self, scales: Mapping[Union[Role, str], Scale]) -> None:
        parsed = {Role.parse(role): scale for role, scale in scales.items()}
        if set(parsed) != set(ROLES):
            missing = [r.value for r in ROLES if r not in parsed]
            raise ValueError(f"Palette must define all roles (missing={missing})")
        for role, scale in parsed.items():
            if not isinstance(scale, Scale):
                raise TypeError(f"Role '{role.value}' must map to a Scale")
        self._scales = {role: parsed[role] for role in ROLES}

    def __getitem__(self, role: Union[Role, str]) -> Scale:
        return self._scales[Role.parse(role)]

    def __setitem__(self, role: Union[Role, str], scale: Scale) -> None:
        if not isinstance(scale, Scale):
            raise TypeError("Palette entries must be Scale instances")
        self._scales[Role.parse(role)] = scale

    def __iter__(self) -> Iterator[Role]:
        return iter(ROLES)

    def __len__(self) -> int:
        return len(ROLES)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self._scales == other._scales

    def __repr__(self) -> str:
        seeds = ", ".join(f"{r.value}={s.seed}" for r, s in self._scales.items())
        return f"Palette({seeds})"

    def items(self) -> Iterator[tuple[Role, Scale]]:
        return iter(self._scales.items())

    def cells(self) -> Iterator[tuple[Role, int, str]]:
        """Yield every (role, step, hex) in canonical order."""
        for role, scale in self._scales.items():
            for step, value in scale.items():
                yield role, step, value

    def copy(self) -> Palette:
        return Palette({role: scale.copy() for role, scale in self._scales.items()})

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Serialize to a nested ``role -> step -> hex`` dictionary."""
        return {role.value: scale.to_dict() for role, scale in self._scales.items()}

    @classmethod
    def from_dict(cls, data: Mapping) -> Palette:
        """Deserialize from a nested ``role -> step -> hex`` dictionary."""
        return cls({role: Scale.from_dict(scale) for role, scale in data.items()})


# =============================================================================
# Seeds
# =============================================================================


class SeedState(Enum):
    """Where a brand seed came from."""
    UNSET = "unset"
    USER_SET = "user_set"  # Typed, picked, or extracted from an image
    DERIVED = "derived"  # Filled in by inference or hue propagation


@dataclass(frozen=True, slots=True)
class Seed:
    """A brand seed: its provenance and (unless unset) its hex value."""
    state: SeedState = SeedState.UNSET
    hex: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.state is SeedState.UNSET) != (self.hex is None):
            raise ValueError("A seed has a hex value exactly when it is set")


def _brand_role(role: Union[Role, str]) -> Role:
    parsed = Role.parse(role)
    if not parsed.is_brand:
        raise KeyError(f"'{parsed.value}' is not a brand role")
    return parsed


class SeedSet:
    """
    The session's brand seeds: one Seed per primary/secondary/accent.

    Inference only ever fills UNSET entries, so a DERIVED seed stays put
    when other seeds change later.
    """

    __slots__ = ("_seeds",)

    def __init__(self) -> None:
        self._seeds: dict[Role, Seed] = {role: Seed() for role in BRAND_ROLES}

    @classmethod
    def from_hexes(
        cls,
        primary: Optional[str] = None,
        secondary: Optional[str] = None,
        accent: Optional[str] = None,
    ) -> SeedSet:
        """Build from manual entry; empty values stay UNSET."""
        seeds = cls()
        for role, value in zip(BRAND_ROLES, (primary, secondary, accent)):
            if value:
                seeds.set_user(role, value)
        return seeds

    @classmethod
    def from_extraction(cls, result) -> SeedSet:
        """Build from an ExtractionResult; an unresolved secondary stays UNSET."""
        return cls.from_hexes(result.primary, result.secondary, result.accent)

    def get(self, role: Union[Role, str]) -> Seed:
        return self._seeds[_brand_role(role)]

    def hex(self, role: Union[Role, str]) -> Optional[str]:
        return self.get(role).hex

    def is_set(self, role: Union[Role, str]) -> bool:
        return self.get(role).state is not SeedState.UNSET

    def set_user(self, role: Union[Role, str], value: str) -> None:
        self._seeds[_brand_role(role)] = Seed(SeedState.USER_SET, _normalize(value))

    def set_derived(self, role: Union[Role, str], value: str) -> None:
        self._seeds[_brand_role(role)] = Seed(SeedState.DERIVED, _normalize(value))

    def clear(self, role: Union[Role, str]) -> None:
        self._seeds[_brand_role(role)] = Seed()

    def reset(self) -> None:
        """Forget every seed (the user restarted input)."""
        for role in BRAND_ROLES:
            self._seeds[role] = Seed()

    def known(self) -> dict[Role, str]:
        """Set seeds only, as ``role -> hex``."""
        return {
            role: seed.hex
            for role, seed in self._seeds.items()
            if seed.hex is not None
        }

    def __iter__(self) -> Iterator[tuple[Role, Seed]]:
        return iter(self._seeds.items())

    def __repr__(self) -> str:
        parts = ", ".join(
            f"{role.value}={seed.state.value}:{seed.hex}"
            for role, seed in self._seeds.items()
        )
        return f"SeedSet({parts})"


# =============================================================================
# Edits
# =============================================================================


@dataclass(frozen=True, slots=True)
class EditRequest:
    """A single-cell edit: set ``palette[role][step]`` to ``new_hex``."""
    role: Role
    step: int
    new_hex: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", Role.parse(self.role))
        object.__setattr__(self, "step", _check_step(self.step))
        object.__setattr__(self, "new_hex", _normalize(self.new_hex))

    @property
    def is_seed_step(self) -> bool:
        return self.step == SEED_STEP
