# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""Tests for the palette data model."""

import pytest

from tonekit.errors import InvalidHexError
from tonekit.schema import (
    BRAND_ROLES,
    DERIVED_ROLES,
    EditRequest,
    LCHColor,
    Palette,
    Role,
    ROLES,
    Scale,
    Seed,
    SeedSet,
    SeedState,
    STEPS,
)


GRAYS = [
    "#f9fafb", "#f3f4f6", "#e5e7eb", "#d1d5db", "#9ca3af",
    "#6b7280", "#4b5563", "#374151", "#1f2937", "#111827",
]


def _palette() -> Palette:
    return Palette({role: Scale.from_list(GRAYS) for role in ROLES})


class TestRole:

    def test_seven_roles(self):
        assert len(ROLES) == 7
        assert set(BRAND_ROLES) | set(DERIVED_ROLES) == set(ROLES)

    def test_parse_case_insensitive(self):
        assert Role.parse("Primary") is Role.PRIMARY
        assert Role.parse(Role.ERROR) is Role.ERROR

    def test_parse_unknown(self):
        with pytest.raises(KeyError):
            Role.parse("tertiary")

    def test_is_brand(self):
        assert Role.ACCENT.is_brand
        assert not Role.NEUTRAL.is_brand


class TestLCHColor:

    def test_valid(self):
        color = LCHColor(L=50.0, C=30.0, H=120.0)
        assert not color.is_achromatic

    def test_achromatic(self):
        assert LCHColor(L=50.0, C=0.0).is_achromatic

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"L": -1.0, "C": 0.0},
            {"L": 101.0, "C": 0.0},
            {"L": 50.0, "C": -0.1},
            {"L": 50.0, "C": 10.0, "H": 360.0},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            LCHColor(**kwargs)

    def test_dict_roundtrip(self):
        color = LCHColor(L=42.0, C=12.5, H=300.0)
        assert LCHColor.from_dict(color.to_dict()) == color

    def test_hex(self):
        assert LCHColor(L=65.0, C=0.0).hex == "#9e9e9e"


class TestScale:

    def test_from_list(self):
        scale = Scale.from_list(GRAYS)
        assert list(scale) == list(STEPS)
        assert scale[500] == "#6b7280"
        assert scale.seed == "#6b7280"

    def test_missing_step(self):
        cells = dict(zip(STEPS, GRAYS))
        del cells[300]
        with pytest.raises(ValueError):
            Scale(cells)

    def test_extra_step(self):
        cells = dict(zip(STEPS, GRAYS))
        cells[950] = "#000000"
        with pytest.raises(ValueError):
            Scale(cells)

    def test_values_normalized(self):
        scale = Scale.from_list([c.upper().lstrip("#") for c in GRAYS])
        assert scale.values() == GRAYS

    def test_setitem(self):
        scale = Scale.from_list(GRAYS)
        scale[700] = "#ABCDEF"
        assert scale[700] == "#abcdef"

    def test_setitem_unknown_step(self):
        scale = Scale.from_list(GRAYS)
        with pytest.raises(KeyError):
            scale[550] = "#000000"

    def test_setitem_invalid_hex(self):
        scale = Scale.from_list(GRAYS)
        with pytest.raises(InvalidHexError):
            scale[500] = "blue"

    def test_copy_is_independent(self):
        scale = Scale.from_list(GRAYS)
        clone = scale.copy()
        clone[50] = "#ffffff"
        assert scale[50] == "#f9fafb"
        assert clone != scale

    def test_dict_roundtrip(self):
        scale = Scale.from_list(GRAYS)
        data = scale.to_dict()
        assert list(data) == [str(s) for s in STEPS]
        assert Scale.from_dict(data) == scale


class TestPalette:

    def test_requires_all_roles(self):
        scales = {role: Scale.from_list(GRAYS) for role in ROLES if role is not Role.ERROR}
        with pytest.raises(ValueError):
            Palette(scales)

    def test_requires_scales(self):
        scales = {role: Scale.from_list(GRAYS) for role in ROLES}
        scales[Role.ACCENT] = GRAYS
        with pytest.raises(TypeError):
            Palette(scales)

    def test_access_by_name(self):
        palette = _palette()
        assert palette["primary"] is palette[Role.PRIMARY]

    def test_cells(self):
        cells = list(_palette().cells())
        assert len(cells) == 70
        assert cells[0] == (Role.PRIMARY, 50, "#f9fafb")
        assert cells[-1] == (Role.ERROR, 900, "#111827")

    def test_dict_roundtrip(self):
        palette = _palette()
        data = palette.to_dict()
        assert list(data) == [r.value for r in ROLES]
        assert Palette.from_dict(data) == palette

    def test_copy_is_deep(self):
        palette = _palette()
        clone = palette.copy()
        clone[Role.PRIMARY][500] = "#ff0000"
        assert palette[Role.PRIMARY][500] == "#6b7280"


class TestSeeds:

    def test_seed_invariant(self):
        with pytest.raises(ValueError):
            Seed(SeedState.USER_SET, None)
        with pytest.raises(ValueError):
            Seed(SeedState.UNSET, "#000000")

    def test_starts_unset(self):
        seeds = SeedSet()
        assert all(seed.state is SeedState.UNSET for _, seed in seeds)
        assert seeds.known() == {}

    def test_from_hexes(self):
        seeds = SeedSet.from_hexes("#3B82F6", None, "")
        assert seeds.get(Role.PRIMARY) == Seed(SeedState.USER_SET, "#3b82f6")
        assert not seeds.is_set(Role.SECONDARY)
        assert not seeds.is_set(Role.ACCENT)

    def test_derived_and_clear(self):
        seeds = SeedSet()
        seeds.set_derived("secondary", "#123456")
        assert seeds.get(Role.SECONDARY).state is SeedState.DERIVED
        seeds.clear(Role.SECONDARY)
        assert seeds.hex(Role.SECONDARY) is None

    def test_reset(self):
        seeds = SeedSet.from_hexes("#111111", "#222222", "#333333")
        seeds.reset()
        assert seeds.known() == {}

    def test_non_brand_role_rejected(self):
        with pytest.raises(KeyError):
            SeedSet().set_user(Role.NEUTRAL, "#808080")

    def test_invalid_hex_rejected(self):
        with pytest.raises(InvalidHexError):
            SeedSet().set_user(Role.PRIMARY, "#zzzzzz")


class TestEditRequest:

    def test_normalizes(self):
        request = EditRequest("Primary", 500, "ABCDEF")
        assert request.role is Role.PRIMARY
        assert request.new_hex == "#abcdef"
        assert request.is_seed_step

    def test_unknown_step(self):
        with pytest.raises(KeyError):
            EditRequest(Role.PRIMARY, 450, "#abcdef")

    def test_unknown_role(self):
        with pytest.raises(KeyError):
            EditRequest("tertiary", 500, "#abcdef")

    def test_invalid_hex(self):
        with pytest.raises(InvalidHexError):
            EditRequest(Role.PRIMARY, 500, "#abc")
