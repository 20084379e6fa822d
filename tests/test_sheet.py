# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""Tests for the printable swatch sheet."""

import pytest

from tonekit.engine.colorspace import hex_to_rgb
from tonekit.engine.pipeline import generate_palette
from tonekit.runtime.sheet import MARGIN, TITLE_HEIGHT, LABEL_HEIGHT, render_swatch_sheet, write_swatch_pdf

pytest.importorskip("PIL")


@pytest.fixture(scope="module")
def palette():
    return generate_palette("#3b82f6")


class TestSwatchSheet:

    def test_render(self, palette):
        sheet = render_swatch_sheet(palette)
        assert sheet.mode == "RGB"
        assert sheet.size[0] > sheet.size[1] / 2

    def test_first_swatch_color(self, palette):
        sheet = render_swatch_sheet(palette)
        x = MARGIN + 30
        y = MARGIN + TITLE_HEIGHT + LABEL_HEIGHT + 30
        assert sheet.getpixel((x, y)) == hex_to_rgb(palette["primary"][50])

    def test_write_pdf(self, palette, tmp_path):
        path = write_swatch_pdf(palette, tmp_path / "palette.pdf")
        assert path.exists()
        assert path.read_bytes().startswith(b"%PDF")
