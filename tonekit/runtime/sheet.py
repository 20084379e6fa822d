# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Printable swatch sheet.

Renders a Palette as one row of ten labelled swatches per role and saves
it as a PDF through Pillow.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from loguru import logger

from tonekit.engine.colorspace import hex_to_rgb
from tonekit.schema import Palette, STEPS

# Layout in pixels
SWATCH = 60
GAP = 8
MARGIN = 40
TITLE_HEIGHT = 50
LABEL_HEIGHT = 24
CAPTION_HEIGHT = 32
ROW_GAP = 16


def _require_pil():
    try:
        from PIL import Image, ImageDraw, ImageFont
    except ImportError as e:
        raise ImportError(
            "Pillow is required for swatch sheets. "
            "Install with: pip install tonekit[image]"
        ) from e
    return Image, ImageDraw, ImageFont


def render_swatch_sheet(palette: Palette, *, title: str = "UI Color Palette"):
    """
    Draw the palette as a swatch sheet.

    Returns:
        RGB Pillow image
    """
    Image, ImageDraw, ImageFont = _require_pil()
    font = ImageFont.load_default()

    row_height = LABEL_HEIGHT + SWATCH + CAPTION_HEIGHT + ROW_GAP
    width = 2 * MARGIN + len(STEPS) * SWATCH + (len(STEPS) - 1) * GAP
    height = 2 * MARGIN + TITLE_HEIGHT + len(palette) * row_height

    sheet = Image.new("RGB", (width, height), "white")
    draw = ImageDraw.Draw(sheet)
    draw.text((MARGIN, MARGIN), title, fill="black", font=font)

    y = MARGIN + TITLE_HEIGHT
    for role, scale in palette.items():
        draw.text((MARGIN, y), role.value.capitalize(), fill="black", font=font)
        top = y + LABEL_HEIGHT
        for index, (step, value) in enumerate(scale.items()):
            x = MARGIN + index * (SWATCH + GAP)
            draw.rectangle(
                (x, top, x + SWATCH - 1, top + SWATCH - 1),
                fill=hex_to_rgb(value),
                outline=(228, 228, 231),
            )
            draw.text((x, top + SWATCH + 4), str(step), fill="black", font=font)
            draw.text((x, top + SWATCH + 16), value, fill="black", font=font)
        y += row_height

    return sheet


def write_swatch_pdf(
    palette: Palette,
    path: Union[str, Path],
    *,
    title: str = "UI Color Palette",
    resolution: float = 72.0,
) -> Path:
    """Render the swatch sheet and save it as a PDF at ``path``."""
    path = Path(path)
    render_swatch_sheet(palette, title=title).save(path, "PDF", resolution=resolution)
    logger.info("Wrote swatch sheet to {}", path)
    return path
