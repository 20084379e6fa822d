# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Tonekit -- Accessible color design-system generator.

Turns one to three seed colors (typed or extracted from an image) into a
seven-role palette of ten-step tonal scales, and propagates single-swatch
edits across it.

Quick start::

    from tonekit import generate_palette, to_css

    palette = generate_palette("#3b82f6", accessible=True)
    palette["primary"][500]   # "#..."
    to_css(palette)           # CSS custom properties

Logging goes through loguru and is disabled for this package by default;
call ``logger.enable("tonekit")`` to see it.
"""

from __future__ import annotations

__version__ = "1.0.0"

from loguru import logger

from tonekit.engine import (
    EditPropagationController,
    auto_fix_color,
    build_palette,
    extract_seed_colors,
    generate_palette,
    generate_scale,
    infer_missing_roles,
    palette_from_image,
)
from tonekit.engine.colorspace import contrast_ratio, hex_to_perceptual, perceptual_to_hex
from tonekit.errors import (
    BridgeError,
    ExtractionCancelled,
    ExtractionError,
    InvalidHexError,
    TonekitError,
)
from tonekit.runtime import push_palette_variables, serialize, to_css, to_csv, to_json, to_tailwind_config
from tonekit.schema import (
    EditRequest,
    LCHColor,
    Palette,
    Role,
    Scale,
    SeedSet,
    SeedState,
)

logger.disable("tonekit")

__all__ = [
    # Core API
    "generate_palette",
    "build_palette",
    "palette_from_image",
    "generate_scale",
    "infer_missing_roles",
    "auto_fix_color",
    "extract_seed_colors",
    "EditPropagationController",
    # Codec
    "hex_to_perceptual",
    "perceptual_to_hex",
    "contrast_ratio",
    # Types (commonly needed)
    "Palette",
    "Scale",
    "Role",
    "LCHColor",
    "SeedSet",
    "SeedState",
    "EditRequest",
    # Export
    "serialize",
    "to_csv",
    "to_css",
    "to_tailwind_config",
    "to_json",
    "push_palette_variables",
    # Errors
    "TonekitError",
    "InvalidHexError",
    "ExtractionError",
    "ExtractionCancelled",
    "BridgeError",
    # Version
    "__version__",
]
