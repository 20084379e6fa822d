# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Tonekit.

Everything downstream of a finished Palette:

1. Serializers -- CSV, CSS custom properties, Tailwind config, JSON
2. Swatch sheet -- printable PDF (requires Pillow)
3. Variable bridge -- upsert into a design tool's variable collection

The delivery layer never modifies palette content.
"""

from tonekit.runtime.bridge import (
    BridgeReport,
    InMemoryVariableHost,
    VariableHost,
    push_palette_variables,
)
from tonekit.runtime.serializers import (
    ExportFormat,
    SerializerFormat,
    serialize,
    to_css,
    to_csv,
    to_json,
    to_tailwind_config,
)
from tonekit.runtime.sheet import render_swatch_sheet, write_swatch_pdf

__all__ = [
    "serialize",
    "to_csv",
    "to_css",
    "to_tailwind_config",
    "to_json",
    "ExportFormat",
    "SerializerFormat",
    "render_swatch_sheet",
    "write_swatch_pdf",
    "push_palette_variables",
    "VariableHost",
    "InMemoryVariableHost",
    "BridgeReport",
]
