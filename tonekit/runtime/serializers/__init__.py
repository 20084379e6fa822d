# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Serializers for exporting a finished Palette.

Each serializer formats a Palette for one target. Serializers never
modify the palette; roles and steps are always emitted in canonical order.
"""

from tonekit.runtime.serializers.base import ExportFormat, SerializerFormat
from tonekit.runtime.serializers.stylesheet import to_css, to_tailwind_config
from tonekit.runtime.serializers.tabular import to_csv
from tonekit.runtime.serializers.tokens import to_json
from tonekit.schema import Palette


def serialize(palette: Palette, format: ExportFormat) -> str:
    """Serialize ``palette`` to the given export format."""
    if format == ExportFormat.CSV:
        return to_csv(palette)
    if format == ExportFormat.CSS:
        return to_css(palette)
    if format == ExportFormat.TAILWIND:
        return to_tailwind_config(palette)
    if format == ExportFormat.JSON:
        return to_json(palette)
    raise ValueError(f"Unsupported export format: {format}")


__all__ = [
    "ExportFormat",
    "SerializerFormat",
    "serialize",
    "to_csv",
    "to_css",
    "to_tailwind_config",
    "to_json",
]
