# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""JSON serializer: a nested ``role -> step -> hex`` object."""

from __future__ import annotations

import json

from tonekit.runtime.serializers.base import SerializerFormat
from tonekit.schema import Palette


def to_json(
    palette: Palette,
    *,
    format: SerializerFormat = SerializerFormat.JSON_PRETTY,
) -> str:
    """Serialize a Palette as JSON.

    Round-trips through ``Palette.from_dict(json.loads(...))``.
    """
    data = palette.to_dict()
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))
