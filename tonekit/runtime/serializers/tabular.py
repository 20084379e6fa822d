# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
CSV serializer.

One row per palette cell with its contrast against white and black text,
so the sheet doubles as a quick accessibility audit.
"""

from __future__ import annotations

import csv
import io

from tonekit.engine.colorspace import contrast_ratio
from tonekit.schema import Palette

CSV_HEADER = ("Role", "Scale", "Hex", "Contrast (vs White)", "Contrast (vs Black)")


def to_csv(palette: Palette) -> str:
    """Serialize a Palette as CSV.

    Columns: Role, Scale, Hex, Contrast (vs White), Contrast (vs Black).
    Ratios are formatted with two decimals.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for role, step, value in palette.cells():
        writer.writerow((
            role.value,
            step,
            value,
            f"{contrast_ratio(value, '#ffffff'):.2f}",
            f"{contrast_ratio(value, '#000000'):.2f}",
        ))
    return buffer.getvalue()
