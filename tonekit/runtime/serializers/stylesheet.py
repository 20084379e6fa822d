# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Stylesheet serializers: CSS custom properties and a Tailwind config.
"""

from __future__ import annotations

import json

from tonekit.schema import Palette


def to_css(palette: Palette, *, prefix: str = "color", selector: str = ":root") -> str:
    """Serialize a Palette as CSS custom properties.

    Example::

        :root {
          --color-primary-50: <hex>;
          ...
          --color-error-900: <hex>;
        }
    """
    lines = [f"{selector} {{"]
    for role, step, value in palette.cells():
        lines.append(f"  --{prefix}-{role.value}-{step}: {value};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def to_tailwind_config(palette: Palette) -> str:
    """Serialize a Palette as a ``tailwind.config.js`` module.

    Colors land under ``theme.extend.colors`` so Tailwind's defaults stay
    available alongside them.
    """
    config = {"theme": {"extend": {"colors": palette.to_dict()}}}
    return f"module.exports = {json.dumps(config, indent=2)};"
