# Copyright (c) 2026 Termhue
# SPDX-License-Identifier: MIT

"""
JSON exporter.

Hex values only, grouped by row. Row keys are the lowercased color names,
so bright entries read ``brred``, dim entries ``dimred``.
"""

from __future__ import annotations

import json

from termhue.schema import ColorRow, Palette


def _row_to_hex_map(row: ColorRow) -> dict[str, str]:
    return {color.name.lower(): color.hex for color in row.values()}


def to_json(palette: Palette, *, indent: int | None = 2) -> str:
    """Serialize a palette as a JSON document.

    Example::

        {
          "background": "#171717",
          "foreground": "#e2e2e2",
          "colors": {
            "normal": { "black": "#...", "red": "#...", ... },
            "bright": { "brblack": "#...", ... },
            "dim": { "dimblack": "#...", ... }
          }
        }
    """
    data = {
        "background": palette.background.hex,
        "foreground": palette.foreground.hex,
        "colors": {
            "normal": _row_to_hex_map(palette.normal),
            "bright": _row_to_hex_map(palette.bright),
            "dim": _row_to_hex_map(palette.dim),
        },
    }
    return json.dumps(data, indent=indent)
