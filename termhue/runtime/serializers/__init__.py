# Copyright (c) 2026 Termhue
# SPDX-License-Identifier: MIT

"""
Exporters for generated palettes.

Each exporter formats a Palette for one consumer. Exporters only read the
palette's hex values; nothing is recomputed.
"""

from __future__ import annotations

from typing import Union

from termhue.runtime.serializers.base import ExportFormat
from termhue.runtime.serializers.slack import to_slack
from termhue.runtime.serializers.structured import to_json
from termhue.runtime.serializers.terminal import to_alacritty, to_ghostty
from termhue.schema import Palette

_EXPORTERS = {
    ExportFormat.JSON: to_json,
    ExportFormat.ALACRITTY: to_alacritty,
    ExportFormat.GHOSTTY: to_ghostty,
    ExportFormat.SLACK: to_slack,
}


def serialize(palette: Palette, format: Union[ExportFormat, str]) -> str:
    """Serialize ``palette`` in the given format.

    Raises:
        ValueError: If ``format`` is not a known ExportFormat or id.
    """
    try:
        fmt = ExportFormat(format)
    except ValueError:
        raise ValueError(
            f"Unknown export format {format!r}; expected one of "
            f"{[f.value for f in ExportFormat]}"
        ) from None
    return _EXPORTERS[fmt](palette)


__all__ = [
    "ExportFormat",
    "serialize",
    "to_json",
    "to_alacritty",
    "to_ghostty",
    "to_slack",
]
