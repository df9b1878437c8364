# Copyright (c) 2026 Termhue
# SPDX-License-Identifier: MIT

"""Slack sidebar theme exporter."""

from __future__ import annotations

from termhue.schema import Palette

# Slack's active-item text slot is always plain white.
SLACK_ACTIVE_TEXT = "#FFFFFF"


def to_slack(palette: Palette) -> str:
    """Serialize a palette as Slack's comma-separated 8-color theme string.

    Field order: column background, menu background hover, active item,
    active item text, hover item, text color, active presence, mention badge.
    """
    return ",".join([
        palette.background.hex,
        palette.dim.black.hex,
        palette.normal.blue.hex,
        SLACK_ACTIVE_TEXT,
        palette.normal.black.hex,
        palette.foreground.hex,
        palette.normal.green.hex,
        palette.normal.red.hex,
    ])
