# Copyright (c) 2026 Termhue
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Termhue.

Turns a generated Palette into the text formats terminals and chat clients
accept. The delivery layer never modifies palette content.
"""

from termhue.runtime.serializers import (
    ExportFormat,
    serialize,
    to_alacritty,
    to_ghostty,
    to_json,
    to_slack,
)

__all__ = [
    "serialize",
    "to_json",
    "to_alacritty",
    "to_ghostty",
    "to_slack",
    "ExportFormat",
]
