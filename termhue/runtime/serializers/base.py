# Copyright (c) 2026 Termhue
# SPDX-License-Identifier: MIT

"""Base types for palette exporters."""

from enum import Enum


class ExportFormat(Enum):
    """Output format for exporters."""

    JSON = "json"
    ALACRITTY = "alacritty"
    GHOSTTY = "ghostty"
    SLACK = "slack"
