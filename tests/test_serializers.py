# Copyright (c) 2026 Termhue
# SPDX-License-Identifier: MIT

"""Tests for the palette exporters (JSON, Alacritty, Ghostty, Slack)."""

import json

import pytest

from termhue.engine.palette import DEFAULT_CONFIG, build_palette
from termhue.runtime import (
    ExportFormat,
    serialize,
    to_alacritty,
    to_ghostty,
    to_json,
    to_slack,
)


@pytest.fixture
def palette():
    return build_palette(DEFAULT_CONFIG)


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------

class TestToJson:

    def test_valid_json(self, palette):
        data = json.loads(to_json(palette))
        assert set(data) == {"background", "foreground", "colors"}
        assert set(data["colors"]) == {"normal", "bright", "dim"}

    def test_primary_values(self, palette):
        data = json.loads(to_json(palette))
        assert data["background"] == palette.background.hex
        assert data["foreground"] == palette.foreground.hex

    def test_keys_are_lowercased_names(self, palette):
        colors = json.loads(to_json(palette))["colors"]
        assert list(colors["normal"]) == [
            "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white",
        ]
        assert colors["bright"]["brred"] == palette.bright.red.hex
        assert colors["dim"]["dimwhite"] == palette.dim.white.hex

    def test_indent(self, palette):
        assert to_json(palette).startswith('{\n  "background"')
        assert "\n" not in to_json(palette, indent=None)


# ---------------------------------------------------------------------------
# to_alacritty
# ---------------------------------------------------------------------------

class TestToAlacritty:

    def test_sections(self, palette):
        out = to_alacritty(palette)
        sections = out.split("\n\n")
        assert [s.splitlines()[0] for s in sections] == [
            "[colors.primary]", "[colors.normal]", "[colors.bright]", "[colors.dim]",
        ]

    def test_primary(self, palette):
        primary = to_alacritty(palette).split("\n\n")[0].splitlines()
        assert primary[1] == f'background = "{palette.background.hex}"'
        assert primary[2] == f'foreground = "{palette.foreground.hex}"'
        assert primary[3] == f'dim_foreground = "{palette.dim.white.hex}"'

    def test_rows(self, palette):
        out = to_alacritty(palette)
        assert f'[colors.dim]\nblack = "{palette.dim.black.hex}"' in out
        assert f'magenta = "{palette.bright.magenta.hex}"' in out
        assert out.count(" = ") == 3 + 3 * 8

    def test_no_trailing_newline(self, palette):
        out = to_alacritty(palette)
        assert out.endswith(f'white = "{palette.dim.white.hex}"')


# ---------------------------------------------------------------------------
# to_ghostty
# ---------------------------------------------------------------------------

class TestToGhostty:

    def test_line_layout(self, palette):
        lines = to_ghostty(palette).splitlines()
        assert len(lines) == 18
        assert lines[0] == f"background = {palette.background.hex}"
        assert lines[1] == f"foreground = {palette.foreground.hex}"

    def test_palette_indices(self, palette):
        lines = to_ghostty(palette).splitlines()[2:]
        assert lines[0] == f"palette = 0={palette.normal.black.hex}"
        assert lines[7] == f"palette = 7={palette.normal.white.hex}"
        assert lines[8] == f"palette = 8={palette.bright.black.hex}"
        assert lines[15] == f"palette = 15={palette.bright.white.hex}"

    def test_trailing_newline(self, palette):
        assert to_ghostty(palette).endswith("\n")


# ---------------------------------------------------------------------------
# to_slack
# ---------------------------------------------------------------------------

class TestToSlack:

    def test_field_order(self, palette):
        expected = ",".join([
            palette.background.hex,
            palette.dim.black.hex,
            palette.normal.blue.hex,
            "#FFFFFF",
            palette.normal.black.hex,
            palette.foreground.hex,
            palette.normal.green.hex,
            palette.normal.red.hex,
        ])
        assert to_slack(palette) == expected

    def test_eight_fields(self, palette):
        fields = to_slack(palette).split(",")
        assert len(fields) == 8
        assert fields[3] == "#FFFFFF"


# ---------------------------------------------------------------------------
# serialize
# ---------------------------------------------------------------------------

class TestSerialize:

    @pytest.mark.parametrize(
        "fmt, exporter",
        [
            (ExportFormat.JSON, to_json),
            (ExportFormat.ALACRITTY, to_alacritty),
            (ExportFormat.GHOSTTY, to_ghostty),
            (ExportFormat.SLACK, to_slack),
        ],
    )
    def test_dispatch(self, palette, fmt, exporter):
        assert serialize(palette, fmt) == exporter(palette)
        assert serialize(palette, fmt.value) == exporter(palette)

    def test_unknown_format(self, palette):
        with pytest.raises(ValueError, match="Unknown export format"):
            serialize(palette, "xml")
