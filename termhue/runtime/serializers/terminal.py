# Copyright (c) 2026 Termhue
# SPDX-License-Identifier: MIT

"""
Terminal emulator config exporters (Alacritty, Ghostty).

Both produce text meant to be pasted into the emulator's config file.
"""

from __future__ import annotations

from termhue.schema import ColorRow, Palette


def _alacritty_section(title: str, row: ColorRow) -> list[str]:
    lines = [f"[colors.{title}]"]
    for key, color in row.items():
        lines.append(f'{key} = "{color.hex}"')
    return lines


def to_alacritty(palette: Palette) -> str:
    """Serialize a palette as Alacritty ``[colors.*]`` TOML tables.

    Example::

        [colors.primary]
        background = "#171717"
        foreground = "#e2e2e2"
        dim_foreground = "#9e9e9e"

        [colors.normal]
        black = "#2c2c2c"
        ...

    The output has no trailing newline.
    """
    sections = [
        [
            "[colors.primary]",
            f'background = "{palette.background.hex}"',
            f'foreground = "{palette.foreground.hex}"',
            f'dim_foreground = "{palette.dim.white.hex}"',
        ],
        _alacritty_section("normal", palette.normal),
        _alacritty_section("bright", palette.bright),
        _alacritty_section("dim", palette.dim),
    ]
    return "\n\n".join("\n".join(lines) for lines in sections)


def to_ghostty(palette: Palette) -> str:
    """Serialize a palette as Ghostty config lines.

    Background and foreground first, then ``palette = N=#hex`` for the 16
    ANSI slots (normal row 0-7, bright row 8-15). Every line, including the
    last, ends with a newline.
    """
    lines = [
        f"background = {palette.background.hex}",
        f"foreground = {palette.foreground.hex}",
    ]
    ansi = palette.normal.values() + palette.bright.values()
    for index, color in enumerate(ansi):
        lines.append(f"palette = {index}={color.hex}")
    return "".join(f"{line}\n" for line in lines)
