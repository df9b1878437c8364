# Copyright (c) 2026 Termhue
# SPDX-License-Identifier: MIT

"""
Editor state: config plus the anchor hex shown next to it.

Every transition returns a new EditorState in which the config and the
anchor hex were updated together, so a caller never observes one without
the other.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from termhue.engine.colorspace import InvalidHexError, is_valid_hex, normalize_hex
from termhue.engine.palette import (
    BASE_HUES,
    DEFAULT_CONFIG,
    build_palette,
    compute_hex_input,
    config_from_hex,
    resolve_base_hue_key,
)
from termhue.schema import Palette, PaletteConfig

logger = logging.getLogger(__name__)

ConfigChange = Union[PaletteConfig, Callable[[PaletteConfig], PaletteConfig]]


@dataclass(frozen=True, slots=True)
class EditorState:
    """
    Attributes:
        config: Current palette config
        active_base_hue: Base hue the anchor hex is computed for
        hex_input: Anchor hex for ``active_base_hue`` under ``config``
    """
    config: PaletteConfig
    active_base_hue: float
    hex_input: str

    @property
    def palette(self) -> Palette:
        return build_palette(self.config)


def initial_state() -> EditorState:
    """Default config anchored on blue."""
    base = BASE_HUES["blue"]
    return EditorState(
        config=DEFAULT_CONFIG,
        active_base_hue=base,
        hex_input=compute_hex_input(DEFAULT_CONFIG, base),
    )


def update_config(
    state: EditorState,
    change: ConfigChange,
    base_hue: Optional[float] = None,
) -> EditorState:
    """
    Apply a config change and recompute the anchor hex in the same step.

    Args:
        state: Current state
        change: New config, or a function from the old config to the new one
        base_hue: Anchor hue to switch to; defaults to the active one
    """
    new_config = change(state.config) if callable(change) else change
    anchor = state.active_base_hue if base_hue is None else base_hue
    return EditorState(
        config=new_config,
        active_base_hue=anchor,
        hex_input=compute_hex_input(new_config, anchor),
    )


def apply_hex(state: EditorState, text: str) -> EditorState:
    """
    Fit the config to a custom accent color.

    The color snaps to its nearest base hue, which becomes the active one;
    the hue shift, lightness and chroma are set so that slot reproduces the
    color as closely as the accent bounds allow.

    Raises:
        InvalidHexError: If ``text`` is not a 3- or 6-digit hex color.
    """
    if not is_valid_hex(text):
        logger.debug("Rejected custom color %r", text)
        raise InvalidHexError("Invalid Hex Code")

    hex_color = normalize_hex(text)
    new_config, closest = config_from_hex(state.config, hex_color)
    logger.debug(
        "Applied custom color %s: base hue %s, shift %s",
        hex_color, closest, new_config.hue_shift,
    )
    return update_config(state, new_config, base_hue=closest)


def reset(state: EditorState) -> EditorState:
    """Back to the default config anchored on blue."""
    return initial_state()


def accent_color(state: EditorState, palette: Optional[Palette] = None) -> str:
    """Bright color of the active base hue, used to tint editor chrome."""
    if palette is None:
        palette = state.palette
    key = resolve_base_hue_key(state.active_base_hue)
    return palette.bright[key].hex
