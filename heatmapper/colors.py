"""Mapping heights onto a fixed ten-step colour scale."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable

COLOR_SCALE: tuple[str, ...] = (
    "#00008F",
    "#0000FF",
    "#006FFF",
    "#00DFFF",
    "#4FFFAF",
    "#A9FF3F",
    "#FFDF00",
    "#FF6F00",
    "#FF0000",
    "#7F0000",
)

_HEX_COLOR = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


def hex_to_rgb(hex_color: str) -> int:
    """Convert ``#RRGGBB`` into the packed integer 0xRRGGBB."""
    match = _HEX_COLOR.match(hex_color)
    if match is None:
        raise ValueError(f"not a #RRGGBB colour: {hex_color!r}")
    red, green, blue = (int(part, 16) for part in match.groups())
    return (red << 16) | (green << 8) | blue


def color_for_height(height: float, min_height: float, max_height: float) -> str:
    """Return the scale colour for ``height`` within ``[min_height, max_height]``.

    Heights outside the range are clamped to the first or last colour; an
    empty range maps everything onto the first colour.
    """
    span = max_height - min_height
    if span == 0:
        return COLOR_SCALE[0]
    scaled = (height - min_height) / span * len(COLOR_SCALE)
    if not math.isfinite(scaled):
        return COLOR_SCALE[0]
    index = min(max(int(scaled), 0), len(COLOR_SCALE) - 1)
    return COLOR_SCALE[index]


def colorize(heights: Iterable[float], min_height: float, max_height: float) -> list[int]:
    """Map every height onto its packed 0xRRGGBB colour."""
    return [hex_to_rgb(color_for_height(h, min_height, max_height)) for h in heights]