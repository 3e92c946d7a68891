"""Hex <-> unit RGB conversion used by Lottie color tracks."""
from __future__ import annotations

import math
import re
from typing import Sequence, Tuple

HEX_COLOR_RE = re.compile(r"#[0-9A-Fa-f]{6}")
_BARE_HEX_RE = re.compile(r"[0-9A-Fa-f]{6}")

UnitRGB = Tuple[float, float, float]


class ColorParseError(ValueError):
    """Raised when a color string is not a 6-digit hex color."""


def is_valid_hex(color: str) -> bool:
    return isinstance(color, str) and bool(HEX_COLOR_RE.fullmatch(color))


def normalize(color: str) -> str:
    """Lowercase a color and make sure it carries a leading '#'."""
    lowered = color.lower()
    if lowered.startswith("#"):
        return lowered
    return f"#{lowered}"


def hex_to_unit_rgb(color: str) -> UnitRGB:
    """
    Parse '#rrggbb' (or 'rrggbb', any case) into channels in [0, 1].

    Raises:
        ColorParseError: if the string is not exactly six hex digits.
    """
    if not isinstance(color, str):
        raise ColorParseError(f"Color must be a string, got {type(color).__name__}")
    digits = color[1:] if color.startswith("#") else color
    if not _BARE_HEX_RE.fullmatch(digits):
        raise ColorParseError(f"Invalid hex color: {color!r}")
    return (
        int(digits[0:2], 16) / 255,
        int(digits[2:4], 16) / 255,
        int(digits[4:6], 16) / 255,
    )


def _to_byte(channel: float) -> int:
    # round half up, then clamp into a byte
    value = int(math.floor(channel * 255 + 0.5))
    return max(0, min(255, value))


def unit_rgb_to_hex(rgb: Sequence[float]) -> str:
    r, g, b = rgb[0], rgb[1], rgb[2]
    return "#" + "".join(f"{_to_byte(c):02x}" for c in (r, g, b))
