#!/usr/bin/env python3
"""
Human-readable color names from HSL: a hue family plus a lightness modifier.
"""

from dataclasses import asdict, dataclass
from typing import Iterable, Optional

from color_model import hex_to_hsl, normalize_hex


# =============================================================================
# Lookup Tables
# =============================================================================

# (name, lo, hi) with lo inclusive, hi exclusive. First match wins.
HUE_NAMES = (
    ('Crimson Blaze', 0, 15),
    ('Sunset Orange', 15, 35),
    ('Golden Hour', 35, 55),
    ('Lime Zest', 55, 80),
    ('Emerald Dream', 80, 150),
    ('Teal Whisper', 150, 180),
    ('Ocean Depth', 180, 210),
    ('Cobalt Sky', 210, 240),
    ('Indigo Night', 240, 270),
    ('Royal Violet', 270, 300),
    ('Magenta Pulse', 300, 330),
    ('Rose Petal', 330, 360),
)

LIGHTNESS_MODIFIERS = (
    ('Deep', 0, 25),
    ('Rich', 25, 40),
    ('', 40, 60),
    ('Soft', 60, 75),
    ('Pale', 75, 90),
    ('Whisper', 90, 100),
)

# Saturation below this is named by lightness alone
ACHROMATIC_SATURATION = 10

NEUTRAL_NAMES = (
    ('Midnight Black', 15),
    ('Charcoal', 30),
    ('Slate Gray', 50),
    ('Silver Mist', 70),
    ('Cloud White', 85),
)
NEUTRAL_FALLBACK = 'Snow White'

UNKNOWN_NAME = 'Unknown'


def _lookup(table, value) -> Optional[str]:
    for name, lo, hi in table:
        if lo <= value < hi:
            return name
    return None


def get_color_name(hex_color: str) -> str:
    """Generate a descriptive name for a hex color."""
    hsl = hex_to_hsl(hex_color)
    if hsl is None:
        return UNKNOWN_NAME

    # Neutral colors
    if hsl.s < ACHROMATIC_SATURATION:
        for name, upper in NEUTRAL_NAMES:
            if hsl.l < upper:
                return name
        return NEUTRAL_FALLBACK

    hue_name = _lookup(HUE_NAMES, hsl.h)
    modifier = _lookup(LIGHTNESS_MODIFIERS, hsl.l) or ''

    return f"{modifier} {hue_name}" if modifier else hue_name


# =============================================================================
# Named Colors
# =============================================================================

@dataclass(frozen=True)
class Color:
    """A palette entry. The name is always derived from the hex."""
    hex: str
    name: str

    @classmethod
    def from_hex(cls, hex_color: str) -> Optional['Color']:
        normalized = normalize_hex(hex_color)
        if normalized is None:
            return None
        return cls(hex=normalized, name=get_color_name(normalized))

    def to_dict(self) -> dict:
        return asdict(self)


def name_colors(hex_colors: Iterable[str]) -> list:
    """Wrap hex strings as Colors, skipping anything unparseable."""
    colors = []
    for hex_color in hex_colors:
        color = Color.from_hex(hex_color)
        if color is not None:
            colors.append(color)
    return colors


def color_hex(color) -> str:
    """Hex of a Color or of a {'hex': ...} mapping."""
    if isinstance(color, Color):
        return color.hex
    if isinstance(color, dict):
        return color.get('hex', '')
    return str(color)
