#!/usr/bin/env python3
"""
Mood keyword → five-color palette.

Resolution order: exact table key, then substring match in table order, then
a deterministic string hash. Every string resolves to a palette.
"""

import random

from color_model import hsl_to_hex
from color_names import name_colors


# =============================================================================
# Mood Table
# =============================================================================

# keyword -> (base hue, base saturation, base lightness). Order matters for
# substring matching.
MOOD_TABLE = {
    # Moods
    'warm': (25, 70, 55),
    'cool': (210, 60, 50),
    'vibrant': (320, 85, 55),
    'pastel': (280, 45, 80),
    'dark': (240, 50, 25),
    'earthy': (30, 40, 40),
    'ocean': (200, 65, 50),
    'sunset': (20, 80, 55),
    'forest': (120, 55, 40),
    'candy': (330, 70, 70),
    'midnight': (235, 60, 20),
    'autumn': (25, 65, 45),
    'spring': (110, 60, 65),
    'winter': (210, 30, 75),
    'neon': (300, 100, 55),
    'retro': (40, 55, 50),
    'luxury': (42, 45, 30),
    'minimal': (220, 10, 60),
    'romantic': (340, 55, 65),
    'tropical': (160, 75, 55),
    # Color names
    'red': (0, 75, 50),
    'orange': (25, 80, 55),
    'yellow': (50, 80, 55),
    'green': (120, 65, 45),
    'teal': (175, 60, 45),
    'blue': (220, 70, 50),
    'indigo': (250, 65, 40),
    'purple': (280, 65, 50),
    'pink': (330, 70, 65),
    'brown': (25, 50, 35),
    'black': (0, 5, 15),
    'white': (0, 5, 85),
    'gray': (0, 5, 50),
    'grey': (0, 5, 50),
    'gold': (45, 75, 50),
    'silver': (210, 10, 70),
    'coral': (15, 75, 60),
    'lavender': (270, 50, 70),
    'magenta': (310, 80, 50),
    'cyan': (185, 75, 50),
    'maroon': (0, 65, 30),
    'navy': (230, 70, 25),
}

# Per-slot offsets shared by mood and random palettes
HUE_OFFSETS = (-20, -8, 0, 12, 25)
SATURATION_OFFSETS = (5, -5, 0, -10, -20)
LIGHTNESS_OFFSETS = (-15, -5, 0, 10, 25)
SATURATION_RANGE = (5, 100)
LIGHTNESS_RANGE = (10, 92)


def generate_from_hue(base_hue: float, base_sat: float, base_lit: float) -> list:
    """Five hex colors spread around a base HSL."""
    colors = []
    for dh, ds, dl in zip(HUE_OFFSETS, SATURATION_OFFSETS, LIGHTNESS_OFFSETS):
        h = (base_hue + dh + 360) % 360
        s = max(SATURATION_RANGE[0], min(SATURATION_RANGE[1], base_sat + ds))
        l = max(LIGHTNESS_RANGE[0], min(LIGHTNESS_RANGE[1], base_lit + dl))
        colors.append(hsl_to_hex(h, s, l))
    return colors


# =============================================================================
# Keyword Hash
# =============================================================================

def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def keyword_hash(key: str) -> int:
    """
    Multiplicative string hash over UTF-16 code units.

    The shift operates on the signed 32-bit view of the running value while
    the subtraction and addition do not, so the result can leave int32 range.
    """
    value = 0
    data = key.encode('utf-16-le', 'surrogatepass')
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        value = unit + (_to_int32(_to_int32(value) << 5) - value)
    return value


def hash_to_hsl(key: str) -> tuple:
    value = keyword_hash(key)
    packed = _to_int32(value)
    hue = abs(value) % 360
    sat = 50 + abs(packed >> 8) % 40
    lit = 40 + abs(packed >> 16) % 30
    return hue, sat, lit


# =============================================================================
# Resolution
# =============================================================================

def resolve_mood(keyword) -> tuple:
    """
    Find the base HSL for a keyword.

    Returns ((hue, saturation, lightness), match_kind) where match_kind is
    'exact', 'partial' or 'hash'.
    """
    key = str(keyword).lower().strip()

    if key in MOOD_TABLE:
        return MOOD_TABLE[key], 'exact'

    for table_key, base in MOOD_TABLE.items():
        if table_key in key or key in table_key:
            return base, 'partial'

    return hash_to_hsl(key), 'hash'


def generate_palette_from_mood(keyword) -> list:
    """Five named colors for a mood keyword. Same keyword, same palette."""
    base, _ = resolve_mood(keyword)
    return name_colors(generate_from_hue(*base))


def generate_random_palette(rng=None) -> list:
    """Five named colors around a random base; pass a seeded rng to repeat."""
    rng = rng or random.Random()
    base_hue = rng.random() * 360
    base_sat = 50 + rng.random() * 40
    base_lit = 40 + rng.random() * 25
    return name_colors(generate_from_hue(base_hue, base_sat, base_lit))
