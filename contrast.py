#!/usr/bin/env python3
"""
WCAG relative luminance and contrast ratio.
"""

from itertools import combinations

from color_model import hex_to_rgb
from color_names import color_hex


# =============================================================================
# Constants
# =============================================================================

DARK_TEXT = '#1a1a2e'
LIGHT_TEXT = '#f0f0f5'
TEXT_LUMINANCE_THRESHOLD = 0.4

# (minimum ratio, level), checked in order
WCAG_LEVELS = (
    (7.0, 'AAA'),
    (4.5, 'AA'),
    (3.0, 'AA-large'),
)


def _linearize(channel: float) -> float:
    return channel / 12.92 if channel <= 0.03928 else ((channel + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_color: str) -> float:
    """Relative luminance in [0, 1]; 0 for an unparseable hex."""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return 0.0
    r, g, b = (_linearize(v / 255.0) for v in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(hex_a: str, hex_b: str) -> float:
    """WCAG contrast ratio, 1 (identical) to 21 (black on white)."""
    l1 = relative_luminance(hex_a)
    l2 = relative_luminance(hex_b)

    lighter = max(l1, l2)
    darker = min(l1, l2)

    return (lighter + 0.05) / (darker + 0.05)


def text_color_for(background_hex: str) -> str:
    """Return dark or light text color for a background."""
    if relative_luminance(background_hex) > TEXT_LUMINANCE_THRESHOLD:
        return DARK_TEXT
    return LIGHT_TEXT


def wcag_level(ratio: float) -> str:
    for minimum, level in WCAG_LEVELS:
        if ratio >= minimum:
            return level
    return 'fail'


def contrast_pairs(colors: list) -> list:
    """
    Every unordered pair of palette colors with its contrast.

    Returns list of dicts with 'a', 'b', 'ratio' and 'level', highest ratio first.
    """
    hexes = [color_hex(c) for c in colors]
    pairs = []
    for hex_a, hex_b in combinations(hexes, 2):
        ratio = contrast_ratio(hex_a, hex_b)
        pairs.append({
            'a': hex_a,
            'b': hex_b,
            'ratio': ratio,
            'level': wcag_level(ratio),
        })
    pairs.sort(key=lambda p: -p['ratio'])
    return pairs
