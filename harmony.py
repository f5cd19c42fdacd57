#!/usr/bin/env python3
"""
Harmony rules: five related colors from one seed, and the reverse question of
which rule a set of colors follows.
"""

from color_model import hex_to_hsl, hsl_to_hex, normalize_hex
from color_names import name_colors


# =============================================================================
# Constants
# =============================================================================

HUE_CLUSTER_RANGE = 30  # Degrees within which hues count as one family
CHROMATIC_MIN_SATURATION = 10


def rotate_hue(hue: float, offset: float) -> float:
    """Hue plus offset, wrapped into [0, 360)."""
    return (hue + offset + 360) % 360


def circular_hue_distance(hue1: float, hue2: float) -> float:
    """Compute minimum angular distance between two hues (0-180)."""
    diff = abs(hue1 - hue2) % 360
    return min(diff, 360 - diff)


# =============================================================================
# Generators
# =============================================================================

def complementary(hex_color: str) -> list:
    seed = normalize_hex(hex_color)
    if seed is None:
        return []
    h, s, l = hex_to_hsl(seed)
    opposite = rotate_hue(h, 180)
    return [
        seed,
        hsl_to_hex(opposite, s, l),
        hsl_to_hex(h, max(20, s - 20), min(85, l + 15)),
        hsl_to_hex(opposite, max(20, s - 20), min(85, l + 15)),
        hsl_to_hex(h, max(10, s - 40), min(90, l + 30)),
    ]


def analogous(hex_color: str) -> list:
    seed = normalize_hex(hex_color)
    if seed is None:
        return []
    h, s, l = hex_to_hsl(seed)
    return [
        hsl_to_hex(rotate_hue(h, -30), s, l),
        hsl_to_hex(rotate_hue(h, -15), s, l),
        seed,
        hsl_to_hex(rotate_hue(h, 15), s, l),
        hsl_to_hex(rotate_hue(h, 30), s, l),
    ]


def triadic(hex_color: str) -> list:
    seed = normalize_hex(hex_color)
    if seed is None:
        return []
    h, s, l = hex_to_hsl(seed)
    return [
        seed,
        hsl_to_hex(rotate_hue(h, 120), s, l),
        hsl_to_hex(rotate_hue(h, 240), s, l),
        hsl_to_hex(h, max(20, s - 30), min(85, l + 20)),
        hsl_to_hex(rotate_hue(h, 120), max(20, s - 30), min(85, l + 20)),
    ]


def split_complementary(hex_color: str) -> list:
    seed = normalize_hex(hex_color)
    if seed is None:
        return []
    h, s, l = hex_to_hsl(seed)
    return [
        seed,
        hsl_to_hex(rotate_hue(h, 150), s, l),
        hsl_to_hex(rotate_hue(h, 210), s, l),
        hsl_to_hex(h, max(15, s - 25), min(90, l + 20)),
        hsl_to_hex(rotate_hue(h, 180), max(15, s - 40), min(92, l + 30)),
    ]


HARMONY_RULES = {
    'complementary': complementary,
    'analogous': analogous,
    'triadic': triadic,
    'split-complementary': split_complementary,
}


def normalize_rule(rule: str) -> str:
    return str(rule).strip().lower().replace('_', '-').replace(' ', '-')


def generate_harmony(hex_color: str, rule: str) -> list:
    """
    Named colors for a harmony rule.

    Raises:
        ValueError: If the rule name is not one of HARMONY_RULES
    """
    key = normalize_rule(rule)
    if key not in HARMONY_RULES:
        raise ValueError(
            f"Unknown harmony rule: {rule!r} (expected one of {', '.join(HARMONY_RULES)})"
        )
    return name_colors(HARMONY_RULES[key](hex_color))


# =============================================================================
# Scheme Classification
# =============================================================================

def group_hue_families(hues: list) -> list:
    """Greedy grouping: each hue joins the first family anchored within range."""
    families = []  # [anchor_hue, [member hues]]
    for hue in hues:
        for family in families:
            if circular_hue_distance(hue, family[0]) <= HUE_CLUSTER_RANGE:
                family[1].append(hue)
                break
        else:
            families.append([hue, [hue]])
    return families


def _is_split_complementary(anchors: list) -> bool:
    for i, base in enumerate(anchors):
        others = [a for j, a in enumerate(anchors) if j != i]
        if all(130 < circular_hue_distance(base, o) < 170 for o in others):
            return True
    return False


def classify_scheme(hex_colors: list) -> tuple:
    """
    Determine the color scheme type of a palette.

    Returns (scheme_type, description).
    """
    hsls = [hex_to_hsl(c) for c in hex_colors]
    hsls = [c for c in hsls if c is not None]
    chromatic = [c.h for c in hsls if c.s >= CHROMATIC_MIN_SATURATION]

    if not chromatic:
        return "achromatic", "Grayscale palette with no chromatic content"

    families = group_hue_families(chromatic)
    anchors = [f[0] for f in families]

    if len(anchors) == 1:
        return "monochromatic", f"Single hue family around {anchors[0]:.0f}°"

    if len(anchors) == 2:
        hue_diff = circular_hue_distance(anchors[0], anchors[1])
        if hue_diff < 60:
            return "analogous", f"Adjacent hues ({anchors[0]:.0f}° and {anchors[1]:.0f}°)"
        elif hue_diff > 150:
            return "complementary", f"Opposing hues ({anchors[0]:.0f}° and {anchors[1]:.0f}°)"

    if len(anchors) == 3:
        hues_sorted = sorted(anchors)
        diffs = [hues_sorted[1] - hues_sorted[0],
                 hues_sorted[2] - hues_sorted[1],
                 (360 + hues_sorted[0]) - hues_sorted[2]]

        if all(80 < d < 160 for d in diffs):
            return "triadic", "Three hues roughly 120° apart"
        if _is_split_complementary(anchors):
            return "split-complementary", "One hue against the two neighbours of its complement"

    return "complex", f"Multi-hue palette with {len(anchors)} color families"
