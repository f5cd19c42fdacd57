#!/usr/bin/env python3
"""
Palette records: what a caller stores or returns for a mood, an image, a
harmony seed, or a random draw.

AI services are outside this module. Callers pass whatever they got back
(a list of hex strings or the raw reply text); anything unusable falls back to
the algorithmic generators.
"""

import json
import re

from color_model import is_valid_hex
from color_names import Color, color_hex, name_colors
from extract_colors import extract_colors_from_image
from harmony import generate_harmony, normalize_rule
from mood import generate_palette_from_mood, generate_random_palette


# =============================================================================
# Constants
# =============================================================================

SOURCES = ('ai', 'image', 'manual', 'fallback', 'image-ai', 'image-fallback')
DEFAULT_SOURCE = 'manual'

MIN_PALETTE_COLORS = 2
MAX_PALETTE_COLORS = 10
MAX_NAME_LENGTH = 100
MAX_MOOD_LENGTH = 100

# AI replies
MIN_AI_COLORS = 3
MAX_AI_COLORS = 5
CODE_FENCE_OPEN = re.compile(r'^```(?:json)?\s*', re.IGNORECASE)
CODE_FENCE_CLOSE = re.compile(r'\s*```$')

EXTRACTED_NAME = 'Extracted Palette'
RANDOM_NAME = 'Random Palette'


# =============================================================================
# AI Output
# =============================================================================

def validate_ai_colors(hex_colors) -> list:
    """
    Keep well-formed '#rrggbb' strings, lowercased and deduplicated.

    Returns:
        Up to MAX_AI_COLORS hex strings, or None if fewer than MIN_AI_COLORS remain.
    """
    if not isinstance(hex_colors, (list, tuple)):
        return None

    seen = []
    for value in hex_colors:
        if not is_valid_hex(value):
            continue
        value = value.lower()
        if value not in seen:
            seen.append(value)

    if len(seen) < MIN_AI_COLORS:
        return None
    return seen[:MAX_AI_COLORS]


def parse_ai_colors(content: str) -> list:
    """Parse a model reply (JSON array, possibly in a code fence)."""
    if not isinstance(content, str):
        return None

    text = CODE_FENCE_OPEN.sub('', content.strip())
    text = CODE_FENCE_CLOSE.sub('', text).strip()
    if not text:
        return None

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        return None

    return validate_ai_colors(parsed)


# =============================================================================
# Workflows
# =============================================================================

def palette_from_mood(mood: str, ai_colors=None) -> dict:
    mood = str(mood).strip()
    hexes = validate_ai_colors(ai_colors)
    if hexes:
        colors, source = name_colors(hexes), 'ai'
    else:
        colors, source = generate_palette_from_mood(mood), 'fallback'

    return {
        'name': f"{mood} Palette",
        'colors': colors,
        'mood': mood,
        'source': source,
    }


def palette_from_image(data, ai_colors=None) -> dict:
    hexes = validate_ai_colors(ai_colors)
    if hexes:
        colors, source = name_colors(hexes), 'image-ai'
    else:
        colors, source = extract_colors_from_image(data), 'image-fallback'

    return {
        'name': EXTRACTED_NAME,
        'colors': colors,
        'source': source,
    }


def palette_from_harmony(hex_color: str, rule: str) -> dict:
    """
    Raises:
        ValueError: If the rule is unknown or the seed is not a hex color
    """
    colors = generate_harmony(hex_color, rule)
    if not colors:
        raise ValueError(f"Invalid seed color: {hex_color!r}")

    title = normalize_rule(rule).replace('-', ' ').title()
    return {
        'name': f"{title} Palette",
        'colors': colors,
        'source': DEFAULT_SOURCE,
    }


def random_palette(rng=None) -> dict:
    return {
        'name': RANDOM_NAME,
        'colors': generate_random_palette(rng),
        'mood': 'random',
        'source': DEFAULT_SOURCE,
    }


def replace_color(record: dict, index: int, hex_color: str) -> dict:
    """
    Copy of record with one color swapped out; the result counts as manual.

    Raises:
        IndexError: If index is outside the palette
        ValueError: If hex_color cannot be parsed
    """
    colors = list(record.get('colors', []))
    if not -len(colors) <= index < len(colors):
        raise IndexError(f"Color index {index} out of range for {len(colors)} colors")

    color = Color.from_hex(hex_color)
    if color is None:
        raise ValueError(f"Invalid hex color: {hex_color!r}")

    colors[index] = color
    return {**record, 'colors': colors, 'source': 'manual'}


# =============================================================================
# Persistence Shape
# =============================================================================

def _clean_tags(tags) -> list:
    cleaned = []
    for tag in tags:
        tag = str(tag).strip().lower()
        if tag and tag not in cleaned:
            cleaned.append(tag)
    return cleaned


def build_palette_record(name, colors, mood=None, source=None, tags=None) -> dict:
    """
    Validate and normalize a palette for storage.

    Returns:
        dict with name, colors (list of {hex, name}), mood, source, tags

    Raises:
        ValueError: If any field violates the storage rules
    """
    name = str(name or '').strip()
    if not name:
        raise ValueError("Palette name is required")
    if len(name) > MAX_NAME_LENGTH:
        raise ValueError(f"Palette name exceeds {MAX_NAME_LENGTH} characters")

    colors = list(colors or [])
    if not MIN_PALETTE_COLORS <= len(colors) <= MAX_PALETTE_COLORS:
        raise ValueError(
            f"A palette must have between {MIN_PALETTE_COLORS} and "
            f"{MAX_PALETTE_COLORS} colors, got {len(colors)}"
        )

    stored = []
    for i, color in enumerate(colors):
        hex_color = color_hex(color)
        if not is_valid_hex(hex_color):
            raise ValueError(f"Color {i + 1} is not a valid hex color: {hex_color!r}")
        stored.append(Color.from_hex(hex_color).to_dict())

    if mood is not None:
        mood = str(mood).strip() or None
    if mood is not None and len(mood) > MAX_MOOD_LENGTH:
        raise ValueError(f"Mood exceeds {MAX_MOOD_LENGTH} characters")

    source = source or DEFAULT_SOURCE
    if source not in SOURCES:
        raise ValueError(f"Unknown source {source!r} (expected one of {', '.join(SOURCES)})")

    if tags is None:
        tags = [mood] if mood else []

    return {
        'name': name,
        'colors': stored,
        'mood': mood,
        'source': source,
        'tags': _clean_tags(tags),
    }
