#!/usr/bin/env python3
"""
Palette export as CSS custom properties, JSON, or an SVG swatch strip.
"""

import json
import re
from html import escape

from color_model import hex_to_hsl, hex_to_rgb, normalize_hex
from color_names import Color, color_hex, get_color_name
from contrast import text_color_for


# =============================================================================
# Constants
# =============================================================================

SVG_WIDTH = 500
SVG_HEIGHT = 200
SVG_LABEL_OFFSET = 15  # Label baseline distance from the bottom edge
SVG_FONT_FAMILY = 'Inter, sans-serif'
SVG_FONT_SIZE = 12

DEFAULT_NAME = 'palette'


def slugify(name: str) -> str:
    slug = re.sub(r'\s+', '-', str(name).strip().lower())
    return slug or DEFAULT_NAME


def _export_hex(color) -> str:
    """Canonical '#rrggbb' for any accepted color form; unparseable values pass through."""
    raw = color_hex(color)
    return normalize_hex(raw) or raw


def _color_name(color) -> str:
    if isinstance(color, Color):
        return color.name
    if isinstance(color, dict) and color.get('name'):
        return color['name']
    return get_color_name(_export_hex(color))


def _format_number(value: float) -> str:
    """Print numbers the way a browser would: 100 not 100.0."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


# =============================================================================
# Encoders
# =============================================================================

def export_css(colors: list, name: str = DEFAULT_NAME) -> str:
    slug = slugify(name)
    lines = [f"  --{slug}-{i}: {_export_hex(c)};" for i, c in enumerate(colors, 1)]
    return ':root {\n' + '\n'.join(lines) + '\n}'


def export_json(colors: list, name: str = DEFAULT_NAME) -> str:
    entries = []
    for color in colors:
        hex_color = _export_hex(color)
        rgb = hex_to_rgb(hex_color)
        hsl = hex_to_hsl(hex_color)
        entries.append({
            'hex': hex_color,
            'name': _color_name(color),
            'rgb': rgb._asdict() if rgb else None,
            'hsl': hsl._asdict() if hsl else None,
        })
    return json.dumps({'name': name, 'colors': entries}, indent=2, ensure_ascii=False)


def export_svg(colors: list) -> str:
    """Equal-width vertical stripes, each labeled with its hex."""
    width, height = SVG_WIDTH, SVG_HEIGHT
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
    ]

    if colors:
        swatch_width = width / len(colors)
        hexes = [escape(_export_hex(c)) for c in colors]

        for i, hex_color in enumerate(hexes):
            lines.append(
                f'  <rect x="{_format_number(i * swatch_width)}" y="0" '
                f'width="{_format_number(swatch_width)}" height="{height}" fill="{hex_color}" />'
            )

        for i, hex_color in enumerate(hexes):
            x = i * swatch_width + swatch_width / 2
            lines.append(
                f'  <text x="{_format_number(x)}" y="{height - SVG_LABEL_OFFSET}" '
                f'text-anchor="middle" fill="{text_color_for(hex_color)}" '
                f'font-family="{SVG_FONT_FAMILY}" font-size="{SVG_FONT_SIZE}">{hex_color}</text>'
            )

    lines.append('</svg>')
    return '\n'.join(lines)


EXPORTERS = {
    'css': export_css,
    'json': export_json,
    'svg': lambda colors, name=DEFAULT_NAME: export_svg(colors),
}


def export_palette(colors: list, fmt: str, name: str = DEFAULT_NAME) -> str:
    """
    Render colors in one of the EXPORTERS formats.

    Raises:
        ValueError: If the format is unknown
    """
    key = str(fmt).strip().lower()
    if key not in EXPORTERS:
        raise ValueError(f"Unknown export format: {fmt!r} (expected css, json or svg)")
    return EXPORTERS[key](colors, name)
