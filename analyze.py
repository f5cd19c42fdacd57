#!/usr/bin/env python3
"""
Palette generator and report CLI.

Builds a palette from a mood keyword, a harmony seed, an image, a random draw
or an explicit list of hex colors, then prints a prose report or exports it
as CSS, JSON or SVG.
"""

import argparse
import json
import random
import sys
from pathlib import Path

from color_model import hex_to_hsl, hex_to_rgb
from color_names import name_colors
from contrast import contrast_pairs, text_color_for
from exporters import EXPORTERS, export_palette
from harmony import HARMONY_RULES, classify_scheme
from palette import (
    build_palette_record, palette_from_harmony, palette_from_image,
    palette_from_mood, parse_ai_colors, random_palette,
)


# =============================================================================
# Render
# =============================================================================

def render(record: dict) -> str:
    """Render a palette record as prose."""
    colors = record['colors']
    hexes = [c.hex for c in colors]
    scheme_type, scheme_description = classify_scheme(hexes)

    lines = []

    # Header
    lines.append(f"PALETTE: {record['name']}")
    lines.append(f"SCHEME: {scheme_type}")
    lines.append(scheme_description)
    lines.append(f"Source: {record.get('source', 'manual')} | Colors: {len(colors)}")
    lines.append("")

    # Colors section
    lines.append("COLORS:")
    lines.append("")

    for i, color in enumerate(colors, 1):
        rgb = hex_to_rgb(color.hex)
        hsl = hex_to_hsl(color.hex)
        lines.append(f"{i}. {color.name}")
        lines.append(f"  Hex: {color.hex} | RGB: ({rgb.r}, {rgb.g}, {rgb.b}) | "
                     f"HSL: ({hsl.h}, {hsl.s}%, {hsl.l}%)")
        lines.append(f"  Text on this color: {text_color_for(color.hex)}")
        lines.append("")

    # Contrast section
    pairs = [p for p in contrast_pairs(colors) if p['level'] != 'fail']
    if pairs:
        lines.append("CONTRAST PAIRS:")
        lines.append("")
        for pair in pairs:
            lines.append(f"  - {pair['a']} / {pair['b']}: "
                         f"Ratio {pair['ratio']:.1f}:1 (WCAG {pair['level']})")
    else:
        lines.append("No color pair reaches WCAG AA-large contrast")

    return "\n".join(lines)


def build_record(args) -> dict:
    """
    Run the palette workflow selected on the command line.

    Raises:
        FileNotFoundError: If an input image doesn't exist
        ValueError: If a seed color, rule or color list is invalid
    """
    if args.command == 'mood':
        ai_colors = parse_ai_colors(args.ai_reply) if args.ai_reply else None
        return palette_from_mood(args.keyword, ai_colors=ai_colors)

    if args.command == 'harmony':
        return palette_from_harmony(args.seed, args.rule)

    if args.command == 'random':
        rng = random.Random(args.seed) if args.seed is not None else None
        return random_palette(rng)

    if args.command == 'extract':
        image_path = Path(args.input)
        if not image_path.is_file():
            raise FileNotFoundError(f"Image not found: {image_path}")
        return palette_from_image(image_path.read_bytes())

    # colors
    colors = name_colors(args.colors)
    if len(colors) != len(args.colors):
        raise ValueError("All colors must be hex values like #1a2b3c")
    return {'name': args.name or 'Custom Palette', 'colors': colors, 'source': 'manual'}


def format_output(record: dict, fmt: str, name: str = None) -> str:
    """
    Raises:
        ValueError: If fmt is 'record' and the palette can't be stored as is
    """
    if fmt == 'text':
        return render(record)
    if fmt == 'record':
        stored = build_palette_record(
            name or record['name'],
            record['colors'],
            mood=record.get('mood'),
            source=record.get('source'),
        )
        return json.dumps(stored, indent=2, ensure_ascii=False)
    return export_palette(record['colors'], fmt, name or record['name'])


# =============================================================================
# CLI
# =============================================================================

def build_parser():
    parser = argparse.ArgumentParser(
        description='Generate a color palette and report or export it.'
    )
    parser.add_argument(
        '--format', '-f',
        choices=['text', 'record', *EXPORTERS],
        default='text',
        help='Output format (default: text report)'
    )
    parser.add_argument(
        '--output', '-o',
        default=None,
        help='Write output to this file instead of stdout'
    )
    parser.add_argument(
        '--name',
        default=None,
        help='Palette name used for CSS variables and JSON export'
    )

    commands = parser.add_subparsers(dest='command', required=True)

    mood = commands.add_parser('mood', help='Palette from a mood keyword')
    mood.add_argument('keyword')
    mood.add_argument(
        '--ai-reply',
        default=None,
        help='Raw reply from a language model to use instead of the built-in generator'
    )

    harmony = commands.add_parser('harmony', help='Palette from a seed color and harmony rule')
    harmony.add_argument('seed', help='Seed hex color, e.g. #3366ff')
    harmony.add_argument('--rule', '-r', choices=list(HARMONY_RULES), default='complementary')

    rand = commands.add_parser('random', help='Random palette')
    rand.add_argument('--seed', type=int, default=None, help='Seed for a repeatable draw')

    extract = commands.add_parser('extract', help='Palette from an image file')
    extract.add_argument('--input', '-i', required=True, help='Path to the image file')

    explicit = commands.add_parser('colors', help='Report on an explicit list of colors')
    explicit.add_argument('colors', nargs='+', help='Hex colors')

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        record = build_record(args)
        output = format_output(record, args.format, args.name)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(output, encoding='utf-8')
            print(f"Wrote: {output_path}")
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(output)


if __name__ == '__main__':
    main()
