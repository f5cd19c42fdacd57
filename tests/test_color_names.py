"""Tests for color naming."""

import pytest

from color_model import hex_to_hsl
from color_names import Color, get_color_name, name_colors


@pytest.mark.parametrize('hex_color, expected', [
    ('#000000', 'Midnight Black'),
    ('#404040', 'Charcoal'),
    ('#666666', 'Slate Gray'),
    ('#808080', 'Silver Mist'),
    ('#cccccc', 'Cloud White'),
    ('#ffffff', 'Snow White'),
])
def test_neutral_names_by_lightness(hex_color, expected):
    assert get_color_name(hex_color) == expected


@pytest.mark.parametrize('hex_color, expected', [
    ('#ff0000', 'Crimson Blaze'),
    ('#00ff00', 'Emerald Dream'),
    ('#0000ff', 'Indigo Night'),
    ('#00ffff', 'Ocean Depth'),
    ('#ff00ff', 'Magenta Pulse'),
    ('#ffff00', 'Lime Zest'),
])
def test_hue_families(hex_color, expected):
    assert get_color_name(hex_color) == expected


def test_lightness_modifiers():
    assert get_color_name('#400000') == 'Deep Crimson Blaze'
    assert get_color_name('#800000') == 'Rich Crimson Blaze'
    assert get_color_name('#ff6666') == 'Soft Crimson Blaze'
    assert get_color_name('#ffb3b3') == 'Pale Crimson Blaze'
    assert get_color_name('#ffe6e6') == 'Whisper Crimson Blaze'


def test_hue_rounding_up_wraps_to_red():
    assert hex_to_hsl('#ff0001').h == 0
    assert get_color_name('#ff0001') == 'Crimson Blaze'


def test_unknown_for_invalid_hex():
    assert get_color_name('not a color') == 'Unknown'
    assert get_color_name(None) == 'Unknown'


def test_color_from_hex_normalizes_and_names():
    color = Color.from_hex('#F00')
    assert color == Color(hex='#ff0000', name='Crimson Blaze')
    assert color.to_dict() == {'hex': '#ff0000', 'name': 'Crimson Blaze'}
    assert Color.from_hex('#ggg') is None


def test_name_colors_skips_invalid_entries():
    colors = name_colors(['#ffffff', 'bogus', '#000'])
    assert [c.hex for c in colors] == ['#ffffff', '#000000']
    assert [c.name for c in colors] == ['Snow White', 'Midnight Black']
