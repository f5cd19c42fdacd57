"""Tests for harmony generators and scheme classification."""

import pytest

from color_model import hex_to_hsl, is_valid_hex
from color_names import Color
from harmony import (
    HARMONY_RULES, analogous, circular_hue_distance, classify_scheme,
    complementary, generate_harmony, rotate_hue, split_complementary, triadic,
)


@pytest.mark.parametrize('rule', sorted(HARMONY_RULES))
@pytest.mark.parametrize('seed', ['#3366cc', '#ff0000', '#f5f5dc', '#101010', '#ABC'])
def test_every_rule_returns_five_valid_hexes(rule, seed):
    colors = HARMONY_RULES[rule](seed)
    assert len(colors) == 5
    assert all(is_valid_hex(c) and c == c.lower() for c in colors)


@pytest.mark.parametrize('rule', sorted(HARMONY_RULES))
def test_invalid_seed_gives_empty_list(rule):
    assert HARMONY_RULES[rule]('not-a-color') == []


def test_rotate_hue_wraps_both_ways():
    assert rotate_hue(350, 30) == 20
    assert rotate_hue(10, -30) == 340
    assert circular_hue_distance(350, 10) == 20


def test_complementary_second_color_is_opposite_hue():
    assert complementary('#ff0000')[:2] == ['#ff0000', '#00ffff']

    seed = '#3366cc'
    h = hex_to_hsl(seed).h
    assert hex_to_hsl(complementary(seed)[1]).h == (h + 180) % 360


def test_complementary_tints_are_lighter():
    colors = complementary('#3366cc')
    seed = hex_to_hsl(colors[0])
    assert hex_to_hsl(colors[2]).l > seed.l
    assert hex_to_hsl(colors[4]).s < seed.s


def test_analogous_keeps_seed_in_the_middle():
    colors = analogous('#F00')
    assert colors[2] == '#ff0000'
    hues = [hex_to_hsl(c).h for c in colors]
    assert hues == [330, 345, 0, 15, 30]


def test_triadic_primaries():
    assert triadic('#ff0000')[:3] == ['#ff0000', '#00ff00', '#0000ff']


def test_split_complementary_hues():
    colors = split_complementary('#ff0000')
    assert hex_to_hsl(colors[1]).h == 150
    assert hex_to_hsl(colors[2]).h == 210


def test_generate_harmony_names_colors():
    colors = generate_harmony('#ff0000', 'Split_Complementary')
    assert len(colors) == 5
    assert all(isinstance(c, Color) for c in colors)
    assert colors[0] == Color('#ff0000', 'Crimson Blaze')


def test_generate_harmony_rejects_unknown_rule():
    with pytest.raises(ValueError, match='Unknown harmony rule'):
        generate_harmony('#ff0000', 'tetradic')


@pytest.mark.parametrize('generator, expected', [
    (complementary, 'complementary'),
    (analogous, 'analogous'),
    (triadic, 'triadic'),
    (split_complementary, 'split-complementary'),
])
def test_classify_scheme_recognizes_generated_palettes(generator, expected):
    scheme_type, description = classify_scheme(generator('#ff0000'))
    assert scheme_type == expected
    assert description


def test_classify_scheme_achromatic_and_monochromatic():
    assert classify_scheme(['#000000', '#ffffff', '#808080'])[0] == 'achromatic'
    assert classify_scheme(['#ff0000', '#cc0000', '#ff6666'])[0] == 'monochromatic'
    assert classify_scheme([])[0] == 'achromatic'
