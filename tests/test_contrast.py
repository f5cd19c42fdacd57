"""Tests for WCAG luminance and contrast helpers."""

import pytest

from color_names import Color
from contrast import (
    DARK_TEXT, LIGHT_TEXT, contrast_pairs, contrast_ratio,
    relative_luminance, text_color_for, wcag_level,
)


def test_luminance_extremes():
    assert relative_luminance('#000000') == 0.0
    assert relative_luminance('#ffffff') == pytest.approx(1.0)
    assert relative_luminance('garbage') == 0.0


def test_black_on_white_is_21():
    assert contrast_ratio('#000000', '#ffffff') == pytest.approx(21.0)
    assert contrast_ratio('#ffffff', '#000000') == pytest.approx(21.0)


def test_same_color_is_1():
    assert contrast_ratio('#3366cc', '#3366cc') == pytest.approx(1.0)


def test_ratio_is_symmetric():
    assert contrast_ratio('#ff0000', '#0000ff') == pytest.approx(contrast_ratio('#0000ff', '#ff0000'))


@pytest.mark.parametrize('background, expected', [
    ('#ffffff', DARK_TEXT),
    ('#ffff00', DARK_TEXT),
    ('#000000', LIGHT_TEXT),
    ('#0000ff', LIGHT_TEXT),
    ('#808080', LIGHT_TEXT),
])
def test_text_color_for(background, expected):
    assert text_color_for(background) == expected


@pytest.mark.parametrize('ratio, level', [
    (21.0, 'AAA'),
    (7.0, 'AAA'),
    (6.99, 'AA'),
    (4.5, 'AA'),
    (3.0, 'AA-large'),
    (2.99, 'fail'),
    (1.0, 'fail'),
])
def test_wcag_level(ratio, level):
    assert wcag_level(ratio) == level


def test_contrast_pairs_sorted_highest_first():
    pairs = contrast_pairs(['#000000', '#777777', Color('#ffffff', 'Snow White')])
    assert len(pairs) == 3
    assert (pairs[0]['a'], pairs[0]['b']) == ('#000000', '#ffffff')
    assert pairs[0]['level'] == 'AAA'
    ratios = [p['ratio'] for p in pairs]
    assert ratios == sorted(ratios, reverse=True)


def test_contrast_pairs_short_lists():
    assert contrast_pairs([]) == []
    assert contrast_pairs(['#000000']) == []
