"""
Tests for hex color parsing.
"""

import pytest

from slidetabs.colors import hex_to_rgb_fraction, parse_hex_color


def test_parse_hex_color():
    assert parse_hex_color("#FFFFFF") == (255, 255, 255)
    assert parse_hex_color("888888") == (136, 136, 136)
    assert parse_hex_color("#1f4e79") == (31, 78, 121)
    assert parse_hex_color("#f00") == (255, 0, 0)
    assert parse_hex_color("  #00FF00 ") == (0, 255, 0)


@pytest.mark.parametrize("value", ["", "#12345", "#GGGGGG", "red", "#1234567", None, 42])
def test_malformed_colors_fall_back_to_black(value):
    assert parse_hex_color(value) == (0, 0, 0)


def test_hex_to_rgb_fraction():
    assert hex_to_rgb_fraction("#FFFFFF") == {"red": 1.0, "green": 1.0, "blue": 1.0}
    rgb = hex_to_rgb_fraction("#888888")
    assert rgb["red"] == pytest.approx(136 / 255)
    assert hex_to_rgb_fraction("bogus") == {"red": 0.0, "green": 0.0, "blue": 0.0}
