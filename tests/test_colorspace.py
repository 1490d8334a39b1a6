# Copyright (c) 2026 Swatchkit
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (hex ↔ RGB ↔ HSB, RGB → HSL, RGB ↔ CMYK)."""

import itertools

import numpy as np
import pytest

from swatchkit.convert.colorspace import (
    cmyk_to_rgb,
    hex_to_hsb,
    hex_to_rgb,
    hex_to_rgb_array,
    hsb_to_hex,
    hsb_to_rgb,
    normalize_hex,
    rgb_array_to_hsb,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsb,
    rgb_to_hsl,
)
from swatchkit.schema import CMYK, HSB, HSL, RGB


def _rgb_grid(step=15):
    values = range(0, 256, step)
    return [RGB(r, g, b) for r, g, b in itertools.product(values, repeat=3)]


class TestNormalizeHex:

    def test_shorthand_expansion(self):
        assert normalize_hex("abc") == "AABBCC"

    def test_strips_hash(self):
        assert normalize_hex("#123456") == "123456"

    def test_hash_and_shorthand(self):
        assert normalize_hex("#fff") == "FFFFFF"

    def test_uppercases(self):
        assert normalize_hex("3b82f6") == "3B82F6"

    def test_only_one_hash_stripped(self):
        assert normalize_hex("##abc") == "#ABC"

    def test_no_character_validation(self):
        """Lenient: garbage keeps its shape."""
        assert normalize_hex("zzz") == "ZZZZZZ"
        assert normalize_hex("12345") == "12345"


class TestHexRGB:

    def test_known_value(self):
        assert hex_to_rgb("FF0000") == RGB(r=255, g=0, b=0)

    def test_lowercase_input(self):
        assert hex_to_rgb("3b82f6") == RGB(r=59, g=130, b=246)

    def test_unparseable_pair_is_zero(self):
        assert hex_to_rgb("zz8000") == RGB(r=0, g=128, b=0)

    def test_short_input_does_not_raise(self):
        assert hex_to_rgb("FF") == RGB(r=255, g=0, b=0)

    def test_rgb_to_hex_lowercase(self):
        assert rgb_to_hex(RGB(255, 0, 0)) == "ff0000"

    def test_rgb_to_hex_pads(self):
        assert rgb_to_hex(RGB(1, 2, 3)) == "010203"
        assert rgb_to_hex(RGB(0, 0, 0)) == "000000"

    def test_rgb_to_hex_truncates_floats(self):
        assert rgb_to_hex(RGB(255.9, 0, 0)) == "ff0000"

    def test_rgb_to_hex_non_finite_channels_are_zero(self):
        assert rgb_to_hex(RGB(float("nan"), 0, 0)) == "000000"
        assert rgb_to_hex(RGB(0, float("inf"), 255)) == "0000ff"
        assert rgb_to_hex(RGB(float("-inf"), 0, 0)) == "000000"

    def test_rgb_to_hex_out_of_range_does_not_raise(self):
        # 256 << 16 collides with the sentinel bit
        assert rgb_to_hex(RGB(256, 0, 0)) == "000000"

    def test_roundtrip_grid(self):
        for rgb in _rgb_grid():
            assert hex_to_rgb(rgb_to_hex(rgb)) == rgb

    def test_roundtrip_every_red_value(self):
        for r in range(256):
            rgb = RGB(r, 255 - r, r // 2)
            assert hex_to_rgb(rgb_to_hex(rgb)) == rgb

    @pytest.mark.parametrize("hex_color", ["FF0000", "3B82F6", "0A0B0C", "FFFFFF", "000000"])
    def test_hex_idempotence(self, hex_color):
        assert normalize_hex(rgb_to_hex(hex_to_rgb(hex_color))) == hex_color

    def test_array_conversion(self):
        arr = hex_to_rgb_array(["FF0000", "00FF00", "0000FF"])
        assert arr.dtype == np.uint8
        np.testing.assert_array_equal(
            arr, [[255, 0, 0], [0, 255, 0], [0, 0, 255]]
        )

    def test_array_conversion_empty(self):
        assert hex_to_rgb_array([]).shape == (0, 3)


class TestRGBToHSB:

    def test_red(self):
        assert rgb_to_hsb(RGB(255, 0, 0)) == HSB(h=0, s=100, b=100)

    def test_green(self):
        assert rgb_to_hsb(RGB(0, 255, 0)) == HSB(h=120, s=100, b=100)

    def test_blue(self):
        assert rgb_to_hsb(RGB(0, 0, 255)) == HSB(h=240, s=100, b=100)

    def test_black(self):
        assert rgb_to_hsb(RGB(0, 0, 0)) == HSB(h=0, s=0, b=0)

    def test_white(self):
        assert rgb_to_hsb(RGB(255, 255, 255)) == HSB(h=0, s=0, b=100)

    def test_negative_sector_wraps(self):
        hsb = rgb_to_hsb(RGB(255, 0, 1))
        assert hsb.h == pytest.approx(360 - 60 / 255)
        assert 0.0 <= hsb.h < 360.0

    def test_hue_range_grid(self):
        for rgb in _rgb_grid(step=51):
            assert 0.0 <= rgb_to_hsb(rgb).h < 360.0

    def test_hex_to_hsb(self):
        assert hex_to_hsb("FF0000") == HSB(h=0, s=100, b=100)


class TestHSBToRGB:

    def test_primaries(self):
        assert hsb_to_rgb(HSB(0, 100, 100)) == RGB(255, 0, 0)
        assert hsb_to_rgb(HSB(120, 100, 100)) == RGB(0, 255, 0)
        assert hsb_to_rgb(HSB(240, 100, 100)) == RGB(0, 0, 255)

    def test_rounds_half_up(self):
        """127.5 rounds to 128, not to the even neighbour."""
        assert hsb_to_rgb(HSB(0, 0, 50)) == RGB(128, 128, 128)

    def test_hsb_to_hex(self):
        assert hsb_to_hex(HSB(0, 100, 100)) == "ff0000"

    def test_roundtrip_within_one(self):
        for rgb in _rgb_grid():
            recovered = hsb_to_rgb(rgb_to_hsb(rgb))
            for original, back in zip(rgb.as_tuple(), recovered.as_tuple()):
                assert abs(original - back) <= 1


class TestRGBArrayToHSB:

    def test_matches_scalar(self):
        grid = _rgb_grid(step=17)
        pixels = np.array([rgb.as_tuple() for rgb in grid], dtype=np.uint8)
        batch = rgb_array_to_hsb(pixels)
        expected = np.array([rgb_to_hsb(rgb).as_tuple() for rgb in grid])
        np.testing.assert_allclose(batch, expected, atol=1e-9)

    def test_shape_preserved(self):
        pixels = np.zeros((4, 5, 3), dtype=np.uint8)
        assert rgb_array_to_hsb(pixels).shape == (4, 5, 3)


class TestRGBToHSL:

    def test_white(self):
        assert rgb_to_hsl(RGB(255, 255, 255)) == HSL(h=0, s=0, l=100)

    def test_black(self):
        assert rgb_to_hsl(RGB(0, 0, 0)) == HSL(h=0, s=0, l=0)

    def test_red(self):
        assert rgb_to_hsl(RGB(255, 0, 0)) == HSL(h=0, s=100, l=50)

    def test_blue_hue(self):
        assert rgb_to_hsl(RGB(0, 0, 255)).h == pytest.approx(240.0)

    def test_negative_hue_normalized(self):
        hsl = rgb_to_hsl(RGB(255, 0, 1))
        assert hsl.h == pytest.approx(360 - 60 / 255)

    def test_gray_lightness(self):
        hsl = rgb_to_hsl(RGB(128, 128, 128))
        assert hsl.s == 0
        assert hsl.l == pytest.approx(128 / 255 * 100)

    def test_saturation_branch_uses_max_channel(self):
        """max = 200/255 > 0.5 selects delta / (2 - (2*max - delta))."""
        hsl = rgb_to_hsl(RGB(200, 0, 0))
        assert hsl.s == pytest.approx(200 / 310 * 100)
        assert hsl.l == pytest.approx(200 / 255 * 50)

    def test_dark_saturation(self):
        assert rgb_to_hsl(RGB(100, 0, 0)).s == pytest.approx(100.0)

    def test_out_of_range_zero_denominator(self):
        """max + min == 0 with delta > 0 only happens below 0."""
        hsl = rgb_to_hsl(RGB(10, -10, 0))
        assert hsl.s == 0.0

    def test_hue_range_grid(self):
        for rgb in _rgb_grid(step=51):
            assert 0.0 <= rgb_to_hsl(rgb).h < 360.0


class TestCMYK:

    def test_black_special_case(self):
        assert rgb_to_cmyk(RGB(0, 0, 0)) == CMYK(c=0, m=0, y=0, k=100)

    def test_white(self):
        assert rgb_to_cmyk(RGB(255, 255, 255)) == CMYK(c=0, m=0, y=0, k=0)

    def test_red(self):
        assert rgb_to_cmyk(RGB(255, 0, 0)) == CMYK(c=0, m=100, y=100, k=0)

    def test_mixed(self):
        cmyk = rgb_to_cmyk(RGB(128, 64, 0))
        assert cmyk.c == pytest.approx(0.0)
        assert cmyk.m == pytest.approx(50.0)
        assert cmyk.y == pytest.approx(100.0)
        assert cmyk.k == pytest.approx(127 / 255 * 100)

    def test_out_of_range_key_does_not_divide_by_zero(self):
        """Channels below 0 push k to 1 without being pure black."""
        assert rgb_to_cmyk(RGB(0, -1, 0)) == CMYK(c=0, m=0, y=0, k=100)

    def test_cmyk_to_rgb_nan_channel_is_zero(self):
        assert cmyk_to_rgb(CMYK(float("nan"), 0, 0, 0)) == RGB(0, 255, 255)

    def test_cmyk_to_rgb_known(self):
        assert cmyk_to_rgb(CMYK(0, 100, 100, 0)) == RGB(255, 0, 0)
        assert cmyk_to_rgb(CMYK(0, 0, 0, 100)) == RGB(0, 0, 0)

    def test_roundtrip_within_one(self):
        for rgb in _rgb_grid():
            recovered = cmyk_to_rgb(rgb_to_cmyk(rgb))
            for original, back in zip(rgb.as_tuple(), recovered.as_tuple()):
                assert abs(original - back) <= 1
