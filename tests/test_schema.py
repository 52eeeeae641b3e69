# Copyright (c) 2026 Okpicker
# SPDX-License-Identifier: MIT

"""Tests for schema types and dict roundtrips."""

import math

import pytest

from okpicker.schema import CacheInfo, OklchColor


class TestOklchColor:

    def test_valid_color(self):
        c = OklchColor(L=0.5, C=0.1, H=200.0)
        assert c.L == 0.5
        assert c.C == 0.1
        assert c.H == 200.0

    def test_default_hue(self):
        assert OklchColor(L=0.5, C=0.0).H == 0.0

    @pytest.mark.parametrize("hue, expected", [
        (360.0, 0.0),
        (370.0, 10.0),
        (-30.0, 330.0),
        (720.5, 0.5),
    ])
    def test_hue_wraps(self, hue, expected):
        assert OklchColor(L=0.5, C=0.1, H=hue).H == pytest.approx(expected)

    @pytest.mark.parametrize("field", ["L", "C", "H"])
    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_rejects_non_finite(self, field, bad):
        values = {"L": 0.5, "C": 0.1, "H": 100.0}
        values[field] = bad
        with pytest.raises(ValueError, match=field):
            OklchColor(**values)

    def test_out_of_range_values_allowed(self):
        c = OklchColor(L=1.2, C=0.5, H=90.0)
        assert c.L == 1.2
        assert not c.in_gamut

    def test_frozen(self):
        c = OklchColor(L=0.5, C=0.1, H=200.0)
        with pytest.raises(AttributeError):
            c.L = 0.6

    def test_hashable(self):
        assert len({OklchColor(0.5, 0.1, 20.0), OklchColor(0.5, 0.1, 380.0)}) == 1

    def test_srgb_is_clipped(self):
        r, g, b = OklchColor(L=0.7, C=0.4, H=150.0).srgb
        assert all(0.0 <= ch <= 1.0 for ch in (r, g, b))

    def test_white_srgb(self):
        assert OklchColor(L=1.0, C=0.0).srgb == pytest.approx((1.0, 1.0, 1.0), abs=1e-9)

    def test_dict_roundtrip(self):
        c = OklchColor(L=0.42, C=0.13, H=275.5)
        d = c.to_dict()
        assert d == {"L": 0.42, "C": 0.13, "H": 275.5}
        assert OklchColor.from_dict(d) == c

    def test_from_dict_without_hue(self):
        assert OklchColor.from_dict({"L": 0.3, "C": 0.0}).H == 0.0

    def test_as_tuple(self):
        assert OklchColor(0.1, 0.2, 30.0).as_tuple() == (0.1, 0.2, 30.0)


class TestCacheInfo:

    def test_fields(self):
        info = CacheInfo(hits=3, misses=1, maxsize=10, currsize=1)
        assert info.hits == 3
        assert tuple(info) == (3, 1, 10, 1)
