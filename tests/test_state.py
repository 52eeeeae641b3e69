# Copyright (c) 2026 Okpicker
# SPDX-License-Identifier: MIT

"""Tests for PickerState: control setters, slider tracks and CSS editing."""

import math

import pytest

from okpicker.measure import ChromaResolver, ease, unease
from okpicker.runtime import CssNotation, PickerState, SliderChannel
from okpicker.runtime.state import (
    DEFAULT_CHROMA_RATIO,
    DEFAULT_HUE,
    DEFAULT_LIGHTNESS,
    restrict_character_length,
)


@pytest.fixture
def state():
    return PickerState(resolver=ChromaResolver())


# ---------------------------------------------------------------------------
# Setters
# ---------------------------------------------------------------------------

class TestDefaults:

    def test_initial_controls(self, state):
        assert state.lightness == DEFAULT_LIGHTNESS == 0.6
        assert state.chroma_ratio == DEFAULT_CHROMA_RATIO == 0.8
        assert state.hue == DEFAULT_HUE == 180.0

    def test_color_uses_eased_lightness(self, state):
        color = state.color
        assert color.L == pytest.approx(ease(0.6))
        assert color.C == pytest.approx(state.resolver.max_chroma(ease(0.6), 180.0) * 0.8)
        assert color.in_gamut

    def test_constructor_sanitizes(self):
        s = PickerState(lightness=2.0, chroma_ratio=-1.0, hue=math.nan)
        assert s.lightness == 1.0
        assert s.chroma_ratio == 0.0
        assert s.hue == DEFAULT_HUE


class TestSetters:

    def test_set_returns_changed(self, state):
        assert state.set_hue(250.0)
        assert state.hue == 250.0
        assert not state.set_hue(250.0)

    def test_nan_is_ignored(self, state):
        assert not state.set_lightness(math.nan)
        assert not state.set_chroma_ratio(math.nan)
        assert not state.set_hue(math.nan)
        assert state.lightness == 0.6
        assert state.chroma_ratio == 0.8
        assert state.hue == 180.0

    @pytest.mark.parametrize("value", ["abc", "", None, object()])
    def test_non_numeric_is_ignored(self, state, value):
        assert not state.set_lightness(value)
        assert not state.set_chroma_ratio(value)
        assert not state.set_hue(value)
        assert (state.lightness, state.chroma_ratio, state.hue) == (0.6, 0.8, 180.0)

    def test_constructor_ignores_non_numeric(self):
        s = PickerState(hue="abc", resolver=ChromaResolver())
        assert s.hue == DEFAULT_HUE

    @pytest.mark.parametrize("value, expected", [
        (1.5, 1.0),
        (-0.2, 0.0),
        (math.inf, 1.0),
        (-math.inf, 0.0),
    ])
    def test_lightness_is_clamped(self, state, value, expected):
        state.set_lightness(value)
        assert state.lightness == expected

    @pytest.mark.parametrize("value, expected", [
        (400.0, 360.0),
        (-10.0, 0.0),
    ])
    def test_hue_is_clamped(self, state, value, expected):
        state.set_hue(value)
        assert state.hue == expected

    def test_values_are_truncated(self, state):
        state.set_chroma_ratio(0.1234567)
        assert state.chroma_ratio == 0.1234
        state.set_hue(359.999)
        assert state.hue == 359.99

    def test_accepts_numeric_strings(self, state):
        state.set_hue("90")
        assert state.hue == 90.0


class TestRestrictCharacterLength:

    @pytest.mark.parametrize("value, expected", [
        (0.1234567, 0.1234),
        (359.999, 359.99),
        (0.00001, 0.0),
        (1.0, 1.0),
        (-0.5, -0.5),
    ])
    def test_truncates(self, value, expected):
        assert restrict_character_length(value) == expected

    def test_passes_infinity(self):
        assert restrict_character_length(math.inf) == math.inf


# ---------------------------------------------------------------------------
# Derived values
# ---------------------------------------------------------------------------

class TestDerived:

    def test_css_notations(self, state):
        notations = state.css_notations()
        assert list(notations) == list(CssNotation)
        assert notations[CssNotation.HEX] == state.color.hex

    @pytest.mark.parametrize("channel", list(SliderChannel))
    def test_slider_track(self, state, channel):
        track = state.slider_track(channel)
        assert len(track) == 360
        assert all(stop.startswith("hsl(") for stop in track)

    def test_lightness_track_ends(self, state):
        track = state.slider_track(SliderChannel.LIGHTNESS, steps=2)
        assert track[0] == state.resolver.to_hsl(0.0, state.chroma_ratio, state.hue)
        assert track[1] == state.resolver.to_hsl(1.0, state.chroma_ratio, state.hue)

    def test_track_leaves_state_alone(self, state):
        state.slider_track(SliderChannel.HUE, steps=10)
        assert state.hue == 180.0

    def test_rejects_short_track(self, state):
        with pytest.raises(ValueError, match="steps"):
            state.slider_track(SliderChannel.HUE, steps=1)


# ---------------------------------------------------------------------------
# CSS editing
# ---------------------------------------------------------------------------

class TestApplyCssString:

    def test_invalid_leaves_state_untouched(self, state):
        assert not state.apply_css_string("not-a-color")
        assert (state.lightness, state.chroma_ratio, state.hue) == (0.6, 0.8, 180.0)

    def test_overflowing_string_leaves_state_untouched(self, state):
        assert not state.apply_css_string("rgb(1e300 0 0)")
        assert (state.lightness, state.chroma_ratio, state.hue) == (0.6, 0.8, 180.0)

    def test_oklch_string(self, state):
        assert state.apply_css_string("oklch(60% 0.1 250)")
        assert state.lightness == pytest.approx(unease(0.6), abs=2e-4)
        expected_ratio = min(1.0, 0.1 / state.resolver.max_chroma(0.6, 250.0))
        assert state.chroma_ratio == pytest.approx(expected_ratio, abs=2e-4)
        assert state.hue == 250.0

    def test_resolved_color_matches_input(self, state):
        state.apply_css_string("oklch(50% 0.05 120)")
        color = state.color
        assert color.L == pytest.approx(0.5, abs=1e-3)
        assert color.C == pytest.approx(0.05, abs=1e-3)
        assert color.H == pytest.approx(120.0, abs=0.01)

    def test_gamut_edge_color_gets_full_ratio(self, state):
        assert state.apply_css_string("#ff0000")
        assert state.chroma_ratio >= 0.99

    def test_white_keeps_chroma_ratio(self, state):
        assert state.apply_css_string("#ffffff")
        assert state.lightness == pytest.approx(1.0, abs=1e-3)
        assert state.chroma_ratio == 0.8
        assert state.hue == 0.0
