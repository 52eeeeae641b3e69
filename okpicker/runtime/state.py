# Copyright (c) 2026 Okpicker
# SPDX-License-Identifier: MIT

"""
Picker state: the three user-facing controls and what derives from them.

Controls:
- lightness: eased lightness in [0, 1] (OKLCH lightness is ease(lightness))
- chroma_ratio: fraction of the widest in-gamut chroma, in [0, 1]
- hue: degrees in [0, 360]

Setters behave like numeric form inputs: NaN and non-numeric input are
ignored, the value is truncated to MAX_NUMBER_INPUT_LENGTH characters and
then clamped to the control's range. A rejected update leaves the previous
value in place.

The state holds no UI objects. Views read ``color``, ``css_notations()``
and ``slider_track()`` and call the setters.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Optional

from okpicker.schema import OklchColor
from okpicker.measure.easing import ease, unease
from okpicker.measure.resolver import ChromaResolver, default_resolver
from okpicker.runtime.serializers.base import CssNotation
from okpicker.runtime.serializers.css import to_css, to_css_notations
from okpicker.runtime.serializers.parse import parse_to_oklch

logger = logging.getLogger(__name__)

# Characters a numeric input keeps ("0.1234", "359.99")
MAX_NUMBER_INPUT_LENGTH = 6

# Samples per slider track, one per pixel of a 360px track
SLIDER_SIZE_PX = 360

DEFAULT_LIGHTNESS = 0.6
DEFAULT_CHROMA_RATIO = 0.8
DEFAULT_HUE = 180.0


class SliderChannel(Enum):
    """The control a slider track varies."""

    LIGHTNESS = "lightness"
    CHROMA_RATIO = "chroma_ratio"
    HUE = "hue"

    @property
    def max_value(self) -> float:
        return 360.0 if self is SliderChannel.HUE else 1.0


def restrict_character_length(value: float, length: int = MAX_NUMBER_INPUT_LENGTH) -> float:
    """
    Truncate the decimal text of value to ``length`` characters.

    Uses fixed-point text so small numbers never turn into exponent
    notation: 0.1234567 -> 0.1234, 359.999 -> 359.99, 0.00001 -> 0.0.
    """
    if not math.isfinite(value):
        return value
    return float(f"{value:.15f}"[:length])


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class PickerState:
    """
    Mutable picker controls backed by a ChromaResolver.

    Args:
        lightness: Initial eased lightness
        chroma_ratio: Initial chroma ratio
        hue: Initial hue in degrees
        resolver: Resolver to use (defaults to the process-wide one)

    Example:
        >>> state = PickerState()
        >>> state.set_hue(250)
        True
        >>> state.apply_css_string("not-a-color")
        False
    """

    def __init__(
        self,
        lightness: float = DEFAULT_LIGHTNESS,
        chroma_ratio: float = DEFAULT_CHROMA_RATIO,
        hue: float = DEFAULT_HUE,
        resolver: Optional[ChromaResolver] = None,
    ) -> None:
        self.resolver = resolver or default_resolver()
        self._lightness = DEFAULT_LIGHTNESS
        self._chroma_ratio = DEFAULT_CHROMA_RATIO
        self._hue = DEFAULT_HUE
        self.set_lightness(lightness)
        self.set_chroma_ratio(chroma_ratio)
        self.set_hue(hue)

    # -------------------------------------------------------------------------
    # Controls
    # -------------------------------------------------------------------------

    @property
    def lightness(self) -> float:
        """Eased lightness control value."""
        return self._lightness

    @property
    def chroma_ratio(self) -> float:
        return self._chroma_ratio

    @property
    def hue(self) -> float:
        return self._hue

    def set_lightness(self, value: float) -> bool:
        """Set the eased lightness. Returns True if the value changed."""
        new = self._sanitize("lightness", value, 1.0)
        if new is None or new == self._lightness:
            return False
        self._lightness = new
        return True

    def set_chroma_ratio(self, value: float) -> bool:
        """Set the chroma ratio. Returns True if the value changed."""
        new = self._sanitize("chroma_ratio", value, 1.0)
        if new is None or new == self._chroma_ratio:
            return False
        self._chroma_ratio = new
        return True

    def set_hue(self, value: float) -> bool:
        """Set the hue in degrees. Returns True if the value changed."""
        new = self._sanitize("hue", value, 360.0)
        if new is None or new == self._hue:
            return False
        self._hue = new
        return True

    def _sanitize(self, name: str, value: float, high: float) -> Optional[float]:
        try:
            value = float(value)
        except (TypeError, ValueError):
            logger.debug("ignoring non-numeric %s: %r", name, value)
            return None
        if math.isnan(value):
            logger.debug("ignoring NaN for %s", name)
            return None
        return _clamp(restrict_character_length(value), 0.0, high)

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    @property
    def oklch_lightness(self) -> float:
        """True OKLCH lightness of the current color."""
        return ease(self._lightness)

    @property
    def color(self) -> OklchColor:
        """The resolved color of the current controls."""
        return self.resolver.color_from_chroma_ratio(
            self.oklch_lightness, self._chroma_ratio, self._hue
        )

    def css_notations(self) -> dict[CssNotation, str]:
        """The current color in every CSS notation, in display order."""
        return to_css_notations(self.color)

    def slider_track(
        self,
        channel: SliderChannel,
        steps: int = SLIDER_SIZE_PX,
    ) -> list[str]:
        """
        Sample the gradient drawn behind one slider.

        The chosen control runs from 0 to its maximum in ``steps`` evenly
        spaced samples; the other two controls keep their current values.

        Returns:
            ``steps`` CSS ``hsl()`` strings, from the left end to the right.
        """
        if steps < 2:
            raise ValueError(f"steps must be >= 2, got {steps}")

        lightness = self.oklch_lightness
        ratio = self._chroma_ratio
        hue = self._hue
        track = []
        for index in range(steps):
            position = channel.max_value * index / (steps - 1)
            if channel is SliderChannel.LIGHTNESS:
                color = self.resolver.color_from_chroma_ratio(ease(position), ratio, hue)
            elif channel is SliderChannel.CHROMA_RATIO:
                color = self.resolver.color_from_chroma_ratio(lightness, position, hue)
            else:
                color = self.resolver.color_from_chroma_ratio(lightness, ratio, position)
            track.append(to_css(color, CssNotation.HSL))
        return track

    # -------------------------------------------------------------------------
    # Editing through a CSS string
    # -------------------------------------------------------------------------

    def apply_css_string(self, text: str) -> bool:
        """
        Move the controls to the color described by a CSS string.

        The string's lightness is uneased, its chroma is turned into a
        ratio against the gamut maximum and its hue is used as is, each
        going through the regular setter. For black and white no chroma
        fits, so the chroma ratio is left unchanged.

        Returns:
            False if the string is not a valid color (state untouched),
            True otherwise.
        """
        parsed = parse_to_oklch(text)
        if parsed is None:
            return False

        ratio = self.resolver.chroma_ratio_of(parsed)
        self.set_lightness(unease(_clamp(parsed.L, 0.0, 1.0)))
        if ratio is not None:
            self.set_chroma_ratio(ratio)
        self.set_hue(parsed.H)
        return True
