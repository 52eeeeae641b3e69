# Copyright (c) 2026 Okpicker
# SPDX-License-Identifier: MIT

"""
Lightness easing for user-facing controls.

OKLCH lightness crowds dark colors into the low end of the scale compared
with HSL lightness. The picker's lightness control works on an eased value
instead: raising it to EASING_EXPONENT gives the OKLCH lightness.

Only the control layer (PickerState) applies this. Resolver and gamut
solver always work on true OKLCH lightness.
"""

from __future__ import annotations

EASING_EXPONENT = 0.74


def ease(x: float) -> float:
    """Control value -> OKLCH lightness. Maps [0, 1] onto [0, 1]."""
    if x < 0.0:
        raise ValueError(f"Eased lightness must be >= 0, got {x}")
    return x ** EASING_EXPONENT


def unease(x: float) -> float:
    """OKLCH lightness -> control value. Inverse of ease on [0, 1]."""
    if x < 0.0:
        raise ValueError(f"Lightness must be >= 0, got {x}")
    return x ** (1.0 / EASING_EXPONENT)
