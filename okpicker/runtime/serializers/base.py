# Copyright (c) 2026 Okpicker
# SPDX-License-Identifier: MIT

"""Base types for CSS serializers."""

from enum import Enum


class CssNotation(Enum):
    """CSS color notations, in the order the picker lists them."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    OKLCH = "oklch"
    OKLAB = "oklab"
    LCH = "lch"
    LAB = "lab"

    @property
    def srgb_bound(self) -> bool:
        """True for notations that can only express sRGB colors."""
        return self in (CssNotation.HEX, CssNotation.RGB, CssNotation.HSL)
