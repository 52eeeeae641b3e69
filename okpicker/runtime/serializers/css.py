# Copyright (c) 2026 Okpicker
# SPDX-License-Identifier: MIT

"""
CSS string serializer.

Formats an OklchColor in the CSS Color Module 4 notations, using
coloraide's canonical serialization (space-separated channels, no
trailing zeros, five significant digits).

Handling of colors outside sRGB:
- HEX, RGB and HSL clip each sRGB channel to [0, 1] first. Serializing
  never fails, but the result is lossy for out-of-gamut input.
- OKLCH, OKLAB, LCH and LAB are unbounded and written unchanged.
"""

from __future__ import annotations

from coloraide import Color

from okpicker.schema import OklchColor
from okpicker.runtime.serializers.base import CssNotation


def to_css(color: OklchColor, notation: CssNotation) -> str:
    """Serialize an OklchColor as a CSS color string.

    Args:
        color: The color to serialize.
        notation: Target notation.

    Returns:
        CSS string, e.g. ``#a1b2c3``, ``rgb(161 178 195)``,
        ``oklch(0.6 0.1 250)``.

    Example::

        >>> to_css(OklchColor(1.0, 0.0, 0.0), CssNotation.HEX)
        '#ffffff'
    """
    source = Color("oklch", [color.L, color.C, color.H])

    if notation.srgb_bound:
        srgb = source.convert("srgb").clip()
        if notation == CssNotation.HEX:
            return srgb.to_string(hex=True)
        if notation == CssNotation.RGB:
            return srgb.to_string(fit=False)
        return srgb.convert("hsl").to_string(fit=False, percent=True)

    if notation == CssNotation.OKLCH:
        return source.to_string(fit=False)
    return source.convert(notation.value).to_string(fit=False)


def to_css_notations(color: OklchColor) -> dict[CssNotation, str]:
    """Serialize a color in every notation, in CssNotation order."""
    return {notation: to_css(color, notation) for notation in CssNotation}
