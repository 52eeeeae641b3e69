# Copyright (c) 2026 Okpicker
# SPDX-License-Identifier: MIT

"""
Okpicker -- the computational core of an OKLCH color picker.

Maps a (lightness, chroma ratio, hue) control triple onto an OKLCH color
whose chroma is scaled against the widest chroma sRGB can display, and
serializes it to CSS.

Quick start::

    from okpicker import color_from_chroma_ratio, CssNotation

    c = color_from_chroma_ratio(0.7, 0.8, 250)
    c.hex                        # "#5b8ad9"-style sRGB hex
    c.to_css(CssNotation.OKLCH)  # "oklch(0.7 0.1 250)"-style string
"""

from __future__ import annotations

__version__ = "1.0.0"

from okpicker.schema import CacheInfo, OklchColor
from okpicker.measure import (
    ChromaResolver,
    GamutConfig,
    color_from_chroma_ratio,
    ease,
    max_chroma_in_gamut,
    to_hsl,
    unease,
)
from okpicker.runtime import (
    CssNotation,
    PickerState,
    SliderChannel,
    is_valid_color_string,
    parse_to_oklch,
    to_css,
)

__all__ = [
    # Core API
    "max_chroma_in_gamut",
    "color_from_chroma_ratio",
    "parse_to_oklch",
    "to_css",
    "to_hsl",
    # Types
    "OklchColor",
    "CacheInfo",
    "GamutConfig",
    "ChromaResolver",
    "CssNotation",
    # Controls
    "PickerState",
    "SliderChannel",
    "ease",
    "unease",
    "is_valid_color_string",
    # Version
    "__version__",
]
