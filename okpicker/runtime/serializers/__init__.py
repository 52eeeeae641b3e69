# Copyright (c) 2026 Okpicker
# SPDX-License-Identifier: MIT

"""
CSS serializers and parser.

Serializers turn an OklchColor into CSS strings; the parser turns any CSS
color string back into an OklchColor. Neither ever raises on bad colors.
"""

from okpicker.runtime.serializers.base import CssNotation
from okpicker.runtime.serializers.css import to_css, to_css_notations
from okpicker.runtime.serializers.parse import is_valid_color_string, parse_to_oklch

__all__ = [
    "CssNotation",
    "to_css",
    "to_css_notations",
    "parse_to_oklch",
    "is_valid_color_string",
]
