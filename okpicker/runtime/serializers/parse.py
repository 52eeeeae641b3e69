# Copyright (c) 2026 Okpicker
# SPDX-License-Identifier: MIT

"""
CSS string parser.

Accepts any color syntax coloraide understands: named colors, hex, and
the rgb(), hsl(), hwb(), lab(), lch(), oklab(), oklch() and color()
functions. Bad input is reported by returning None, never by raising.
"""

from __future__ import annotations

import logging
from typing import Optional

from coloraide import Color

from okpicker.schema import OklchColor

logger = logging.getLogger(__name__)


def parse_to_oklch(text: str) -> Optional[OklchColor]:
    """
    Parse a CSS color string into an OklchColor.

    Achromatic colors have no defined hue; their hue is reported as 0.

    Args:
        text: CSS color string, e.g. ``"oklch(60% 0.1 250)"`` or ``"#ff0000"``

    Returns:
        The parsed color, or None if the string is not a valid CSS color.
    """
    if not isinstance(text, str):
        return None
    try:
        parsed = Color(text.strip())
        L, C, H = parsed.convert("oklch").coords(nans=False)
        # Non-finite channels are rejected by OklchColor; huge literals can
        # also overflow inside the sRGB transfer function
        return OklchColor(L=L, C=C, H=H)
    except (ValueError, TypeError, OverflowError):
        logger.debug("not a CSS color: %r", text)
        return None


def is_valid_color_string(text: str) -> bool:
    """True if text parses as a CSS color."""
    return parse_to_oklch(text) is not None
