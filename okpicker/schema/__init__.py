# Copyright (c) 2026 Okpicker
# SPDX-License-Identifier: MIT

"""
Schema definitions for the picker.

All types in this module are immutable. A resolved color is a value:
changing a control produces a new OklchColor, it never edits one.
"""

from okpicker.schema.oklch_color import CacheInfo, OklchColor

__all__ = [
    "OklchColor",
    "CacheInfo",
]
