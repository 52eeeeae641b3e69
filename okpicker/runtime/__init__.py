# Copyright (c) 2026 Okpicker
# SPDX-License-Identifier: MIT

"""
Runtime layer for okpicker.

The boundary a UI talks to:

1. Serializers -- OklchColor to CSS strings and back
2. PickerState -- user-facing controls, slider tracks, CSS editing

Nothing here renders anything or depends on a UI framework.
"""

from okpicker.runtime.serializers import (
    CssNotation,
    is_valid_color_string,
    parse_to_oklch,
    to_css,
    to_css_notations,
)
from okpicker.runtime.state import (
    MAX_NUMBER_INPUT_LENGTH,
    SLIDER_SIZE_PX,
    PickerState,
    SliderChannel,
)

__all__ = [
    "CssNotation",
    "to_css",
    "to_css_notations",
    "parse_to_oklch",
    "is_valid_color_string",
    "PickerState",
    "SliderChannel",
    "MAX_NUMBER_INPUT_LENGTH",
    "SLIDER_SIZE_PX",
]
