# Copyright (c) 2026 Okpicker
# SPDX-License-Identifier: MIT

"""
OklchColor -- the value type every picker operation produces.

Design principles:
- Immutable: frozen dataclass, hue normalized once on construction
- Permissive: lightness and chroma are NOT range-checked, because callers
  may deliberately ask for colors outside the sRGB gamut
- Serializable: plain dict form plus the seven CSS notations

OKLCH Color Space:
- L (Lightness): 0.0 = black, 1.0 = white
- C (Chroma): 0.0 = gray, ~0.32 = max saturation in sRGB
- H (Hue): 0-360 degrees, wraps around
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from okpicker.runtime.serializers.base import CssNotation


class CacheInfo(NamedTuple):
    """Statistics of a gamut cache, shaped like ``functools`` cache_info()."""

    hits: int
    misses: int
    maxsize: int
    currsize: int


@dataclass(frozen=True, slots=True)
class OklchColor:
    """
    A single color in OKLCH color space.

    Attributes:
        L: Lightness (0.0 = black, 1.0 = white)
        C: Chroma (0.0 = neutral gray). Unbounded; values above the gamut
           limit at (L, H) are valid but not displayable in sRGB.
        H: Hue in degrees, stored modulo 360
    """
    L: float
    C: float
    H: float = 0.0

    def __post_init__(self) -> None:
        """Reject non-finite components and wrap the hue."""
        for name in ("L", "C", "H"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number, got {value}")
        object.__setattr__(self, "H", self.H % 360.0)

    @property
    def in_gamut(self) -> bool:
        """True if the color is displayable in sRGB (within tolerance)."""
        from okpicker.measure.colorspace import is_in_gamut
        return bool(is_in_gamut(self.as_tuple()))

    @property
    def srgb(self) -> tuple[float, float, float]:
        """sRGB channels in [0, 1], clipped per channel."""
        from okpicker.measure.colorspace import oklch_to_srgb
        r, g, b = oklch_to_srgb(self.as_tuple())
        return float(r), float(g), float(b)

    @property
    def hex(self) -> str:
        """
        Get hex color string.

        Out-of-gamut colors are clipped per channel first.

        Returns:
            Lowercase hex string like "#3941c8"
        """
        from okpicker.runtime.serializers.base import CssNotation
        return self.to_css(CssNotation.HEX)

    def to_css(self, notation: CssNotation) -> str:
        """Serialize to a CSS color string in the given notation."""
        from okpicker.runtime.serializers.css import to_css
        return to_css(self, notation)

    def as_tuple(self) -> tuple[float, float, float]:
        """Return ``(L, C, H)``."""
        return (self.L, self.C, self.H)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"L": self.L, "C": self.C, "H": self.H}

    @classmethod
    def from_dict(cls, data: dict) -> OklchColor:
        """Deserialize from dictionary."""
        return cls(L=data["L"], C=data["C"], H=data.get("H", 0.0))
