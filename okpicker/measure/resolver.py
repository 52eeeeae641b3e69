# Copyright (c) 2026 Okpicker
# SPDX-License-Identifier: MIT

"""
Color resolver: (lightness, chroma ratio, hue) → OklchColor.

The chroma ratio is a control value in [0, 1] measured against the widest
chroma sRGB can show at the given lightness and hue. The resolver looks
that maximum up through its own bounded cache and scales it.

The ratio is deliberately not clamped. A ratio above 1 (or a lightness
outside [0, 1]) gives a mathematically valid color outside the gamut;
its sRGB-based serializations clip per channel.
"""

from __future__ import annotations

import logging
from typing import Optional

from okpicker.schema import CacheInfo, OklchColor
from okpicker.measure.cache import GamutCache
from okpicker.measure.gamut import GamutConfig, search_max_chroma

logger = logging.getLogger(__name__)


class ChromaResolver:
    """
    Resolves chroma ratios into absolute OKLCH colors.

    Each resolver owns one GamutCache, so cache lifetime and size follow
    the resolver. Module-level helpers share a process-wide default
    instance.

    Example:
        >>> resolver = ChromaResolver()
        >>> color = resolver.color_from_chroma_ratio(0.8, 0.5, 120)
        >>> color.C == resolver.max_chroma(0.8, 120) / 2
        True
    """

    def __init__(self, config: Optional[GamutConfig] = None) -> None:
        self.config = config or GamutConfig()
        self._cache = GamutCache(self.config.cache_size)

    def max_chroma(
        self,
        lightness: float,
        hue: float,
        delta: Optional[float] = None,
    ) -> float:
        """
        Maximum in-gamut chroma for (lightness, hue), memoized.

        Args:
            lightness: OKLCH lightness
            hue: Hue in degrees
            delta: Search tolerance (defaults to ``config.delta``)

        Returns:
            The cached or freshly searched maximum chroma
        """
        tolerance = self.config.delta if delta is None else delta
        key = (lightness, hue, tolerance)

        cached = self._cache.get(key)
        if cached is not None:
            return cached

        value = search_max_chroma(lightness, hue, self.config, delta=tolerance)
        logger.debug(
            "max chroma L=%s H=%s delta=%s -> %.6f", lightness, hue, tolerance, value
        )
        self._cache.put(key, value)
        return value

    def color_from_chroma_ratio(
        self,
        lightness: float,
        chroma_ratio: float,
        hue: float,
    ) -> OklchColor:
        """Build the color whose chroma is ``chroma_ratio`` of the gamut maximum."""
        max_chroma = self.max_chroma(lightness, hue)
        return OklchColor(L=lightness, C=max_chroma * chroma_ratio, H=hue)

    def chroma_ratio_of(self, color: OklchColor) -> Optional[float]:
        """
        Express a color's chroma as a ratio of the gamut maximum.

        Returns None when no chroma fits at that lightness and hue
        (pure black or white), where the ratio is undefined.
        """
        max_chroma = self.max_chroma(color.L, color.H)
        if max_chroma <= 0.0:
            return None
        return color.C / max_chroma

    def to_hsl(self, lightness: float, chroma_ratio: float, hue: float) -> str:
        """CSS ``hsl()`` string of the resolved color."""
        from okpicker.runtime.serializers.base import CssNotation
        from okpicker.runtime.serializers.css import to_css
        return to_css(
            self.color_from_chroma_ratio(lightness, chroma_ratio, hue),
            CssNotation.HSL,
        )

    def cache_info(self) -> CacheInfo:
        return self._cache.info()

    def clear_cache(self) -> None:
        self._cache.clear()


_default_resolver: Optional[ChromaResolver] = None


def default_resolver() -> ChromaResolver:
    """Get or create the process-wide resolver used by the module helpers."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = ChromaResolver()
    return _default_resolver


def max_chroma_in_gamut(lightness: float, hue: float, delta: float = 0.001) -> float:
    """Maximum in-gamut chroma for (lightness, hue), via the default resolver."""
    return default_resolver().max_chroma(lightness, hue, delta)


def color_from_chroma_ratio(lightness: float, chroma_ratio: float, hue: float) -> OklchColor:
    """Resolve a chroma ratio into an OklchColor, via the default resolver."""
    return default_resolver().color_from_chroma_ratio(lightness, chroma_ratio, hue)


def to_hsl(lightness: float, chroma_ratio: float, hue: float) -> str:
    """CSS ``hsl()`` string for a control triple, via the default resolver."""
    return default_resolver().to_hsl(lightness, chroma_ratio, hue)
