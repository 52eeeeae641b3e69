# Copyright (c) 2026 Okpicker
# SPDX-License-Identifier: MIT

"""
Numeric core for okpicker.

Gamut solver, its cache, the chroma-ratio resolver and lightness easing.
All operations are pure CPU-bound computations without I/O.
"""

from okpicker.measure.cache import GamutCache
from okpicker.measure.easing import EASING_EXPONENT, ease, unease
from okpicker.measure.gamut import (
    DEFAULT_DELTA,
    SRGB_CHROMA_CEILING,
    GamutConfig,
    max_chroma_batch,
    search_max_chroma,
)
from okpicker.measure.resolver import (
    ChromaResolver,
    color_from_chroma_ratio,
    default_resolver,
    max_chroma_in_gamut,
    to_hsl,
)

__all__ = [
    # Gamut solver
    "GamutConfig",
    "SRGB_CHROMA_CEILING",
    "DEFAULT_DELTA",
    "search_max_chroma",
    "max_chroma_batch",
    "max_chroma_in_gamut",
    # Resolver
    "ChromaResolver",
    "GamutCache",
    "color_from_chroma_ratio",
    "default_resolver",
    "to_hsl",
    # Easing
    "EASING_EXPONENT",
    "ease",
    "unease",
]
