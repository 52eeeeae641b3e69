# Copyright (c) 2026 Okpicker
# SPDX-License-Identifier: MIT

"""
Gamut solver: the largest chroma that stays inside sRGB.

For a fixed lightness and hue, the in-gamut chromas form an interval
[0, C_max]. C_max is found by bisection on [0, SRGB_CHROMA_CEILING]:

- a midpoint that converts into sRGB moves the lower bound up
- a midpoint that does not moves the upper bound down
- the search stops once the interval is no wider than ``delta`` and
  returns the lower bound, the last chroma confirmed in gamut

The answer therefore never leaves the gamut but may sit up to ``delta``
below the true boundary. With the defaults the loop runs 9 times.

The ceiling and the in-gamut test are specific to sRGB. Wider targets
(Display-P3, Rec.2020) need a larger ceiling and a different test.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from okpicker.measure.colorspace import GAMUT_EPSILON, is_in_gamut

# Empirical upper bound of Oklch chroma inside sRGB. The most saturated
# sRGB color (a magenta near L=0.70, H=328) reaches about 0.3216.
SRGB_CHROMA_CEILING = 0.322

DEFAULT_DELTA = 0.001


@dataclass(frozen=True)
class GamutConfig:
    """Configuration for the gamut solver and its cache."""

    # Upper end of the bisection interval
    chroma_ceiling: float = SRGB_CHROMA_CEILING

    # Convergence tolerance: the search stops when upper - lower <= delta
    delta: float = DEFAULT_DELTA

    # Per-channel tolerance of the in-gamut test
    epsilon: float = GAMUT_EPSILON

    # Maximum cached (lightness, hue, delta) entries; 0 disables caching
    cache_size: int = 4096

    def __post_init__(self) -> None:
        """Validate search parameters."""
        if not self.delta > 0.0:
            raise ValueError(f"delta must be > 0, got {self.delta}")
        if not self.chroma_ceiling > 0.0:
            raise ValueError(
                f"chroma_ceiling must be > 0, got {self.chroma_ceiling}"
            )
        if self.epsilon < 0.0:
            raise ValueError(f"epsilon must be >= 0, got {self.epsilon}")
        if self.cache_size < 0:
            raise ValueError(f"cache_size must be >= 0, got {self.cache_size}")


def max_iterations(delta: float, chroma_ceiling: float = SRGB_CHROMA_CEILING) -> int:
    """Number of bisection steps the search takes for a given delta."""
    if not delta > 0.0:
        raise ValueError(f"delta must be > 0, got {delta}")
    if delta >= chroma_ceiling:
        return 0
    return math.ceil(math.log2(chroma_ceiling / delta))


def search_max_chroma(
    lightness: float,
    hue: float,
    config: GamutConfig | None = None,
    *,
    delta: float | None = None,
) -> float:
    """
    Find the maximum in-gamut chroma for (lightness, hue) by bisection.

    Uncached; the resolver puts a cache in front of this.

    Args:
        lightness: OKLCH lightness, expected in [0, 1]. Not validated:
            values outside the range return a number (usually 0.0).
        hue: Hue in degrees. Any finite value works since hue is periodic.
        config: Search parameters (uses defaults if None)
        delta: Overrides ``config.delta`` for this call

    Returns:
        Largest chroma found in gamut, at most ``delta`` below the boundary
    """
    cfg = config or GamutConfig()
    tolerance = cfg.delta if delta is None else delta
    if not tolerance > 0.0:
        raise ValueError(f"delta must be > 0, got {tolerance}")

    lower = 0.0
    upper = cfg.chroma_ceiling
    while upper - lower > tolerance:
        chroma = lower + (upper - lower) / 2
        if is_in_gamut(np.array([lightness, chroma, hue]), cfg.epsilon):
            lower = chroma
        else:
            upper = chroma
    return lower


def max_chroma_batch(
    lightness: ArrayLike,
    hue: ArrayLike,
    delta: float = DEFAULT_DELTA,
    config: GamutConfig | None = None,
) -> NDArray[np.float64]:
    """
    Vectorized max chroma search over broadcastable arrays.

    Each element follows exactly the steps search_max_chroma takes for it,
    so the results match the scalar search element by element. Nothing is
    cached.

    Args:
        lightness: Array of lightness values
        hue: Array of hue values in degrees, broadcastable with lightness
        delta: Convergence tolerance
        config: Ceiling and gamut tolerance (uses defaults if None)

    Returns:
        Array of maximum in-gamut chroma with the broadcast shape
    """
    cfg = config or GamutConfig()
    if not delta > 0.0:
        raise ValueError(f"delta must be > 0, got {delta}")

    L, H = np.broadcast_arrays(
        np.asarray(lightness, dtype=np.float64),
        np.asarray(hue, dtype=np.float64),
    )
    lower = np.zeros_like(L)
    upper = np.full_like(L, cfg.chroma_ceiling)

    active = (upper - lower) > delta
    while np.any(active):
        mid = lower + (upper - lower) / 2
        inside = is_in_gamut(np.stack([L, mid, H], axis=-1), cfg.epsilon)
        lower = np.where(active & inside, mid, lower)
        upper = np.where(active & ~inside, mid, upper)
        active = (upper - lower) > delta

    return lower
