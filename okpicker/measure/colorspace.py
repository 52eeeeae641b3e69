# Copyright (c) 2026 Okpicker
# SPDX-License-Identifier: MIT

"""
Color space conversions and the sRGB in-gamut test.

Conversion chain: OKLCH → OKLab → Linear RGB → sRGB (and back)

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- OKLCH: Cylindrical form of OKLab (Lightness, Chroma, Hue)

All conversions are pure NumPy over arrays of shape (..., 3). The gamut
solver needs to see how far outside [0, 1] a channel lands, so the
sRGB-facing functions take ``clip`` and only clamp when asked to.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Channel tolerance of the in-gamut test. Only absorbs floating-point
# noise; a looser tolerance lets visible chroma through near black.
GAMUT_EPSILON = 1e-7


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB values to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For |value| <= 0.04045: linear/12.92
    - Otherwise: sign(value) * ((|value| + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    magnitude = np.abs(srgb)
    linear = np.where(
        magnitude <= 0.04045,
        srgb / 12.92,
        np.sign(srgb) * np.power((magnitude + 0.055) / 1.055, 2.4)
    )
    return linear


def linear_to_srgb(linear: ArrayLike, clip: bool = True) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB.

    Inverse of srgb_to_linear. With ``clip=False`` the curve is extended
    symmetrically to negative values and nothing is clamped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    if clip:
        linear = np.clip(linear, 0.0, 1.0)
    magnitude = np.abs(linear)
    srgb = np.where(
        magnitude <= 0.0031308,
        linear * 12.92,
        np.sign(linear) * (1.055 * np.power(magnitude, 1.0 / 2.4) - 0.055)
    )
    return srgb


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# OKLab to LMS (cube root space)
_M2_INV = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
], dtype=np.float64)

# LMS to linear sRGB
_M1_INV = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
], dtype=np.float64)


def linear_rgb_to_oklab(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    lms = np.einsum('...j,ij->...i', rgb, _M1)

    # Sign-preserving cube root for out-of-gamut inputs
    lms_cbrt = np.sign(lms) * np.abs(lms) ** (1.0 / 3.0)

    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values, unclipped
    """
    lab = np.asarray(lab, dtype=np.float64)

    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)
    lms = lms_cbrt ** 3

    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def oklab_to_oklch(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H),
        H in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0

    return np.stack([L, C, H], axis=-1)


def oklch_to_oklab(lch: ArrayLike) -> NDArray[np.float64]:
    """
    Convert OKLCH to OKLab.

    Hue is periodic, so any finite hue (including negatives and values
    past 360) is accepted.
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    a = C * np.cos(H_rad)
    b = C * np.sin(H_rad)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# Full chain and gamut test
# =============================================================================


def srgb_to_oklch(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to OKLCH.

    Full chain: sRGB → Linear RGB → OKLab → OKLCH
    """
    linear = srgb_to_linear(srgb)
    lab = linear_rgb_to_oklab(linear)
    return oklab_to_oklch(lab)


def oklch_to_srgb(lch: ArrayLike, clip: bool = True) -> NDArray[np.float64]:
    """
    Convert OKLCH to sRGB.

    Full chain: OKLCH → OKLab → Linear RGB → sRGB

    Args:
        lch: Array of shape (..., 3) with OKLCH values (L, C, H)
        clip: Clamp every channel to [0, 1]. When False, out-of-gamut
            colors keep their out-of-range channel values.

    Returns:
        Array of shape (..., 3) with sRGB values
    """
    lab = oklch_to_oklab(lch)
    linear = oklab_to_linear_rgb(lab)
    srgb = linear_to_srgb(linear, clip=False)
    if clip:
        return np.clip(srgb, 0.0, 1.0)
    return srgb


def is_in_gamut(lch: ArrayLike, epsilon: float = GAMUT_EPSILON) -> NDArray[np.bool_]:
    """
    Check whether OKLCH colors are displayable in sRGB.

    A color is in gamut when every channel of its unclipped sRGB
    conversion lies within [-epsilon, 1 + epsilon].

    Args:
        lch: Array of shape (..., 3) with OKLCH values
        epsilon: Per-channel tolerance

    Returns:
        Bool array of shape (...,); a 0-d array for a single color
    """
    srgb = oklch_to_srgb(lch, clip=False)
    in_range = (srgb >= -epsilon) & (srgb <= 1.0 + epsilon)
    return np.all(in_range, axis=-1)
