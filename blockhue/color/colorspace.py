# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion hub: sRGB → Linear RGB, then

    Linear RGB → OKLab → OKLCH
    Linear RGB → XYZ (D65) → CIE Lab
    sRGB → HSL

OKLab and Lab share the linear-light intermediate and never pass through HSL,
so hue rounding in HSL cannot leak into the perceptual spaces.

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- CIE Lab: CIE 15:2004, D65 reference white

All conversions are pure NumPy over arrays of shape (..., 3).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((np.maximum(srgb, 0.04045) + 0.055) / 1.055, 2.4)
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Out-of-gamut input is clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055
    )
    return np.clip(srgb, 0.0, 1.0)


def srgb_to_uint8(srgb: NDArray[np.float64]) -> NDArray[np.int64]:
    """
    Quantize sRGB [0,1] to 8-bit channel values.

    Uses round-to-nearest (never truncation) so that k/255 always maps
    back to k.
    """
    srgb = np.clip(np.asarray(srgb, dtype=np.float64), 0.0, 1.0)
    return np.rint(srgb * 255.0).astype(np.int64)


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

# Inverse matrices
_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    # RGB to LMS
    lms = np.einsum('...j,ij->...i', rgb, _M1)

    # Cube root (handles negative values for out-of-gamut colors)
    lms_cbrt = np.cbrt(lms)

    # LMS to OKLab
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values (not clipped)
    """
    lab = np.asarray(lab, dtype=np.float64)

    # OKLab to LMS (cubed)
    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)
    lms = lms_cbrt ** 3

    # LMS to RGB
    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0

    return np.stack([L, C, H], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH (H in degrees) to OKLab.
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


# =============================================================================
# Linear RGB ↔ XYZ ↔ CIE Lab (D65)
# =============================================================================

# Linear sRGB to CIE XYZ, D65 reference white
_M_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

_M_XYZ_INV = np.linalg.inv(_M_XYZ)

# D65 white point, Y normalized to 1
_WHITE_D65 = np.array([0.95047, 1.0, 1.08883], dtype=np.float64)

_LAB_EPSILON = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert linear RGB to CIE XYZ (D65, Y in [0, 1])."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _M_XYZ)


def xyz_to_linear_rgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIE XYZ (D65) to linear RGB (not clipped)."""
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, _M_XYZ_INV)


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to CIE L*a*b*.

    Returns:
        Array of shape (..., 3) with L in [0, 100] for in-gamut colors
    """
    ratio = np.asarray(xyz, dtype=np.float64) / _WHITE_D65
    f = np.where(
        ratio > _LAB_EPSILON,
        np.cbrt(ratio),
        (_LAB_KAPPA * ratio + 16.0) / 116.0,
    )
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIE L*a*b* to CIE XYZ (D65)."""
    lab = np.asarray(lab, dtype=np.float64)
    L = lab[..., 0]

    fy = (L + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0

    x = np.where(fx ** 3 > _LAB_EPSILON, fx ** 3, (116.0 * fx - 16.0) / _LAB_KAPPA)
    y = np.where(L > _LAB_KAPPA * _LAB_EPSILON, fy ** 3, L / _LAB_KAPPA)
    z = np.where(fz ** 3 > _LAB_EPSILON, fz ** 3, (116.0 * fz - 16.0) / _LAB_KAPPA)

    return np.stack([x, y, z], axis=-1) * _WHITE_D65


# =============================================================================
# sRGB ↔ HSL
# =============================================================================


def srgb_to_hsl(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to HSL.

    Returns:
        Array of shape (..., 3) with (H, S, L):
        - H: degrees in [0, 360), exactly 0 for achromatic input
        - S, L: [0, 1]
    """
    srgb = np.clip(np.asarray(srgb, dtype=np.float64), 0.0, 1.0)
    r, g, b = srgb[..., 0], srgb[..., 1], srgb[..., 2]

    mx = np.max(srgb, axis=-1)
    mn = np.min(srgb, axis=-1)
    delta = mx - mn
    chromatic = delta > 0.0
    safe_delta = np.where(chromatic, delta, 1.0)

    L = (mx + mn) / 2.0
    denom = 1.0 - np.abs(2.0 * L - 1.0)
    S = np.where(chromatic, delta / np.where(denom > 0.0, denom, 1.0), 0.0)

    H = np.where(
        mx == r,
        ((g - b) / safe_delta) % 6.0,
        np.where(mx == g, (b - r) / safe_delta + 2.0, (r - g) / safe_delta + 4.0),
    )
    H = np.where(chromatic, H * 60.0, 0.0) % 360.0
    # Float modulo can land on 360.0 for tiny negative inputs
    H = np.where(H >= 360.0, 0.0, H)

    return np.stack([H, np.clip(S, 0.0, 1.0), L], axis=-1)


def hsl_to_srgb(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert HSL (H in degrees) to sRGB [0,1].

    Hue may be any real number; it is taken modulo 360.
    """
    hsl = np.asarray(hsl, dtype=np.float64)
    H = hsl[..., 0] % 360.0
    S = np.clip(hsl[..., 1], 0.0, 1.0)
    L = np.clip(hsl[..., 2], 0.0, 1.0)

    a = S * np.minimum(L, 1.0 - L)

    def channel(n: float) -> NDArray[np.float64]:
        k = (n + H / 30.0) % 12.0
        return L - a * np.maximum(-1.0, np.minimum(np.minimum(k - 3.0, 9.0 - k), 1.0))

    return np.clip(np.stack([channel(0.0), channel(8.0), channel(4.0)], axis=-1), 0.0, 1.0)


# =============================================================================
# Hex helpers
# =============================================================================

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """
    Parse a hex color string.

    Args:
        hex_color: "#3941C8", "3941C8" or the short form "#FFF"

    Returns:
        (r, g, b) tuple of ints in [0, 255]

    Raises:
        ValueError: For anything that is not 3 or 6 hex digits
    """
    digits = hex_color.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(f"Hex color must have 6 digits, got '{hex_color}'")
    if any(ch not in _HEX_DIGITS for ch in digits):
        raise ValueError(f"Invalid hex digits in '{hex_color}'")
    value = int(digits, 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format 8-bit channels as an upper-case "#RRGGBB" string."""
    return f"#{int(r):02X}{int(g):02X}{int(b):02X}"


# =============================================================================
# ΔE Distance (Perceptual Color Difference)
# =============================================================================


def oklab_distance_batch(
    colors1: NDArray[np.float64],
    colors2: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Vectorized Euclidean distance between OKLab colors.

    Reference thresholds (OKLab Euclidean, 0-1 scale):
    - ΔE ≈ 0.02: barely perceptible (expert eye)
    - ΔE ≈ 0.04: noticeable difference
    - ΔE ≈ 0.08+: clearly different colors

    Args:
        colors1: Array of shape (N, 3) or (3,) with OKLab values
        colors2: Array broadcastable against colors1

    Returns:
        Array of shape (N,) with ΔE values
    """
    delta = np.asarray(colors1, dtype=np.float64) - np.asarray(colors2, dtype=np.float64)
    return np.sqrt(np.sum(delta ** 2, axis=-1))
