# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Color space conversions and the WCAG contrast metric.

Conversion chain: sRGB → Linear RGB → XYZ (D50) → CIELAB → CIELCh

References:
- sRGB transfer function: IEC 61966-2-1
- CIELAB: CIE 15:2004, D50 reference white
- WCAG 2.x relative luminance and contrast ratio

Every function is pure; there is no mode registration or global state.
Array functions accept shape (..., 3).
"""

from __future__ import annotations

import re
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from tonekit.errors import InvalidHexError
from tonekit.schema import LCHColor


# Below this chroma a color has no meaningful hue
ACHROMATIC_CHROMA = 1e-3

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


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
        np.power((np.maximum(srgb, 0.04045) + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Out-of-gamut values are clipped.
    """
    linear = np.clip(np.asarray(linear, dtype=np.float64), 0.0, 1.0)
    srgb = np.where(
        linear <= 0.0031308,
        linear * 12.92,
        1.055 * np.power(linear, 1.0 / 2.4) - 0.055,
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ XYZ (D50)
# =============================================================================

# Linear sRGB to XYZ, chromatically adapted from D65 to D50 (Bradford)
_RGB_TO_XYZ = np.array([
    [0.436065742824811, 0.3851514688337912, 0.14307845442264197],
    [0.22249319175623702, 0.7168870538238823, 0.06061979053616537],
    [0.013923904500943465, 0.09708128566574634, 0.7140993584005155],
], dtype=np.float64)

_XYZ_TO_RGB = np.linalg.inv(_RGB_TO_XYZ)

# D50 reference white from its xy chromaticity (0.3457, 0.3585)
_WHITE_D50 = np.array([
    0.3457 / 0.3585,
    1.0,
    (1.0 - 0.3457 - 0.3585) / 0.3585,
], dtype=np.float64)


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert linear RGB to XYZ relative to D50."""
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _RGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert XYZ (D50) to linear RGB. Result may be out of [0, 1]."""
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, _XYZ_TO_RGB)


# =============================================================================
# XYZ ↔ CIELAB
# =============================================================================

_KAPPA = 24389.0 / 27.0
_EPSILON = 216.0 / 24389.0


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert XYZ (D50) to CIELAB.

    Returns:
        Array of shape (..., 3) with (L, a, b); L in [0, 100]
    """
    ratio = np.asarray(xyz, dtype=np.float64) / _WHITE_D50
    f = np.where(
        ratio > _EPSILON,
        np.cbrt(ratio),
        (_KAPPA * ratio + 16.0) / 116.0,
    )
    L = 116.0 * f[..., 1] - 16.0
    a = 500.0 * (f[..., 0] - f[..., 1])
    b = 200.0 * (f[..., 1] - f[..., 2])
    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIELAB to XYZ (D50)."""
    lab = np.asarray(lab, dtype=np.float64)
    fy = (lab[..., 0] + 16.0) / 116.0
    fx = lab[..., 1] / 500.0 + fy
    fz = fy - lab[..., 2] / 200.0
    f = np.stack([fx, fy, fz], axis=-1)
    cubed = f ** 3
    ratio = np.where(cubed > _EPSILON, cubed, (116.0 * f - 16.0) / _KAPPA)
    return ratio * _WHITE_D50


# =============================================================================
# CIELAB ↔ CIELCh
# =============================================================================


def lab_to_lch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIELAB to CIELCh (cylindrical coordinates).

    H is in degrees [0, 360).
    """
    lab = np.asarray(lab, dtype=np.float64)
    a = lab[..., 1]
    b = lab[..., 2]
    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0
    return np.stack([lab[..., 0], C, H], axis=-1)


def lch_to_lab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CIELCh (H in degrees) to CIELAB."""
    lch = np.asarray(lch, dtype=np.float64)
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])
    return np.stack([lch[..., 0], C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


# =============================================================================
# Convenience: sRGB ↔ LCh (full chain)
# =============================================================================


def srgb_to_lch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to CIELCh.

    Full chain: sRGB → Linear RGB → XYZ → Lab → LCh
    """
    return lab_to_lch(xyz_to_lab(linear_rgb_to_xyz(srgb_to_linear(srgb))))


def lch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIELCh to sRGB [0,1].

    Full chain: LCh → Lab → XYZ → Linear RGB → sRGB.
    Values are clipped to [0, 1] (gamut mapped by clipping).
    """
    return linear_to_srgb(xyz_to_linear_rgb(lab_to_xyz(lch_to_lab(lch))))


def srgb_uint8_to_lch(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """Convert uint8 sRGB pixels [0,255] of shape (..., 3) to CIELCh."""
    return srgb_to_lch(np.asarray(pixels).astype(np.float64) / 255.0)


# =============================================================================
# Hex
# =============================================================================


def is_valid_hex(value: object) -> bool:
    """True if ``value`` is a 6-digit RGB hex string (``#`` optional)."""
    return isinstance(value, str) and _HEX_RE.match(value.strip()) is not None


def normalize_hex(value: object) -> str:
    """
    Canonicalize a hex color to lowercase ``#rrggbb``.

    Raises:
        InvalidHexError: if the value is not a 6-digit RGB hex
    """
    if not isinstance(value, str):
        raise InvalidHexError(value)
    m = _HEX_RE.match(value.strip())
    if not m:
        raise InvalidHexError(value)
    return "#" + m.group(1).lower()


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Parse a hex color into (r, g, b) integers 0-255."""
    digits = normalize_hex(value)[1:]
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format (r, g, b) integers 0-255 as lowercase ``#rrggbb``."""
    return f"#{int(r):02x}{int(g):02x}{int(b):02x}"


def _srgb_to_hex(srgb: NDArray[np.float64]) -> str:
    # Round half up, matching CSS serialization
    r, g, b = np.floor(np.clip(srgb, 0.0, 1.0) * 255.0 + 0.5).astype(int)
    return rgb_to_hex(r, g, b)


def normalize_hue(h: float) -> float:
    """Wrap a hue in degrees into [0, 360)."""
    h = float(h) % 360.0
    return 0.0 if h >= 360.0 else h


def hue_distance(h1: float, h2: float) -> float:
    """Circular distance between two hues, in degrees [0, 180]."""
    diff = abs(float(h1) - float(h2)) % 360.0
    return min(diff, 360.0 - diff)


def hex_to_perceptual(value: str) -> LCHColor:
    """
    Convert a hex color to CIELCh.

    Args:
        value: Hex string like "#3b82f6" or "3B82F6"

    Returns:
        LCHColor; H is None for achromatic colors

    Raises:
        InvalidHexError: if the value is not a 6-digit RGB hex
    """
    pixels = np.array(hex_to_rgb(value), dtype=np.uint8)
    lch = srgb_uint8_to_lch(pixels)

    # White lands a hair above 100 through the matrix; clamp into range
    L = float(np.clip(lch[0], 0.0, 100.0))
    C = max(0.0, float(lch[1]))
    H = None if C < ACHROMATIC_CHROMA else normalize_hue(lch[2])
    return LCHColor(L=L, C=C, H=H)


def lch_to_hex(L: float, C: float, H: float | None) -> str:
    """
    Convert LCh values to a hex color string.

    L is clamped to [0, 100] and negative chroma to 0. An undefined hue
    renders achromatic. Out-of-gamut colors are clipped per channel, so
    hue and chroma are only approximately preserved near gamut edges.

    Returns:
        Lowercase hex string like "#3b82f6"
    """
    L = min(max(float(L), 0.0), 100.0)
    C = max(float(C), 0.0)
    if H is None:
        C, H = 0.0, 0.0
    srgb = lch_to_srgb(np.array([L, C, H], dtype=np.float64))
    return _srgb_to_hex(srgb)


def perceptual_to_hex(color: Union[LCHColor, Sequence[float]]) -> str:
    """Convert an LCHColor (or an ``(L, C, H)`` triple) to hex."""
    if isinstance(color, LCHColor):
        return lch_to_hex(color.L, color.C, color.H)
    L, C, H = color
    return lch_to_hex(L, C, H)


# =============================================================================
# WCAG Contrast
# =============================================================================

ColorLike = Union[str, LCHColor]

_LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


def _as_hex(color: ColorLike) -> str:
    if isinstance(color, LCHColor):
        return perceptual_to_hex(color)
    return normalize_hex(color)


def relative_luminance(color: ColorLike) -> float:
    """WCAG relative luminance (0 = black, 1 = white)."""
    srgb = np.array(hex_to_rgb(_as_hex(color)), dtype=np.float64) / 255.0
    return float(np.dot(srgb_to_linear(srgb), _LUMINANCE_WEIGHTS))


def contrast_ratio(color1: ColorLike, color2: ColorLike) -> float:
    """
    WCAG contrast ratio between two colors.

    (L_lighter + 0.05) / (L_darker + 0.05), ranging from 1 to 21.
    Symmetric in its arguments.
    """
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)
