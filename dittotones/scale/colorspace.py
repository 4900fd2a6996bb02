# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""
OKLCH math and color parsing.

Everything numeric works on NumPy arrays whose last axis is a color
triple, so one call converts a single color or a whole ramp:

    sRGB [0,1] ⇄ linear sRGB ⇄ OKLab (L, a, b) ⇄ OKLCH (L, C, H°)

OKLab reference: https://bottosson.github.io/posts/oklab/

CSS color text (hex, rgb(), hsl(), named colors, oklch(), ...) is parsed
by coloraide and handed back as an OKLCHColor.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Union

import numpy as np
from coloraide import Color
from numpy.typing import NDArray

from dittotones.errors import InvalidColorError
from dittotones.schema import OKLCHColor

# Below this chroma a hex color has no meaningful hue
_HEX_ACHROMATIC = 1e-4


# =============================================================================
# Transfer function
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Decode gamma-encoded sRGB channels in [0, 1] to linear light."""
    v = np.asarray(srgb, dtype=np.float64)
    curved = ((v + 0.055) / 1.055) ** 2.4
    return np.where(v > 0.04045, curved, v / 12.92)


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """Encode linear light to sRGB channels, clipped to [0, 1]."""
    v = np.maximum(np.asarray(linear, dtype=np.float64), 0.0)
    curved = 1.055 * v ** (1.0 / 2.4) - 0.055
    return np.clip(np.where(v > 0.0031308, curved, v * 12.92), 0.0, 1.0)


# =============================================================================
# OKLab
# =============================================================================

_LMS_FROM_LINEAR = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

_LAB_FROM_LMS = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

_LINEAR_FROM_LMS = np.linalg.inv(_LMS_FROM_LINEAR)
_LMS_FROM_LAB = np.linalg.inv(_LAB_FROM_LMS)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Linear sRGB (..., 3) to OKLab (..., 3)."""
    lms = np.asarray(rgb, dtype=np.float64) @ _LMS_FROM_LINEAR.T
    # Signed cube root so out-of-gamut values survive the trip
    return np.cbrt(lms) @ _LAB_FROM_LMS.T


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """OKLab (..., 3) to linear sRGB (..., 3). Not clipped."""
    lms = (np.asarray(lab, dtype=np.float64) @ _LMS_FROM_LAB.T) ** 3
    return lms @ _LINEAR_FROM_LMS.T


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """OKLab to OKLCH with the hue in degrees, [0, 360)."""
    lab = np.asarray(lab, dtype=np.float64)
    chroma = np.hypot(lab[..., 1], lab[..., 2])
    hue = np.degrees(np.arctan2(lab[..., 2], lab[..., 1])) % 360.0
    return np.stack([lab[..., 0], chroma, hue], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """OKLCH (hue in degrees) to OKLab."""
    lch = np.asarray(lch, dtype=np.float64)
    angle = np.radians(lch[..., 2])
    chroma = lch[..., 1]
    return np.stack(
        [lch[..., 0], chroma * np.cos(angle), chroma * np.sin(angle)], axis=-1
    )


def srgb_to_oklch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    return oklab_to_oklch(linear_rgb_to_oklab(srgb_to_linear(srgb)))


def oklch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    OKLCH to sRGB in [0, 1].

    Out-of-gamut channels are clipped. Saturated inputs can push lighter or
    darker shades outside sRGB, so hex output is approximate there while
    the OKLCH values stay exact.
    """
    return linear_to_srgb(oklab_to_linear_rgb(oklch_to_oklab(lch)))


# =============================================================================
# Hex
# =============================================================================


def oklch_to_hex(L: float, C: float, H: float | None) -> str:
    """Uppercase ``#RRGGBB`` for an OKLCH color. A None hue counts as 0°."""
    srgb = oklch_to_srgb(np.array([L, C, 0.0 if H is None else H]))
    r, g, b = np.rint(srgb * 255.0).astype(int)
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_oklch(hex_color: str) -> tuple[float, float, float | None]:
    """
    ``#RRGGBB`` (leading ``#`` optional) to an (L, C, H) tuple.

    H is None when the color is effectively gray.
    """
    digits = hex_color.lstrip("#")
    channels = np.array([int(digits[i:i + 2], 16) for i in (0, 2, 4)]) / 255.0
    L, C, H = (float(v) for v in srgb_to_oklch(channels))
    L = min(max(L, 0.0), 1.0)
    return L, C, (None if C < _HEX_ACHROMATIC else wrap_hue(H))


# =============================================================================
# Parsing
# =============================================================================


def parse_color(value: Union[str, OKLCHColor]) -> OKLCHColor:
    """
    Resolve a color to OKLCH.

    Strings may be any CSS color coloraide understands: ``#3b82f6``,
    ``rgb(59 130 246)``, ``hsl(217 91% 60%)``, ``blue``,
    ``oklch(0.62 0.19 260)``, ...

    The result is clamped to the valid domain: L to [0, 1], C >= 0 and H
    wrapped into [0, 360). An undefined hue (achromatic input) becomes None.

    Raises:
        InvalidColorError: If the value cannot be parsed.
    """
    if isinstance(value, OKLCHColor):
        return value
    if not isinstance(value, str):
        raise InvalidColorError(f"Invalid color: {value!r}")
    try:
        color = Color(value.strip())
    except ValueError as exc:
        raise InvalidColorError(f"Invalid color: {value!r}") from exc

    L, C, H = color.convert("oklch").coords()
    if math.isnan(L):
        L = 0.0
    if math.isnan(C):
        C = 0.0
    hue = None if math.isnan(H) else wrap_hue(float(H))
    return OKLCHColor(
        L=min(max(float(L), 0.0), 1.0),
        C=max(float(C), 0.0),
        H=hue,
    )


# =============================================================================
# Hue and distance
# =============================================================================


def wrap_hue(hue: float) -> float:
    """Wrap a hue into [0, 360)."""
    hue = hue % 360.0
    # -1e-15 % 360 rounds to 360.0
    return 0.0 if hue >= 360.0 else hue


def hue_distance(h1: float, h2: float) -> float:
    """Circular distance between two hues in degrees, in [0, 180]."""
    return abs((h1 - h2 + 180.0) % 360.0 - 180.0)


def delta_e_oklch_batch(
    colors1: NDArray[np.float64],
    colors2: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Vectorized ΔE for OKLCH arrays (hue in degrees).

    Shapes broadcast, so one (3,) color can be compared against (N, 3).
    """
    diff = oklch_to_oklab(colors1) - oklch_to_oklab(colors2)
    return np.linalg.norm(diff, axis=-1)


def to_lch_array(colors: Iterable[OKLCHColor]) -> NDArray[np.float64]:
    """Stack OKLCHColor values into an (N, 3) array, None hue → 0."""
    return np.array(
        [[c.L, c.C, 0.0 if c.H is None else c.H] for c in colors],
        dtype=np.float64,
    ).reshape(-1, 3)
