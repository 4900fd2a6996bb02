# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""
Scale synthesis.

Rebuilds each source ramp around the input color and mixes the results.

Lightness uses endpoint-anchored interpolation: a shade that sat a fraction
t of the way from the matched shade to white (or black) in the reference
ramp sits the same fraction of the way from the input to white (or black)
in the output. Shades therefore stay strictly between the anchor and the
endpoint and never collide at 0.0 or 1.0.

Chroma follows the reference curve scaled by input chroma / reference
chroma at the matched shade. Hue is the input hue everywhere.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Optional

from dittotones.schema import MatchSource, OKLCHColor
from dittotones.scale.registry import RampRegistry

# Reference chroma at or below this cannot be used as a ratio denominator
_CHROMA_EPSILON = 1e-6


def remap_lightness(original: float, anchor_original: float, anchor_new: float) -> float:
    """
    Move one reference lightness relative to a moved anchor.

    Args:
        original: Reference lightness of the shade being remapped
        anchor_original: Reference lightness at the matched shade
        anchor_new: Input lightness (the new anchor)

    Example:
        Reference [0.95, 0.50, 0.05], anchor 0.50 → 0.30:
        0.95 is 0.9 of the way to white, so it becomes 0.30 + 0.9 * 0.70 = 0.93.
    """
    if original > anchor_original:
        t = (original - anchor_original) / (1.0 - anchor_original)
        return anchor_new + t * (1.0 - anchor_new)
    if original < anchor_original:
        t = (anchor_original - original) / anchor_original
        return anchor_new * (1.0 - t)
    return anchor_new


def remap_chroma(original: float, anchor_original: float, anchor_new: float) -> float:
    """Scale reference chroma by the anchor's chroma ratio."""
    if anchor_original <= _CHROMA_EPSILON:
        return original
    return original * (anchor_new / anchor_original)


def remap_ramp(
    ramp: Mapping[str, OKLCHColor],
    matched_shade: str,
    color: OKLCHColor,
) -> dict[str, tuple[float, float]]:
    """Remap one reference ramp around the input, returning shade → (L, C)."""
    anchor = ramp[matched_shade]
    result: dict[str, tuple[float, float]] = {}
    for shade, ref in ramp.items():
        if shade == matched_shade:
            result[shade] = (color.L, color.C)
            continue
        result[shade] = (
            remap_lightness(ref.L, anchor.L, color.L),
            remap_chroma(ref.C, anchor.C, color.C),
        )
    return result


def synthesize(
    registry: RampRegistry,
    sources: Sequence[MatchSource],
    matched_shade: str,
    color: OKLCHColor,
) -> dict[str, OKLCHColor]:
    """
    Build the output scale.

    Args:
        registry: Reference ramps
        sources: Matched ramps with weights summing to 1
        matched_shade: Shade that receives the input color
        color: Input color

    Returns:
        Shade key → OKLCHColor for every registry shade, in registry order.
        ``scale[matched_shade]`` carries the input's exact L, C and H.
    """
    remapped = [
        (source.weight, remap_ramp(registry.get(source.name), matched_shade, color))
        for source in sources
    ]
    hue: Optional[float] = color.H

    scale: dict[str, OKLCHColor] = {}
    for shade in registry.shades:
        if shade == matched_shade:
            scale[shade] = OKLCHColor(L=color.L, C=color.C, H=hue)
            continue
        L = sum(weight * lc[shade][0] for weight, lc in remapped)
        C = sum(weight * lc[shade][1] for weight, lc in remapped)
        # Guard against float drift past the domain edges
        scale[shade] = OKLCHColor(L=min(max(L, 0.0), 1.0), C=max(C, 0.0), H=hue)
    return scale
