# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""
Ramp matching.

Decides which reference ramp(s) an input color belongs to and at which
shade it sits:

1. Near-gray input resolves to a neutral ramp (method ``exact``).
2. Each chromatic ramp contributes its closest shade by lightness/chroma.
3. Ramps are ranked by hue distance to the input. A hue match, or an
   input sitting on a shade of the nearest ramp, picks that one ramp; an
   input between two nearby ramps blends them, weighted linearly in hue
   angle; otherwise the nearest ramp is used alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from dittotones.schema import MatchMethod, MatchResult, MatchSource, OKLCHColor
from dittotones.scale.colorspace import delta_e_oklch_batch, hue_distance, to_lch_array
from dittotones.scale.registry import RampRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchConfig:
    """Configuration for ramp matching."""

    # Input chroma below this is treated as gray and matched to neutrals
    neutral_chroma_threshold: float = 0.02

    # Ramps with average chroma below this count as neutral when the
    # registry does not designate neutrals explicitly
    neutral_ramp_max_chroma: float = 0.05

    # Per-shade distance: sqrt(wL * ΔL² + wC * ΔC²)
    lightness_weight: float = 1.0
    chroma_weight: float = 1.0

    # Hue within this many degrees of the nearest ramp locks onto that ramp
    exact_hue_tolerance: float = 2.0

    # Shade distance at or below this locks onto the nearest ramp as "exact"
    exact_diff_tolerance: float = 0.02

    # Both of the two nearest ramps within this many degrees → blend
    blend_hue_window: float = 45.0


@dataclass(frozen=True)
class _Candidate:
    name: str
    shade_index: int
    diff: float
    hue_distance: float


def neutral_ramps(registry: RampRegistry, config: Optional[MatchConfig] = None) -> tuple[str, ...]:
    """
    Ramps used for near-gray input.

    Explicit designation wins; otherwise every ramp under the neutral
    chroma ceiling; otherwise the single least chromatic ramp.
    """
    cfg = config or MatchConfig()
    if registry.designated_neutrals:
        return registry.designated_neutrals
    inferred = tuple(
        name for name in registry.ramp_names
        if registry.average_chroma(name) < cfg.neutral_ramp_max_chroma
    )
    if inferred:
        return inferred
    return (min(registry.ramp_names, key=registry.average_chroma),)


def chromatic_ramps(registry: RampRegistry, config: Optional[MatchConfig] = None) -> tuple[str, ...]:
    """Ramps eligible for hue matching: all non-neutral ramps, or all ramps if none remain."""
    cfg = config or MatchConfig()
    if registry.designated_neutrals:
        excluded = set(registry.designated_neutrals)
    else:
        excluded = {
            name for name in registry.ramp_names
            if registry.average_chroma(name) < cfg.neutral_ramp_max_chroma
        }
    names = tuple(n for n in registry.ramp_names if n not in excluded)
    return names or registry.ramp_names


def shade_distances(
    registry: RampRegistry,
    name: str,
    color: OKLCHColor,
    config: Optional[MatchConfig] = None,
) -> np.ndarray:
    """Weighted lightness/chroma distance from ``color`` to every shade of a ramp."""
    cfg = config or MatchConfig()
    lch = to_lch_array(registry.get(name).values())
    return _lc_distance(lch[:, 0], lch[:, 1], color, cfg)


def _lc_distance(L: np.ndarray, C: np.ndarray, color: OKLCHColor, cfg: MatchConfig) -> np.ndarray:
    return np.sqrt(
        cfg.lightness_weight * (L - color.L) ** 2
        + cfg.chroma_weight * (C - color.C) ** 2
    )


def match(
    registry: RampRegistry,
    color: OKLCHColor,
    config: Optional[MatchConfig] = None,
) -> MatchResult:
    """
    Match a color against the registry.

    Args:
        registry: Validated reference ramps
        color: Input color, already clamped to the OKLCH domain
        config: Matching thresholds (uses defaults if None)

    Returns:
        MatchResult with method, matched shade and weighted sources.
    """
    cfg = config or MatchConfig()

    if color.H is None or color.C < cfg.neutral_chroma_threshold:
        return _match_neutral(registry, color, cfg)

    shades = registry.shades
    candidates = []
    for name in chromatic_ramps(registry, cfg):
        distances = shade_distances(registry, name, color, cfg)
        index = int(np.argmin(distances))
        ramp_hue = _ramp_hue(registry, name, shades[index], cfg)
        candidates.append(_Candidate(
            name=name,
            shade_index=index,
            diff=float(distances[index]),
            hue_distance=180.0 if ramp_hue is None else hue_distance(color.H, ramp_hue),
        ))

    # Stable sort keeps registry order on ties
    candidates.sort(key=lambda c: c.hue_distance)
    nearest = candidates[0]

    # Sitting on a reference shade locks onto that ramp even off-hue
    on_shade = nearest.diff <= cfg.exact_diff_tolerance
    if on_shade or nearest.hue_distance <= cfg.exact_hue_tolerance:
        method = MatchMethod.EXACT if on_shade else MatchMethod.SINGLE
        return _single(method, nearest, shades)

    if len(candidates) > 1 and candidates[1].hue_distance <= cfg.blend_hue_window:
        return _blend(registry, color, nearest, candidates[1], cfg)

    return _single(MatchMethod.SINGLE, nearest, shades)


def _ramp_hue(registry: RampRegistry, name: str, shade: str, cfg: MatchConfig) -> Optional[float]:
    """Hue of the closest shade, or the ramp's peak hue when that shade is grayish."""
    ref = registry.get(name)[shade]
    if ref.H is not None and ref.C >= cfg.neutral_chroma_threshold:
        return ref.H
    return registry.representative_hue(name)


def _single(method: MatchMethod, candidate: _Candidate, shades: tuple[str, ...]) -> MatchResult:
    logger.debug(
        "%s match: %s @ %s (diff=%.4f, Δh=%.1f)",
        method.value, candidate.name, shades[candidate.shade_index],
        candidate.diff, candidate.hue_distance,
    )
    return MatchResult(
        method=method,
        matched_shade=shades[candidate.shade_index],
        sources=(MatchSource(name=candidate.name, diff=candidate.diff, weight=1.0),),
    )


def _blend(
    registry: RampRegistry,
    color: OKLCHColor,
    first: _Candidate,
    second: _Candidate,
    cfg: MatchConfig,
) -> MatchResult:
    """Blend the two nearest ramps, weighted by hue proximity."""
    d1, d2 = first.hue_distance, second.hue_distance
    w2 = d1 / (d1 + d2)
    w1 = 1.0 - w2

    # Both ramps share shade order, so fit the input against the blended pair
    a = to_lch_array(registry.get(first.name).values())
    b = to_lch_array(registry.get(second.name).values())
    L = w1 * a[:, 0] + w2 * b[:, 0]
    C = w1 * a[:, 1] + w2 * b[:, 1]
    index = int(np.argmin(_lc_distance(L, C, color, cfg)))
    matched = registry.shades[index]

    logger.debug(
        "blend match: %s (%.2f) + %s (%.2f) @ %s",
        first.name, w1, second.name, w2, matched,
    )
    return MatchResult(
        method=MatchMethod.BLEND,
        matched_shade=matched,
        sources=(
            MatchSource(name=first.name, diff=first.diff, weight=w1),
            MatchSource(name=second.name, diff=second.diff, weight=w2),
        ),
    )


def _match_neutral(registry: RampRegistry, color: OKLCHColor, cfg: MatchConfig) -> MatchResult:
    """Pick the neutral ramp holding the perceptually closest shade."""
    target = np.array(
        [color.L, color.C, color.H if color.H is not None else 0.0],
        dtype=np.float64,
    )
    best_name = ""
    best_index = 0
    best_de = float("inf")
    for name in neutral_ramps(registry, cfg):
        de = delta_e_oklch_batch(to_lch_array(registry.get(name).values()), target)
        index = int(np.argmin(de))
        if float(de[index]) < best_de:
            best_name, best_index, best_de = name, index, float(de[index])

    matched = registry.shades[best_index]
    logger.debug("neutral match: %s @ %s (ΔE=%.4f)", best_name, matched, best_de)
    return MatchResult(
        method=MatchMethod.EXACT,
        matched_shade=matched,
        sources=(MatchSource(name=best_name, diff=best_de, weight=1.0),),
    )
