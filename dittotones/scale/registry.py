# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""
Reference ramp registry.

Validates a set of named reference ramps once and exposes them read-only.
Every ramp must carry the same shade keys as the first one; the first
ramp's key order is the scale order (lightest first in the bundled sets).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Optional

from dittotones.errors import ConfigurationError
from dittotones.schema import OKLCHColor, Ramp

logger = logging.getLogger(__name__)


class RampRegistry:
    """
    Immutable, validated collection of reference ramps.

    Args:
        ramps: Ramp name → ramp (shade key → OKLCHColor). Insertion order
            is preserved in ``ramp_names``.
        neutral: Optional names of ramps to treat as neutral (gray) scales.
            When omitted, neutrals are inferred from average chroma.

    Raises:
        ConfigurationError: If no ramps are given, a ramp is empty, ramps
            disagree on shade keys, or ``neutral`` names an unknown ramp.
    """

    __slots__ = ("_ramps", "_shades", "_neutral", "_avg_chroma", "_hues")

    def __init__(
        self,
        ramps: Mapping[str, Ramp],
        *,
        neutral: Optional[Iterable[str]] = None,
    ) -> None:
        if not ramps:
            raise ConfigurationError("At least one ramp is required")

        frozen: dict[str, Mapping[str, OKLCHColor]] = {}
        shades: tuple[str, ...] = ()
        for name, ramp in ramps.items():
            if not ramp:
                raise ConfigurationError(f"Ramp '{name}' has no shades")
            if not frozen:
                shades = tuple(ramp)
            elif set(ramp) != set(shades):
                raise ConfigurationError(
                    f"Ramp '{name}' has inconsistent keys: "
                    f"expected {sorted(shades)}, got {sorted(ramp)}"
                )
            for shade, color in ramp.items():
                if not isinstance(color, OKLCHColor):
                    raise ConfigurationError(
                        f"Ramp '{name}' shade '{shade}' is not an OKLCHColor"
                    )
            # Re-key in the shared order so every ramp iterates identically
            frozen[name] = MappingProxyType({s: ramp[s] for s in shades})

        self._ramps = MappingProxyType(frozen)
        self._shades = shades

        designated = tuple(neutral) if neutral is not None else ()
        unknown = [n for n in designated if n not in frozen]
        if unknown:
            raise ConfigurationError(f"Unknown neutral ramp(s): {', '.join(unknown)}")
        self._neutral = designated

        self._avg_chroma = {
            name: sum(c.C for c in ramp.values()) / len(ramp)
            for name, ramp in frozen.items()
        }
        self._hues = {name: _representative_hue(ramp) for name, ramp in frozen.items()}

        logger.debug(
            "Registered %d ramp(s) with %d shade(s): %s",
            len(frozen), len(shades), ", ".join(frozen),
        )

    # -- accessors -------------------------------------------------------------

    @property
    def ramp_names(self) -> tuple[str, ...]:
        """Ramp names in registration order."""
        return tuple(self._ramps)

    @property
    def shades(self) -> tuple[str, ...]:
        """Shade keys in scale order."""
        return self._shades

    @property
    def designated_neutrals(self) -> tuple[str, ...]:
        """Ramps explicitly designated neutral (empty when inferred)."""
        return self._neutral

    def get(self, name: str) -> Mapping[str, OKLCHColor]:
        """Read-only view of one ramp. Raises KeyError for unknown names."""
        try:
            return self._ramps[name]
        except KeyError:
            raise KeyError(f"No ramp named '{name}'") from None

    __getitem__ = get

    def average_chroma(self, name: str) -> float:
        """Mean chroma across the ramp's shades."""
        self.get(name)
        return self._avg_chroma[name]

    def representative_hue(self, name: str) -> Optional[float]:
        """Hue of the ramp's most chromatic shade (None if fully achromatic)."""
        self.get(name)
        return self._hues[name]

    def __contains__(self, name: object) -> bool:
        return name in self._ramps

    def __iter__(self) -> Iterator[str]:
        return iter(self._ramps)

    def __len__(self) -> int:
        return len(self._ramps)

    def __repr__(self) -> str:
        return (
            f"RampRegistry(ramps={list(self._ramps)!r}, "
            f"shades={list(self._shades)!r})"
        )


def _representative_hue(ramp: Mapping[str, OKLCHColor]) -> Optional[float]:
    """The most saturated shade carries the ramp's identity hue."""
    peak = max(ramp.values(), key=lambda c: c.C)
    if peak.C <= 0.0:
        return None
    return peak.H
