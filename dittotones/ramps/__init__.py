# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""
Bundled reference ramp sets.

Tables are plain data; they are turned into OKLCHColor ramps once, at
import time.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from dittotones.schema import OKLCHColor
from dittotones.scale.colorspace import hex_to_oklch
from dittotones.ramps import radix, tailwind


def build_ramps(
    table: Mapping[str, Iterable],
    shades: tuple[str, ...],
) -> dict[str, dict[str, OKLCHColor]]:
    """
    Build ramps from a table of per-shade values.

    Values may be (L, C, H) tuples or hex strings.
    """
    ramps: dict[str, dict[str, OKLCHColor]] = {}
    for name, values in table.items():
        values = tuple(values)
        if len(values) != len(shades):
            raise ValueError(
                f"Ramp '{name}' has {len(values)} values for {len(shades)} shades"
            )
        ramp = {}
        for shade, value in zip(shades, values):
            L, C, H = hex_to_oklch(value) if isinstance(value, str) else value
            ramp[shade] = OKLCHColor(L=L, C=C, H=H)
        ramps[name] = ramp
    return ramps


TAILWIND_RAMPS = build_ramps(tailwind.TAILWIND_OKLCH, tailwind.SHADES)
RADIX_RAMPS = build_ramps(radix.RADIX_HEX, radix.SHADES)

RAMP_SETS = {
    "tailwind": (TAILWIND_RAMPS, tailwind.NEUTRALS),
    "radix": (RADIX_RAMPS, radix.NEUTRALS),
}


def get_ramps(name: str) -> dict[str, dict[str, OKLCHColor]]:
    """
    Return a fresh copy of a bundled ramp set.

    Raises:
        KeyError: If ``name`` is not a bundled set.
    """
    ramps, _ = _lookup(name)
    return {ramp_name: dict(ramp) for ramp_name, ramp in ramps.items()}


def get_neutrals(name: str) -> tuple[str, ...]:
    """Names of the neutral (gray) ramps in a bundled set."""
    _, neutrals = _lookup(name)
    return neutrals


def _lookup(name: str):
    try:
        return RAMP_SETS[name]
    except KeyError:
        raise KeyError(
            f"Unknown ramp set '{name}' (available: {', '.join(RAMP_SETS)})"
        ) from None


__all__ = [
    "TAILWIND_RAMPS",
    "RADIX_RAMPS",
    "RAMP_SETS",
    "build_ramps",
    "get_ramps",
    "get_neutrals",
]
