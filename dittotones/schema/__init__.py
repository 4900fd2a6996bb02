# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""
Schema definitions for tone scales.

All types in this module are immutable (frozen dataclasses).
"""

from dittotones.schema.tone_scale import (
    GenerationResult,
    MatchMethod,
    MatchResult,
    MatchSource,
    OKLCHColor,
    Ramp,
)

__all__ = [
    # Core types
    "OKLCHColor",
    "Ramp",
    # Matching
    "MatchMethod",
    "MatchSource",
    "MatchResult",
    # Top-level container
    "GenerationResult",
]
