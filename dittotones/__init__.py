# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""
DittoTones -- Tone scales that match reference palettes.

Maps any input color onto a full shade scale (50-950, 1-12, ...) shaped
like a set of reference ramps, keeping the input exact at its best-matching
shade.

Quick start::

    from dittotones import DittoTones

    ditto = DittoTones.from_preset("tailwind")
    result = ditto.generate("#3b82f6")
    result.scale["500"]      # OKLCHColor
    result.to_css("brand")   # CSS custom properties
"""

from __future__ import annotations

__version__ = "1.0.0"

from dittotones.errors import ConfigurationError, InvalidColorError
from dittotones.scale import DittoTones, MatchConfig, RampRegistry
from dittotones.scale.colorspace import parse_color
from dittotones.schema import (
    GenerationResult,
    MatchMethod,
    MatchSource,
    OKLCHColor,
    Ramp,
)

__all__ = [
    # Core API
    "DittoTones",
    "GenerationResult",
    "parse_color",
    # Configuration
    "MatchConfig",
    "RampRegistry",
    # Types (commonly needed)
    "OKLCHColor",
    "Ramp",
    "MatchMethod",
    "MatchSource",
    # Errors
    "ConfigurationError",
    "InvalidColorError",
    # Version
    "__version__",
]
