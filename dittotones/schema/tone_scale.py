# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""
Tone scale schema.

Every value here is a frozen dataclass that validates itself on
construction, so a GenerationResult that exists is internally consistent:
its sources agree with its method and its scale contains the matched shade.
All types serialize to plain dicts/JSON for design-token pipelines.

Colors are OKLCH throughout. L runs from black (0) to white (1), C from
gray (0) up to roughly 0.37 at the sRGB edge, and H is an angle in degrees
(about 25 for red, 145 for green, 260 for blue).
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# Colors and ramps
# =============================================================================


@dataclass(frozen=True, slots=True)
class OKLCHColor:
    """
    One OKLCH color: a reference shade, a parsed input or a generated shade.

    ``H`` is None when the hue is undefined (pure grays, white, black).
    Values outside L in [0, 1], C >= 0 or H in [0, 360) are rejected.
    """
    L: float
    C: float
    H: Optional[float] = None

    def __post_init__(self) -> None:
        if not (0.0 <= self.L <= 1.0):
            raise ValueError(f"Lightness out of range [0, 1]: {self.L}")
        if not self.C >= 0.0:
            raise ValueError(f"Chroma cannot be negative: {self.C}")
        if self.H is not None and not (0.0 <= self.H < 360.0):
            raise ValueError(f"Hue out of range [0, 360): {self.H}")

    @property
    def hex(self) -> str:
        """``#RRGGBB``, clipped into sRGB."""
        from dittotones.scale.colorspace import oklch_to_hex
        return oklch_to_hex(self.L, self.C, self.H)

    def to_css(self, decimals: int = 3) -> str:
        """CSS ``oklch()`` text, e.g. ``oklch(0.623 0.214 259.815)``."""
        from dittotones.runtime.serializers.base import format_oklch_css
        return format_oklch_css(self, decimals=decimals)

    def to_dict(self, include_hex: bool = False) -> dict:
        data = {"L": self.L, "C": self.C, "H": self.H}
        if include_hex:
            data["hex"] = self.hex
        return data

    @classmethod
    def from_dict(cls, data: dict) -> OKLCHColor:
        """Inverse of ``to_dict``; an extra ``hex`` key is ignored."""
        return cls(L=data["L"], C=data["C"], H=data.get("H"))


# A ramp maps shade keys ("50", "500", "12") to reference colors.
Ramp = Mapping[str, OKLCHColor]


# =============================================================================
# Match Types
# =============================================================================


class MatchMethod(Enum):
    """
    How an input color was related to the reference ramps.

    EXACT: the input is (nearly) a reference shade, or it is achromatic and
           resolved to a neutral ramp.
    SINGLE: one ramp dominates by hue; its curve is used alone.
    BLEND: the input hue sits between two ramps; both curves are mixed.
    """
    EXACT = "exact"
    SINGLE = "single"
    BLEND = "blend"


@dataclass(frozen=True, slots=True)
class MatchSource:
    """
    One reference ramp contributing to a generated scale.

    Attributes:
        name: Ramp name in the registry
        diff: Distance between the input and the ramp's closest shade
        weight: Share of this ramp in the synthesized scale (0.0-1.0)
    """
    name: str
    diff: float
    weight: float

    def __post_init__(self) -> None:
        if self.diff < 0.0:
            raise ValueError(f"Diff must be >= 0, got {self.diff}")
        if not 0.0 <= self.weight <= 1.0:
            raise ValueError(f"Weight must be 0-1, got {self.weight}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"name": self.name, "diff": self.diff, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: dict) -> MatchSource:
        """Deserialize from dictionary."""
        return cls(name=data["name"], diff=data["diff"], weight=data["weight"])


def _validate_sources(method: MatchMethod, sources: tuple[MatchSource, ...]) -> None:
    """Single-ramp methods carry one full-weight source; blends carry two."""
    if method == MatchMethod.BLEND:
        if len(sources) != 2:
            raise ValueError(f"Blend requires exactly 2 sources, got {len(sources)}")
        if any(s.weight <= 0.0 for s in sources):
            raise ValueError("Blend source weights must be > 0")
        total = sum(s.weight for s in sources)
        if abs(total - 1.0) > 1e-5:
            raise ValueError(f"Blend weights must sum to 1.0, got {total:.6f}")
    else:
        if len(sources) != 1:
            raise ValueError(
                f"{method.value} match requires exactly 1 source, got {len(sources)}"
            )
        if sources[0].weight != 1.0:
            raise ValueError(
                f"{method.value} match source weight must be 1.0, got {sources[0].weight}"
            )


@dataclass(frozen=True, slots=True)
class MatchResult:
    """
    Matcher output: which ramp(s) and which shade the input belongs to.

    Attributes:
        method: Classification of the match
        matched_shade: Shade key the input corresponds to
        sources: Contributing ramps, dominant first
    """
    method: MatchMethod
    matched_shade: str
    sources: tuple[MatchSource, ...]

    def __post_init__(self) -> None:
        _validate_sources(self.method, self.sources)


# =============================================================================
# Generation Result
# =============================================================================


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """
    A complete generated tone scale.

    Each call to ``DittoTones.generate`` returns a fresh result; nothing in
    it aliases the reference ramps.

    Attributes:
        input_color: Parsed input color
        matched_shade: Shade key where the input color sits in the scale
        method: How the reference ramps were matched
        sources: Contributing ramps, dominant first
        scale: Shade key → synthesized color, in registry shade order

    Usage:
        result = ditto.generate("#3b82f6")
        result.scale[result.matched_shade]  # the input color itself
        result.to_css("brand")
    """
    input_color: OKLCHColor
    matched_shade: str
    method: MatchMethod
    sources: tuple[MatchSource, ...]
    scale: dict[str, OKLCHColor]

    def __post_init__(self) -> None:
        """Validate result structure."""
        _validate_sources(self.method, self.sources)
        if self.matched_shade not in self.scale:
            raise ValueError(
                f"Matched shade '{self.matched_shade}' missing from scale"
            )

    @property
    def shades(self) -> tuple[str, ...]:
        """Shade keys of the scale, in order."""
        return tuple(self.scale)

    def to_dict(self, include_hex: bool = False) -> dict:
        """Serialize to dictionary for JSON output."""
        return {
            "input_color": self.input_color.to_dict(include_hex=include_hex),
            "matched_shade": self.matched_shade,
            "method": self.method.value,
            "sources": [s.to_dict() for s in self.sources],
            "scale": {
                shade: color.to_dict(include_hex=include_hex)
                for shade, color in self.scale.items()
            },
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def to_css(self, name: str = "color", decimals: int = 3) -> str:
        """
        Serialize to a ``:root`` block of CSS custom properties.

        Example output:
            :root {
              /* brand: single from blue (100%) @ shade 500 */
              --brand-50: oklch(0.970 0.014 259.815);
              ...
            }
        """
        # Import here to avoid circular imports
        from dittotones.runtime.serializers.css import to_css_variables
        return to_css_variables(self, name=name, decimals=decimals)

    @classmethod
    def from_dict(cls, data: dict) -> GenerationResult:
        """Deserialize from dictionary."""
        return cls(
            input_color=OKLCHColor.from_dict(data["input_color"]),
            matched_shade=data["matched_shade"],
            method=MatchMethod(data["method"]),
            sources=tuple(MatchSource.from_dict(s) for s in data["sources"]),
            scale={
                shade: OKLCHColor.from_dict(color)
                for shade, color in data["scale"].items()
            },
        )

    @classmethod
    def from_json(cls, json_str: str) -> GenerationResult:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
