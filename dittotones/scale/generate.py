# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""
Main generation API.

This is the primary entry point for DittoTones.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Optional, Union

from dittotones.schema import GenerationResult, OKLCHColor, Ramp
from dittotones.scale.colorspace import parse_color
from dittotones.scale.matcher import MatchConfig, match
from dittotones.scale.registry import RampRegistry
from dittotones.scale.synthesize import synthesize

logger = logging.getLogger(__name__)


class DittoTones:
    """
    Generate tone scales that follow a set of reference ramps.

    Args:
        ramps: Ramp name → ramp (shade key → OKLCHColor), or a prebuilt
            RampRegistry.
        neutral: Optional names of ramps to use for gray input. Ignored
            when ``ramps`` is already a RampRegistry.
        config: Matching thresholds (uses defaults if None)

    Raises:
        ConfigurationError: If the ramp set is empty or inconsistent.

    Example::

        from dittotones import DittoTones

        ditto = DittoTones.from_preset("tailwind")
        result = ditto.generate("#3b82f6")
        result.method                        # exact, single or blend
        result.sources[0].name               # "blue"
        result.scale[result.matched_shade]   # the input color itself
    """

    __slots__ = ("_registry", "_config")

    def __init__(
        self,
        ramps: Union[Mapping[str, Ramp], RampRegistry],
        *,
        neutral: Optional[Iterable[str]] = None,
        config: Optional[MatchConfig] = None,
    ) -> None:
        if isinstance(ramps, RampRegistry):
            self._registry = ramps
        else:
            self._registry = RampRegistry(ramps, neutral=neutral)
        self._config = config or MatchConfig()

    @classmethod
    def from_preset(cls, name: str, *, config: Optional[MatchConfig] = None) -> DittoTones:
        """Build from a bundled ramp set ("tailwind" or "radix")."""
        from dittotones.ramps import get_neutrals, get_ramps
        return cls(get_ramps(name), neutral=get_neutrals(name), config=config)

    @property
    def ramp_names(self) -> tuple[str, ...]:
        """Reference ramp names in registration order."""
        return self._registry.ramp_names

    @property
    def shades(self) -> tuple[str, ...]:
        """Shade keys in scale order."""
        return self._registry.shades

    @property
    def registry(self) -> RampRegistry:
        return self._registry

    @property
    def config(self) -> MatchConfig:
        return self._config

    def generate(self, color: Union[str, OKLCHColor]) -> GenerationResult:
        """
        Generate a full scale anchored at ``color``.

        Args:
            color: Any CSS color string (hex, rgb(), hsl(), named, oklch(),
                ...) or an OKLCHColor.

        Returns:
            GenerationResult whose scale covers every shade and reproduces
            the input exactly at ``matched_shade``.

        Raises:
            InvalidColorError: If ``color`` cannot be parsed.
        """
        input_color = parse_color(color)
        result = match(self._registry, input_color, self._config)
        scale = synthesize(
            self._registry, result.sources, result.matched_shade, input_color,
        )
        logger.debug(
            "Generated %d-shade scale for %r via %s",
            len(scale), color, result.method.value,
        )
        return GenerationResult(
            input_color=input_color,
            matched_shade=result.matched_shade,
            method=result.method,
            sources=result.sources,
            scale=scale,
        )

    def __repr__(self) -> str:
        return f"DittoTones(ramps={list(self.ramp_names)!r})"
