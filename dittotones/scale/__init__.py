# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""
Scale generation core for DittoTones.

Registry → matcher → synthesizer. All operations are pure: the registry is
read-only after construction and each generation returns a fresh result.
"""

from dittotones.scale.generate import DittoTones
from dittotones.scale.matcher import MatchConfig, match
from dittotones.scale.registry import RampRegistry
from dittotones.scale.synthesize import synthesize

__all__ = ["DittoTones", "MatchConfig", "RampRegistry", "match", "synthesize"]
