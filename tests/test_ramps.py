# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""Tests for the bundled Tailwind and Radix ramp sets."""

import math

import pytest

from dittotones import DittoTones, MatchMethod
from dittotones.ramps import (
    RADIX_RAMPS,
    TAILWIND_RAMPS,
    build_ramps,
    get_neutrals,
    get_ramps,
)
from dittotones.scale.registry import RampRegistry

RAMP_SETS = {"tailwind": TAILWIND_RAMPS, "radix": RADIX_RAMPS}


@pytest.mark.parametrize("name", ["tailwind", "radix"])
class TestBundledSets:

    def test_registry_accepts_set(self, name):
        registry = RampRegistry(RAMP_SETS[name], neutral=get_neutrals(name))
        assert len(registry) > 0

    def test_valid_colors(self, name):
        for ramp in RAMP_SETS[name].values():
            for color in ramp.values():
                assert 0.0 <= color.L <= 1.0
                assert color.C >= 0.0
                assert math.isfinite(color.L) and math.isfinite(color.C)
                if color.C > 0.01:
                    assert color.H is not None

    def test_first_shade_lighter_than_last(self, name):
        for ramp in RAMP_SETS[name].values():
            lightness = [c.L for c in ramp.values()]
            assert lightness[0] > lightness[-1]

    def test_neutrals_have_low_chroma(self, name):
        ramps = RAMP_SETS[name]
        for neutral in get_neutrals(name):
            ramp = ramps[neutral]
            average = sum(c.C for c in ramp.values()) / len(ramp)
            assert average < 0.05

    def test_get_ramps_returns_copy(self, name):
        copy = get_ramps(name)
        copy.clear()
        assert len(get_ramps(name)) == len(RAMP_SETS[name])


class TestTailwind:

    def test_shades(self):
        assert tuple(TAILWIND_RAMPS["blue"]) == (
            "50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950",
        )

    def test_common_names(self):
        for name in ("slate", "red", "blue", "green", "yellow"):
            assert name in TAILWIND_RAMPS

    def test_reference_shade_is_exact(self):
        ditto = DittoTones.from_preset("tailwind")
        result = ditto.generate("oklch(0.623 0.214 259.815)")
        assert result.method == MatchMethod.EXACT
        assert result.sources[0].name == "blue"
        assert result.matched_shade == "500"

    def test_gray_input_resolves_to_neutral(self):
        ditto = DittoTones.from_preset("tailwind")
        result = ditto.generate("#808080")
        assert result.method == MatchMethod.EXACT
        assert result.sources[0].name in get_neutrals("tailwind")


class TestRadix:

    def test_shades(self):
        assert tuple(RADIX_RAMPS["gray"]) == tuple(str(n) for n in range(1, 13))

    def test_common_names(self):
        for name in ("gray", "blue", "red", "green", "yellow", "purple"):
            assert name in RADIX_RAMPS

    def test_hex_source_converted(self):
        # Radix blue 9 is #0090ff
        color = RADIX_RAMPS["blue"]["9"]
        assert color.hex == "#0090FF"

    def test_generate_covers_twelve_steps(self):
        result = DittoTones.from_preset("radix").generate("#e5484d")
        assert len(result.scale) == 12
        assert result.sources[0].name == "red"


class TestBuildRamps:

    def test_mixed_values(self):
        ramps = build_ramps(
            {"a": ("#ffffff", (0.5, 0.1, 200.0))},
            ("1", "2"),
        )
        assert ramps["a"]["1"].L == pytest.approx(1.0, abs=1e-4)
        assert ramps["a"]["2"].H == 200.0

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="3 shades"):
            build_ramps({"a": ((0.5, 0.1, 200.0),)}, ("1", "2", "3"))

    def test_unknown_set(self):
        with pytest.raises(KeyError):
            get_ramps("material")
