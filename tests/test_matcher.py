# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""Tests for ramp matching (neutral path, hue lock, blends)."""

import pytest

from dittotones.ramps import TAILWIND_RAMPS
from dittotones.schema import MatchMethod, OKLCHColor
from dittotones.scale.matcher import (
    MatchConfig,
    chromatic_ramps,
    match,
    neutral_ramps,
    shade_distances,
)
from dittotones.scale.registry import RampRegistry


@pytest.fixture
def registry(test_ramps):
    return RampRegistry(test_ramps)


@pytest.fixture
def blend_registry(blendable_ramps):
    return RampRegistry(blendable_ramps)


class TestNeutralSelection:

    def test_inferred_from_average_chroma(self, registry):
        assert neutral_ramps(registry) == ("gray",)
        assert chromatic_ramps(registry) == ("blue", "red")

    def test_explicit_designation_wins(self, test_ramps):
        registry = RampRegistry(test_ramps, neutral=["red"])
        assert neutral_ramps(registry) == ("red",)
        assert chromatic_ramps(registry) == ("blue", "gray")

    def test_fallback_to_least_chromatic(self, test_ramps):
        registry = RampRegistry({"blue": test_ramps["blue"], "red": test_ramps["red"]})
        assert neutral_ramps(registry) == ("blue",)
        # Fallback neutral still takes part in hue matching
        assert chromatic_ramps(registry) == ("blue", "red")

    def test_tailwind_neutrals(self):
        registry = RampRegistry(TAILWIND_RAMPS)
        assert neutral_ramps(registry) == ("slate", "gray", "zinc", "neutral", "stone")


class TestNeutralMatch:

    def test_zero_chroma_is_exact_gray(self, registry):
        result = match(registry, OKLCHColor(L=0.5, C=0.0))
        assert result.method == MatchMethod.EXACT
        assert [s.name for s in result.sources] == ["gray"]
        assert result.sources[0].weight == 1.0
        assert result.matched_shade == "500"

    def test_low_chroma_tinted_is_exact_gray(self, registry):
        result = match(registry, OKLCHColor(L=0.5, C=0.01, H=30.0))
        assert result.method == MatchMethod.EXACT
        assert result.sources[0].name == "gray"

    def test_hue_less_input_takes_neutral_path(self, registry):
        result = match(registry, OKLCHColor(L=0.3, C=0.1, H=None))
        assert result.sources[0].name == "gray"
        assert result.matched_shade == "700"

    def test_black_and_white(self, registry):
        assert match(registry, OKLCHColor(L=0.0, C=0.0)).matched_shade == "900"
        assert match(registry, OKLCHColor(L=1.0, C=0.0)).matched_shade == "50"

    def test_threshold_is_configurable(self, registry):
        config = MatchConfig(neutral_chroma_threshold=0.001)
        result = match(registry, OKLCHColor(L=0.5, C=0.01, H=30.0), config)
        assert result.sources[0].name == "red"


class TestChromaticMatch:

    def test_reference_shade_is_exact(self, registry):
        result = match(registry, OKLCHColor(L=0.5, C=0.2, H=240.0))
        assert result.method == MatchMethod.EXACT
        assert result.matched_shade == "500"
        assert result.sources[0].name == "blue"
        assert result.sources[0].diff == pytest.approx(0.0, abs=1e-12)

    def test_hue_locked_off_shade_is_single(self, registry):
        result = match(registry, OKLCHColor(L=0.47, C=0.19, H=240.0))
        assert result.method == MatchMethod.SINGLE
        assert result.matched_shade == "500"
        assert result.sources[0].diff == pytest.approx(0.0316, abs=1e-3)

    def test_on_shade_off_hue_is_exact(self, blend_registry):
        # Blue 500's L/C, 22° from blue and 38° from purple
        result = match(blend_registry, OKLCHColor(L=0.5, C=0.2, H=262.0))
        assert result.method == MatchMethod.EXACT
        assert result.matched_shade == "500"
        assert len(result.sources) == 1
        assert result.sources[0].name == "blue"
        assert result.sources[0].weight == 1.0
        assert result.sources[0].diff == pytest.approx(0.0, abs=1e-12)

    def test_on_shade_lock_is_configurable(self, blend_registry):
        config = MatchConfig(exact_diff_tolerance=0.0)
        result = match(blend_registry, OKLCHColor(L=0.5, C=0.19, H=262.0), config)
        assert result.method == MatchMethod.BLEND

    def test_dominant_ramp_is_single(self, registry):
        result = match(registry, OKLCHColor(L=0.55, C=0.14, H=250.0))
        assert result.method == MatchMethod.SINGLE
        assert len(result.sources) == 1
        assert result.sources[0].name == "blue"
        assert result.sources[0].weight == 1.0

    def test_dark_input_matches_dark_shade(self, registry):
        result = match(registry, OKLCHColor(L=0.3, C=0.12, H=240.0))
        assert result.matched_shade == "700"

    def test_light_input_matches_light_shade(self, registry):
        result = match(registry, OKLCHColor(L=0.9, C=0.04, H=240.0))
        assert result.matched_shade == "100"

    def test_lightness_rank_is_monotonic(self, registry):
        shades = registry.shades
        previous = -1
        for step in range(19):
            L = 0.95 - step * 0.05
            result = match(registry, OKLCHColor(L=L, C=0.1, H=240.0))
            index = shades.index(result.matched_shade)
            assert index >= previous
            previous = index
        assert previous == len(shades) - 1

    def test_shade_distances(self, registry):
        distances = shade_distances(registry, "blue", OKLCHColor(L=0.5, C=0.2, H=240.0))
        assert distances.shape == (10,)
        assert distances[5] == pytest.approx(0.0)
        assert distances[0] == pytest.approx((0.45**2 + 0.18**2) ** 0.5)


class TestBlend:

    def test_midpoint_is_even_blend(self, blend_registry):
        result = match(blend_registry, OKLCHColor(L=0.55, C=0.14, H=270.0))
        assert result.method == MatchMethod.BLEND
        assert [s.name for s in result.sources] == ["blue", "purple"]
        assert result.sources[0].weight == pytest.approx(0.5)
        assert result.sources[1].weight == pytest.approx(0.5)
        assert result.matched_shade == "400"

    def test_weights_follow_hue_proximity(self, blend_registry):
        result = match(blend_registry, OKLCHColor(L=0.55, C=0.14, H=260.0))
        assert result.method == MatchMethod.BLEND
        blue, purple = result.sources
        assert blue.name == "blue"
        assert purple.weight == pytest.approx(20.0 / 60.0)
        assert blue.weight + purple.weight == pytest.approx(1.0, abs=1e-5)
        assert blue.weight > purple.weight > 0.0

    def test_nearer_ramp_listed_first(self, blend_registry):
        result = match(blend_registry, OKLCHColor(L=0.55, C=0.14, H=285.0))
        assert result.sources[0].name == "purple"
        assert result.sources[1].weight == pytest.approx(15.0 / 60.0)

    def test_blend_diffs_are_per_ramp(self, blend_registry):
        result = match(blend_registry, OKLCHColor(L=0.55, C=0.14, H=270.0))
        blue, purple = result.sources
        # Both ramps sit closest at shade 400
        assert blue.diff == pytest.approx((0.05**2 + 0.02**2) ** 0.5)
        assert purple.diff == pytest.approx((0.05**2 + 0.03**2) ** 0.5)

    def test_blend_shade_tracks_lightness(self, blend_registry):
        result = match(blend_registry, OKLCHColor(L=0.21, C=0.05, H=270.0))
        assert result.method == MatchMethod.BLEND
        assert result.matched_shade == "800"

    def test_outside_window_is_single(self, blend_registry):
        result = match(blend_registry, OKLCHColor(L=0.55, C=0.14, H=200.0))
        assert result.method == MatchMethod.SINGLE
        assert result.sources[0].name == "blue"

    def test_window_is_configurable(self, registry):
        config = MatchConfig(blend_hue_window=120.0)
        result = match(registry, OKLCHColor(L=0.55, C=0.14, H=315.0), config)
        assert result.method == MatchMethod.BLEND
        assert sum(s.weight for s in result.sources) == pytest.approx(1.0, abs=1e-5)
