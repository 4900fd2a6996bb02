# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""Shared reference ramps for the test suite."""

import pytest

from dittotones.schema import OKLCHColor

SHADES = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900")


def make_ramp(values, hue):
    """Ramp over SHADES from (L, C) pairs at a fixed hue."""
    return {
        shade: OKLCHColor(L=L, C=C, H=hue)
        for shade, (L, C) in zip(SHADES, values)
    }


BLUE = make_ramp(
    [(0.95, 0.02), (0.9, 0.04), (0.8, 0.08), (0.7, 0.12), (0.6, 0.16),
     (0.5, 0.2), (0.4, 0.16), (0.3, 0.12), (0.2, 0.08), (0.1, 0.04)],
    240.0,
)
RED = make_ramp(
    [(0.95, 0.03), (0.9, 0.06), (0.8, 0.1), (0.7, 0.14), (0.6, 0.18),
     (0.5, 0.22), (0.4, 0.18), (0.3, 0.14), (0.2, 0.1), (0.1, 0.06)],
    30.0,
)
GRAY = make_ramp(
    [(0.98, 0.005), (0.96, 0.005), (0.9, 0.01), (0.8, 0.01), (0.6, 0.01),
     (0.5, 0.01), (0.4, 0.01), (0.3, 0.01), (0.2, 0.01), (0.1, 0.005)],
    0.0,
)
PURPLE = make_ramp(
    [(0.95, 0.02), (0.9, 0.05), (0.8, 0.09), (0.7, 0.13), (0.6, 0.17),
     (0.5, 0.21), (0.4, 0.17), (0.3, 0.13), (0.2, 0.09), (0.1, 0.05)],
    300.0,
)


@pytest.fixture
def test_ramps():
    return {"blue": BLUE, "red": RED, "gray": GRAY}


@pytest.fixture
def blendable_ramps():
    """Blue and purple sit 60° apart, close enough to blend between."""
    return {"blue": BLUE, "purple": PURPLE, "gray": GRAY}
