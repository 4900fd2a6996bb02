# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""Base formatting helpers for serializers."""

from __future__ import annotations

from dittotones.schema import OKLCHColor


def format_number(value: float, decimals: int = 3) -> str:
    """Fixed-point text with ``decimals`` places (``-0.000`` normalized to ``0.000``)."""
    text = f"{round(value, decimals):.{decimals}f}"
    if text.startswith("-") and float(text) == 0.0:
        text = text[1:]
    return text


def format_oklch_css(color: OKLCHColor, decimals: int = 3) -> str:
    """
    CSS ``oklch()`` text for a color.

    Achromatic colors without a hue use the CSS ``none`` keyword.

    Example:
        >>> format_oklch_css(OKLCHColor(L=0.6234, C=0.1881, H=259.8))
        'oklch(0.623 0.188 259.800)'
    """
    hue = "none" if color.H is None else format_number(color.H, decimals)
    return (
        f"oklch({format_number(color.L, decimals)} "
        f"{format_number(color.C, decimals)} {hue})"
    )
