# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""
CSS custom property serializer.

Formats a GenerationResult as a ``:root`` block ready to paste into a
stylesheet or a Tailwind ``@theme`` section.
"""

from __future__ import annotations

from dittotones.runtime.serializers.base import format_oklch_css
from dittotones.schema import GenerationResult


def describe_sources(result: GenerationResult) -> str:
    """Human-readable source summary, e.g. ``blue (70%) + indigo (30%)``."""
    return " + ".join(
        f"{source.name} ({source.weight * 100:.0f}%)" for source in result.sources
    )


def to_css_variables(
    result: GenerationResult,
    *,
    name: str = "color",
    decimals: int = 3,
    selector: str = ":root",
    include_comment: bool = True,
) -> str:
    """Serialize a GenerationResult as CSS custom properties.

    Args:
        result: The generated scale.
        name: Variable prefix (``--{name}-{shade}``).
        decimals: Rounding for L, C and H.
        selector: Rule selector wrapping the variables.
        include_comment: Prepend a comment naming method, sources and shade.

    Returns:
        CSS text.

    Example::

        :root {
          /* brand: single from blue (100%) @ shade 500 */
          --brand-50: oklch(0.970 0.013 259.800);
          --brand-100: oklch(0.932 0.028 259.800);
          ...
        }
    """
    lines = []
    if include_comment:
        lines.append(
            f"  /* {name}: {result.method.value} from {describe_sources(result)} "
            f"@ shade {result.matched_shade} */"
        )
    for shade, color in result.scale.items():
        lines.append(f"  --{name}-{shade}: {format_oklch_css(color, decimals)};")
    body = "\n".join(lines)
    return f"{selector} {{\n{body}\n}}"
