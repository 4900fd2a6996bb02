# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""
Output runtime for DittoTones.

Serialization of GenerationResult data for stylesheets and tooling:

1. CSS Variables -- ``:root`` block of ``oklch()`` custom properties
2. Context Block -- XML, JSON or Markdown block

The output layer never modifies scale content.
"""

from dittotones.runtime.serializers import (
    BlockFormat,
    describe_sources,
    format_number,
    format_oklch_css,
    to_context_block,
    to_css_variables,
)

__all__ = [
    "to_css_variables",
    "to_context_block",
    "describe_sources",
    "format_oklch_css",
    "format_number",
    "BlockFormat",
]
