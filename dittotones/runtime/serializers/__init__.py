# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""
Serializers for GenerationResult delivery.

Each serializer formats a GenerationResult for a specific consumer.
All serializers preserve the scale exactly -- no modification or inference.
"""

from dittotones.runtime.serializers.base import format_number, format_oklch_css
from dittotones.runtime.serializers.block import BlockFormat, to_context_block
from dittotones.runtime.serializers.css import describe_sources, to_css_variables

__all__ = [
    "BlockFormat",
    "describe_sources",
    "format_number",
    "format_oklch_css",
    "to_context_block",
    "to_css_variables",
]
