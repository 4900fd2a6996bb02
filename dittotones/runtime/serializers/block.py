# Copyright (c) 2026 DittoTones
# SPDX-License-Identifier: MIT

"""
Context block serializer.

Wraps a GenerationResult in a tagged block (XML, JSON or Markdown) for
design-token tooling, documentation or prompt context.
"""

from __future__ import annotations

import json
import re
from enum import Enum
from xml.sax.saxutils import quoteattr

from dittotones.schema import GenerationResult, OKLCHColor

# XML element name
_XML_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_.-]*")


class BlockFormat(Enum):
    """Block format options."""

    XML = "xml"
    JSON = "json"
    MARKDOWN = "markdown"


def to_context_block(
    result: GenerationResult,
    *,
    format: BlockFormat = BlockFormat.XML,
    include_hex: bool = True,
    tag_name: str = "tone_scale",
) -> str:
    """Serialize a GenerationResult as a context block.

    Args:
        result: The generated scale.
        format: XML, JSON (``{tag_name: {...}}``) or Markdown (fenced JSON
            between ``<!-- tag_name -->`` markers).
        include_hex: Add sRGB hex values next to OKLCH.
        tag_name: Wrapper tag / key.

    Raises:
        ValueError: If an XML block is requested with a ``tag_name`` that is
            not a valid element name.

    Example (XML)::

        <tone_scale method="single" matched_shade="500">
          <input L="0.623" C="0.188" H="259.8" hex="#3B82F6"/>
          <sources>
            <source name="blue" weight="1.000" diff="0.026"/>
          </sources>
          <scale>
            <shade key="50" L="0.970" C="0.012" H="259.8" hex="#EFF6FF"/>
            ...
          </scale>
        </tone_scale>
    """
    if format == BlockFormat.XML:
        if not _XML_NAME.fullmatch(tag_name):
            raise ValueError(f"Invalid XML tag name: {tag_name!r}")
        return _xml_block(result, include_hex, tag_name)

    data = result.to_dict(include_hex=include_hex)
    if format == BlockFormat.JSON:
        return json.dumps({tag_name: data}, indent=2)
    payload = json.dumps(data, indent=2)
    return f"<!-- {tag_name} -->\n```json\n{payload}\n```\n<!-- /{tag_name} -->"


def _xml_attrs(color: OKLCHColor, include_hex: bool) -> str:
    attrs = f'L="{color.L:.3f}" C="{color.C:.3f}"'
    if color.H is not None:
        attrs += f' H="{color.H:.1f}"'
    if include_hex:
        attrs += f' hex="{color.hex}"'
    return attrs


def _xml_block(result: GenerationResult, include_hex: bool, tag_name: str) -> str:
    sources = [
        f'    <source name={quoteattr(s.name)} weight="{s.weight:.3f}" diff="{s.diff:.3f}"/>'
        for s in result.sources
    ]
    shades = [
        f'    <shade key={quoteattr(shade)} {_xml_attrs(color, include_hex)}/>'
        for shade, color in result.scale.items()
    ]
    return "\n".join([
        f'<{tag_name} method="{result.method.value}" matched_shade={quoteattr(result.matched_shade)}>',
        f"  <input {_xml_attrs(result.input_color, include_hex)}/>",
        "  <sources>", *sources, "  </sources>",
        "  <scale>", *shades, "  </scale>",
        f"</{tag_name}>",
    ])
