# shadercomp/graphics/shaders/directives.py
from __future__ import annotations

import re

from shadercomp.assets.types import ParsedChunk

# matches whole lines in the form `#require <path/to/chunk>`
REQUIRE_PATTERN = re.compile(
    r"^#require <(?P<path>[a-zA-Z0-9/\-_]+)>\r?$",
    re.MULTILINE,
)


def parse_chunk(text: str) -> ParsedChunk:
    """
    Split shader text into its requirements and body.

    Requirement lines are removed from the body; lines that merely look like
    directives but don't match the grammar are left in place.
    """
    required = tuple(m.group("path") for m in REQUIRE_PATTERN.finditer(text))
    body = REQUIRE_PATTERN.sub("", text).strip()
    return ParsedChunk(required=required, body=body)
