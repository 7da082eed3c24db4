# shadercomp/assets/types.py
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ShaderSource:
    """Raw shader source code."""

    source: str
    path: str  # For debugging / error reporting.


@dataclass(frozen=True)
class ParsedChunk:
    """
    Shader text split into its `#require` list and the remaining body.

    `required` keeps directive order and duplicates; de-duplication happens
    during resolution.
    """

    required: Tuple[str, ...]
    body: str
