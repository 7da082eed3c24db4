# shadercomp/graphics/shaders/program_types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class ShaderStage(StrEnum):
    """The two compilation units of a material; values are file stems."""

    VERTEX = "vert"
    FRAGMENT = "frag"

    @property
    def label(self) -> str:
        return "vertex" if self is ShaderStage.VERTEX else "fragment"


@dataclass(frozen=True, slots=True)
class StageSources:
    """Fully assembled source text for both stages of one program."""

    vertex: str
    fragment: str


@dataclass(frozen=True)
class ProgramHandle:
    """
    Wraps a compiled program.

    Handles are shared by reference; the catalog hands out the same object
    on every lookup.
    """

    program: Any
    label: str
