# shadercomp/graphics/shaders/compiler.py
from __future__ import annotations

from typing import Any, Protocol

import moderngl

from shadercomp.graphics.shaders.errors import CompileError


class ProgramCompiler(Protocol):
    def compile(self, vertex_source: str, fragment_source: str) -> Any:
        """Build a program object or raise CompileError."""
        ...


class ModernGLCompiler:
    """Compiles vertex/fragment pairs into `moderngl.Program` objects."""

    def __init__(self, ctx: moderngl.Context) -> None:
        self.ctx = ctx

    def compile(self, vertex_source: str, fragment_source: str) -> moderngl.Program:
        try:
            return self.ctx.program(
                vertex_shader=vertex_source, fragment_shader=fragment_source
            )
        except moderngl.Error as e:
            raise CompileError(str(e)) from e
