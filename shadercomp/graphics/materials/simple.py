# shadercomp/graphics/materials/simple.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import moderngl

from shadercomp.graphics.shaders.catalog import ProgramCatalog
from shadercomp.graphics.shaders.program_types import ProgramHandle


@dataclass(frozen=True)
class SimpleMaterial:
    """
    A catalog program plus the render state it is drawn with.

    Alpha blended, back faces culled, counter-clockwise front faces.
    """

    handle: ProgramHandle

    blend: bool = True
    cull_face: bool = True
    depth_test: bool = True

    @classmethod
    def from_catalog(
        cls, catalog: ProgramCatalog, name: str
    ) -> Optional[SimpleMaterial]:
        handle = catalog.get(name)
        if handle is None:
            return None
        return cls(handle)

    @property
    def program(self) -> moderngl.Program:
        return self.handle.program

    @property
    def flags(self) -> int:
        flags = 0
        if self.blend:
            flags |= moderngl.BLEND
        if self.cull_face:
            flags |= moderngl.CULL_FACE
        if self.depth_test:
            flags |= moderngl.DEPTH_TEST
        return flags

    def apply(self, ctx: moderngl.Context) -> None:
        """Configure `ctx` for drawing with this material."""
        ctx.enable_only(self.flags)
        ctx.blend_func = moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA
        ctx.cull_face = "back"
        ctx.front_face = "ccw"
