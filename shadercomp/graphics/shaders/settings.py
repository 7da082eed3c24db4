# shadercomp/graphics/shaders/settings.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from shadercomp.assets.defaults import DefaultChunks


@dataclass(frozen=True, slots=True)
class ShaderSettings:
    """Composition policy shared by every stage of every material."""

    glsl_version: str = "330"
    extension: str = "glsl"

    vertex_defaults: Tuple[str, ...] = (
        DefaultChunks.ATTRIBUTES_COMMON,
        DefaultChunks.UNIFORMS_COMMON,
    )
    fragment_defaults: Tuple[str, ...] = (DefaultChunks.UNIFORMS_COMMON,)

    # Groups rendered first, in this order; anything else follows.
    category_order: Tuple[str, ...] = ("attributes", "uniforms", "structs")
    functions_prefix: str = "functions"

    @property
    def file_version(self) -> str:
        """Version tag as it appears in file names (no spaces)."""
        return self.glsl_version.replace(" ", "")

    def versioned_names(self, stem: str) -> Tuple[str, str]:
        """`<stem>.<version>.<ext>` then `<stem>.<ext>`."""
        return (
            f"{stem}.{self.file_version}.{self.extension}",
            f"{stem}.{self.extension}",
        )
