# shadercomp/graphics/shaders/material_loader.py
from __future__ import annotations

import logging
from typing import Sequence

from shadercomp.assets.tree import ResourceTree
from shadercomp.graphics.shaders.assembler import assemble
from shadercomp.graphics.shaders.chunk_store import (
    ChunkStore,
    first_existing,
    read_source,
)
from shadercomp.graphics.shaders.compiler import ProgramCompiler
from shadercomp.graphics.shaders.directives import parse_chunk
from shadercomp.graphics.shaders.errors import (
    CompileError,
    CompileFailed,
    MissingStageFile,
)
from shadercomp.graphics.shaders.program_types import (
    ProgramHandle,
    ShaderStage,
    StageSources,
)
from shadercomp.graphics.shaders.resolver import collect_requirements
from shadercomp.graphics.shaders.settings import ShaderSettings

logger = logging.getLogger(__name__)


class MaterialLoader:
    """
    Turns `<material>/vert.*` and `<material>/frag.*` into a compiled program.

    Chunks are shared through the store, so each one is read and parsed at
    most once no matter how many materials require it.
    """

    def __init__(
        self,
        materials: ResourceTree,
        chunks: ChunkStore,
        compiler: ProgramCompiler,
        settings: ShaderSettings | None = None,
    ) -> None:
        self.materials = materials
        self.chunks = chunks
        self.compiler = compiler
        if settings is not None and settings != chunks.settings:
            raise ValueError(
                "MaterialLoader settings must match the chunk store settings"
            )
        self.settings = chunks.settings

    def defaults_for(self, stage: ShaderStage) -> Sequence[str]:
        if stage is ShaderStage.VERTEX:
            return self.settings.vertex_defaults
        return self.settings.fragment_defaults

    def stage_source(self, material: str, stage: ShaderStage) -> str:
        """Locate, resolve and assemble one stage of `material`."""
        candidates = self.settings.versioned_names(f"{material}/{stage.value}")
        path = first_existing(self.materials, candidates)
        if path is None:
            raise MissingStageFile(material, stage.label, candidates)
        logger.debug("Using %s for %s stage of %s", path, stage.label, material)

        stage_file = parse_chunk(read_source(self.materials, path))
        required = collect_requirements(
            self.chunks, self.defaults_for(stage), stage_file
        )
        return assemble(
            self.chunks,
            required,
            stage_file.body,
            self.settings.glsl_version,
            self.settings.category_order,
        )

    def load_sources(self, material: str) -> StageSources:
        vertex = self.stage_source(material, ShaderStage.VERTEX)
        fragment = self.stage_source(material, ShaderStage.FRAGMENT)
        return StageSources(vertex=vertex, fragment=fragment)

    def load(self, material: str) -> ProgramHandle:
        """Assemble both stages and compile them into a program."""
        sources = self.load_sources(material)
        try:
            program = self.compiler.compile(sources.vertex, sources.fragment)
        except CompileError as e:
            logger.error("Compilation of %s failed: %s", material, e.message)
            raise CompileFailed(
                material, e.message, sources.vertex, sources.fragment
            ) from e

        logger.info("Compiled %s", material)
        return ProgramHandle(program=program, label=material)
