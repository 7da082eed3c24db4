# shadercomp/graphics/shaders/__init__.py
from shadercomp.graphics.shaders.assembler import assemble
from shadercomp.graphics.shaders.catalog import ProgramCatalog
from shadercomp.graphics.shaders.chunk_store import ChunkStore
from shadercomp.graphics.shaders.compiler import ModernGLCompiler, ProgramCompiler
from shadercomp.graphics.shaders.directives import parse_chunk
from shadercomp.graphics.shaders.errors import (
    CompileError,
    CompileFailed,
    MissingChunk,
    MissingStageFile,
    ShaderCompositionError,
    UnreadableShaderFile,
)
from shadercomp.graphics.shaders.material_loader import MaterialLoader
from shadercomp.graphics.shaders.program_types import (
    ProgramHandle,
    ShaderStage,
    StageSources,
)
from shadercomp.graphics.shaders.resolver import collect_requirements
from shadercomp.graphics.shaders.settings import ShaderSettings

__all__ = [
    "assemble",
    "collect_requirements",
    "parse_chunk",
    "ChunkStore",
    "MaterialLoader",
    "ProgramCatalog",
    "ProgramCompiler",
    "ModernGLCompiler",
    "ProgramHandle",
    "ShaderStage",
    "StageSources",
    "ShaderSettings",
    "ShaderCompositionError",
    "MissingChunk",
    "MissingStageFile",
    "CompileError",
    "CompileFailed",
    "UnreadableShaderFile",
]
