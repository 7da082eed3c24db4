# shadercomp/graphics/shaders/errors.py
from __future__ import annotations

from typing import Sequence


class ShaderCompositionError(Exception):
    """Base class for every failure raised while building programs."""


class MissingChunk(ShaderCompositionError):
    def __init__(self, chunk_id: str, candidates: Sequence[str] = ()) -> None:
        self.chunk_id = chunk_id
        self.candidates = tuple(candidates)
        super().__init__(
            f'Chunk "{chunk_id}" not found! Tried: {", ".join(self.candidates)}'
        )


class MissingStageFile(ShaderCompositionError):
    def __init__(
        self, material: str, stage: str, candidates: Sequence[str] = ()
    ) -> None:
        self.material = material
        self.stage = stage
        self.candidates = tuple(candidates)
        super().__init__(
            f'No {stage} shader file found for "{material}" material! '
            f'Tried: {", ".join(self.candidates)}'
        )


class CompileError(ShaderCompositionError):
    """Raised by a compiler backend when it rejects a program."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CompileFailed(ShaderCompositionError):
    """
    A material's assembled sources were rejected by the compiler.

    The message carries both generated sources verbatim, since nobody wrote
    that text by hand.
    """

    def __init__(
        self,
        material: str,
        message: str,
        vertex_source: str,
        fragment_source: str,
    ) -> None:
        self.material = material
        self.message = message
        self.vertex_source = vertex_source
        self.fragment_source = fragment_source
        super().__init__(
            f'Failed to compile "{material}" material: {message}\n'
            f"Source code:\n\nVertex:\n{vertex_source}\n\n\n"
            f"Fragment:\n{fragment_source}\n\n"
        )


class UnreadableShaderFile(ShaderCompositionError):
    """A chunk or stage file exists but is not valid UTF-8 text."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f'Shader file "{path}" could not be read: {reason}')
