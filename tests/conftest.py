from dataclasses import dataclass, field
from typing import List, Tuple

import pytest

from shadercomp.assets.tree import MemoryTree
from shadercomp.graphics.shaders.chunk_store import ChunkStore
from shadercomp.graphics.shaders.errors import CompileError
from shadercomp.graphics.shaders.settings import ShaderSettings


@dataclass(frozen=True)
class FakeProgram:
    vertex_source: str
    fragment_source: str


@dataclass
class RecordingCompiler:
    """Stands in for a GL context; fails when the source contains `fail_on`."""

    fail_on: str | None = None
    calls: List[Tuple[str, str]] = field(default_factory=list)

    def compile(self, vertex_source: str, fragment_source: str) -> FakeProgram:
        self.calls.append((vertex_source, fragment_source))
        if self.fail_on and (
            self.fail_on in vertex_source or self.fail_on in fragment_source
        ):
            raise CompileError(f"0:1: syntax error near '{self.fail_on}'")
        return FakeProgram(vertex_source, fragment_source)


CHUNKS = {
    "attributes/common.glsl": "in vec3 in_position;",
    "uniforms/common.glsl": "uniform mat4 u;",
    "uniforms/lights.glsl": "uniform vec3 u_sun;",
    "structs/surface.glsl": "struct Surface { vec3 n; };",
    "functions/lambert.glsl": (
        "#require <uniforms/lights>\n#require <structs/surface>\n\n"
        "vec3 lambert(Surface s) { return u_sun; }"
    ),
}

MATERIALS = {
    "basic/vert.glsl": "void main() { gl_Position = vec4(in_position, 1.0); }",
    "basic/frag.glsl": "out vec4 c;\nvoid main() { c = vec4(1.0); }",
    "lit/vert.glsl": "void main() {}",
    "lit/frag.glsl": "#require <lambert>\n\nvoid main() {}",
}


@pytest.fixture
def settings():
    return ShaderSettings(glsl_version="330")


@pytest.fixture
def chunk_tree():
    return MemoryTree(CHUNKS)


@pytest.fixture
def material_tree():
    return MemoryTree(MATERIALS)


@pytest.fixture
def store(chunk_tree, settings):
    """Returns a fresh ChunkStore over the shared chunk library."""
    return ChunkStore(chunk_tree, settings)


@pytest.fixture
def compiler():
    return RecordingCompiler()


@pytest.fixture
def failing_compiler():
    """Rejects any program whose source mentions BROKEN."""
    return RecordingCompiler(fail_on="BROKEN")
