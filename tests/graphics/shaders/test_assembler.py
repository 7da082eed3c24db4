from shadercomp.assets.tree import MemoryTree
from shadercomp.graphics.shaders.assembler import assemble, group_by_category
from shadercomp.graphics.shaders.chunk_store import ChunkStore


def test_group_by_category_order():
    ids = ["x", "attributes/a", "uniforms/u", "y", "structs/s"]

    assert group_by_category(ids, ("attributes", "uniforms", "structs")) == [
        ["attributes/a"],
        ["uniforms/u"],
        ["structs/s"],
        ["x", "y"],
    ]


def test_group_prefix_needs_slash():
    groups = group_by_category(["uniformsX", "uniforms/a"], ("uniforms",))

    assert groups == [["uniforms/a"], ["uniformsX"]]


def test_assemble_renders_groups_in_fixed_order():
    store = ChunkStore(
        MemoryTree(
            {
                "x.glsl": "X",
                "attributes/a.glsl": "A",
                "uniforms/u.glsl": "U",
                "y.glsl": "Y",
                "structs/s.glsl": "S",
                "uniforms/v.glsl": "V",
            }
        )
    )
    ids = ["x", "uniforms/v", "attributes/a", "uniforms/u", "y", "structs/s"]

    source = assemble(store, ids, "void main() {}", "330")

    assert source == (
        "#version 330\n\n"
        "A\n\n"
        "V\n\n"
        "U\n\n"
        "S\n\n"
        "X\n\n"
        "Y\n\n"
        "void main() {}"
    )


def test_assemble_without_chunks():
    store = ChunkStore(MemoryTree())

    assert assemble(store, [], "body", "450") == "#version 450\n\nbody"


def test_stage_body_is_not_reparsed():
    store = ChunkStore(MemoryTree())

    source = assemble(store, [], "#require <never/resolved>\nbody", "330")

    assert source.endswith("#require <never/resolved>\nbody")
