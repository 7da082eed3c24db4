import pytest

from shadercomp.assets.defaults import chunks_tree, materials_tree
from shadercomp.assets.tree import FileTree, MemoryTree


def test_memory_tree_files_and_dirs():
    tree = MemoryTree(
        {
            "basic/vert.glsl": "a",
            "basic/frag.glsl": "b",
            "water/vert.glsl": "c",
            "loose.glsl": "d",
        }
    )

    assert tree.is_file("basic/vert.glsl")
    assert not tree.is_file("basic")
    assert tree.read_text("water/vert.glsl") == "c"
    assert tree.subdirectories() == ["basic", "water"]


def test_memory_tree_missing_file():
    with pytest.raises(FileNotFoundError):
        MemoryTree().read_text("nope.glsl")


def test_file_tree_reads_utf8(tmp_path):
    (tmp_path / "uniforms").mkdir()
    (tmp_path / "uniforms" / "common.glsl").write_text(
        "// température\nuniform float t;", encoding="utf-8"
    )

    tree = FileTree(tmp_path)

    assert tree.is_file("uniforms/common.glsl")
    assert not tree.is_file("uniforms")
    assert tree.read_text("uniforms/common.glsl").startswith("// température")
    assert tree.subdirectories() == ["uniforms"]


def test_file_tree_missing_root(tmp_path):
    tree = FileTree(tmp_path / "absent")

    assert tree.subdirectories() == []
    with pytest.raises(FileNotFoundError):
        tree.read_text("vert.glsl")


def test_packaged_libraries_are_present():
    assert chunks_tree().is_file("attributes/common.glsl")
    assert chunks_tree().is_file("functions/lambert.glsl")
    assert materials_tree().subdirectories() == ["basic", "lambert"]
