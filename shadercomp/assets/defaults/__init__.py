# shadercomp/assets/defaults/__init__.py
from enum import StrEnum

from shadercomp.assets.tree import FileTree, package_tree


class DefaultChunks(StrEnum):
    ATTRIBUTES_COMMON = "attributes/common"
    UNIFORMS_COMMON = "uniforms/common"


class DefaultMaterials(StrEnum):
    BASIC = "basic"
    LAMBERT = "lambert"


def chunks_tree() -> FileTree:
    """The chunk library shipped with the package."""
    return package_tree(__name__, "chunks")


def materials_tree() -> FileTree:
    """The material library shipped with the package."""
    return package_tree(__name__, "materials")


__all__ = [
    "DefaultChunks",
    "DefaultMaterials",
    "chunks_tree",
    "materials_tree",
]
