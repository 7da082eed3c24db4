# shadercomp/assets/__init__.py
from shadercomp.assets.defaults import (
    DefaultChunks,
    DefaultMaterials,
)
from shadercomp.assets.importers.shader import ShaderImporter
from shadercomp.assets.registry import AssetRegistry
from shadercomp.assets.tree import FileTree, MemoryTree, ResourceTree, package_tree
from shadercomp.assets.types import ParsedChunk, ShaderSource

__all__ = [
    "AssetRegistry",
    "ShaderImporter",
    "ResourceTree",
    "FileTree",
    "MemoryTree",
    "package_tree",
    "ParsedChunk",
    "ShaderSource",
    "DefaultChunks",
    "DefaultMaterials",
]
