# shadercomp/assets/importers/shader.py
from shadercomp.assets.importers.base import AssetImporter
from shadercomp.assets.tree import ResourceTree
from shadercomp.assets.types import ShaderSource


class ShaderImporter(AssetImporter):
    def import_file(self, tree: ResourceTree, path: str) -> ShaderSource:
        return ShaderSource(source=tree.read_text(path), path=path)
