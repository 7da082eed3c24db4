# shadercomp/assets/importers/base.py
from abc import ABC, abstractmethod
from typing import Any

from shadercomp.assets.tree import ResourceTree


class AssetImporter(ABC):
    @abstractmethod
    def import_file(self, tree: ResourceTree, path: str) -> Any:
        """
        Read file from a resource tree and return a CPU-friendly data object.
        """
        pass
