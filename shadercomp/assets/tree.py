# shadercomp/assets/tree.py
from __future__ import annotations

from abc import ABC, abstractmethod
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Dict, List, Mapping


class ResourceTree(ABC):
    """
    Read-only tree of text files addressed by `/`-separated relative paths.

    The composition engine only ever asks three things of a tree, so any
    backing store (disk, package data, a dict in a test) can be plugged in.
    """

    @abstractmethod
    def is_file(self, path: str) -> bool:
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Return the UTF-8 contents of `path`. Raises FileNotFoundError."""
        pass

    @abstractmethod
    def subdirectories(self) -> List[str]:
        """Names of the immediate child directories, sorted."""
        pass


class FileTree(ResourceTree):
    """Tree backed by a directory on disk or an importlib Traversable."""

    def __init__(self, root: Path | Traversable) -> None:
        self.root = root

    def _node(self, path: str) -> Traversable:
        return self.root.joinpath(*path.split("/"))

    def is_file(self, path: str) -> bool:
        return self._node(path).is_file()

    def read_text(self, path: str) -> str:
        node = self._node(path)
        if not node.is_file():
            raise FileNotFoundError(f"{path} not found in {self.root}")
        return node.read_text(encoding="utf-8")

    def subdirectories(self) -> List[str]:
        if not self.root.is_dir():
            return []
        return sorted(child.name for child in self.root.iterdir() if child.is_dir())

    def __repr__(self) -> str:
        return f"FileTree({self.root!r})"


class MemoryTree(ResourceTree):
    """Tree backed by an in-memory mapping of path -> text."""

    def __init__(self, files: Mapping[str, str] | None = None) -> None:
        self._files: Dict[str, str] = dict(files or {})

    def is_file(self, path: str) -> bool:
        return path in self._files

    def read_text(self, path: str) -> str:
        try:
            return self._files[path]
        except KeyError:
            raise FileNotFoundError(f"{path} not found in memory tree")

    def subdirectories(self) -> List[str]:
        return sorted({p.split("/", 1)[0] for p in self._files if "/" in p})

    def __len__(self) -> int:
        return len(self._files)


def package_tree(package: str, *parts: str) -> FileTree:
    """FileTree over data shipped inside an installed package."""
    return FileTree(resources.files(package).joinpath(*parts))
