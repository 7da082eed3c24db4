# shadercomp/graphics/shaders/chunk_store.py
from __future__ import annotations

import logging
from typing import Optional, Tuple

from shadercomp.assets.importers.shader import ShaderImporter
from shadercomp.assets.registry import AssetRegistry
from shadercomp.assets.tree import ResourceTree
from shadercomp.assets.types import ParsedChunk
from shadercomp.graphics.shaders.directives import parse_chunk
from shadercomp.graphics.shaders.errors import MissingChunk, UnreadableShaderFile
from shadercomp.graphics.shaders.settings import ShaderSettings
from shadercomp.graphics.util.ids import ChunkId

logger = logging.getLogger(__name__)


def first_existing(tree: ResourceTree, candidates: Tuple[str, ...]) -> Optional[str]:
    """Return the first candidate path that is a file in `tree`."""
    for path in candidates:
        if tree.is_file(path):
            return path
    return None


def read_source(tree: ResourceTree, path: str) -> str:
    """Read shader text from `tree`, rejecting files that are not UTF-8."""
    try:
        return ShaderImporter().import_file(tree, path).source
    except UnicodeDecodeError as e:
        raise UnreadableShaderFile(path, str(e)) from e


class ChunkStore:
    """
    Lazily parses chunk files and keeps them for the life of the store.

    A chunk is looked up under four names, first hit wins:
    `<id>.<version>.<ext>`, `<id>.<ext>`, and the same two under
    `functions/`.
    """

    def __init__(
        self, tree: ResourceTree, settings: ShaderSettings | None = None
    ) -> None:
        self.tree = tree
        self.settings = settings or ShaderSettings()
        self._chunks: AssetRegistry[ChunkId, ParsedChunk] = AssetRegistry()

    @property
    def version(self) -> str:
        return self.settings.file_version

    def candidates(self, chunk_id: str) -> Tuple[str, ...]:
        functions = self.settings.functions_prefix
        return (
            *self.settings.versioned_names(chunk_id),
            *self.settings.versioned_names(f"{functions}/{chunk_id}"),
        )

    def resolve(self, chunk_id: str) -> ParsedChunk:
        """Return the parsed chunk, reading it from the tree on first use."""
        key = ChunkId(chunk_id)
        cached = self._chunks.get(key)
        if cached is not None:
            return cached

        candidates = self.candidates(chunk_id)
        path = first_existing(self.tree, candidates)
        if path is None:
            raise MissingChunk(chunk_id, candidates)

        chunk = parse_chunk(read_source(self.tree, path))
        logger.debug(
            "Loaded chunk %s from %s (requires: %s)",
            chunk_id,
            path,
            ", ".join(chunk.required) or "-",
        )

        self._chunks.store(key, chunk)
        return chunk

    def __contains__(self, chunk_id: object) -> bool:
        return chunk_id in self._chunks

    def __len__(self) -> int:
        return len(self._chunks)
