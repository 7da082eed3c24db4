# shadercomp/graphics/shaders/assembler.py
from __future__ import annotations

from typing import List, Sequence

from shadercomp.graphics.shaders.chunk_store import ChunkStore


def group_by_category(
    chunk_ids: Sequence[str], category_order: Sequence[str]
) -> List[List[str]]:
    """
    Split ids into one group per category plus a trailing catch-all.

    Each group keeps the relative order it had in `chunk_ids`.
    """
    groups: List[List[str]] = [[] for _ in range(len(category_order) + 1)]
    for chunk_id in chunk_ids:
        for index, category in enumerate(category_order):
            if chunk_id.startswith(category + "/"):
                groups[index].append(chunk_id)
                break
        else:
            groups[-1].append(chunk_id)
    return groups


def assemble(
    store: ChunkStore,
    chunk_ids: Sequence[str],
    stage_body: str,
    glsl_version: str,
    category_order: Sequence[str] = ("attributes", "uniforms", "structs"),
) -> str:
    """Render resolved chunks and the stage body into one source string."""
    parts = [f"#version {glsl_version}\n\n"]
    for group in group_by_category(chunk_ids, category_order):
        for chunk_id in group:
            parts.append(store.resolve(chunk_id).body)
            parts.append("\n\n")
    parts.append(stage_body)
    return "".join(parts)
