# shadercomp/graphics/shaders/resolver.py
from __future__ import annotations

from typing import Dict, Iterable, Iterator, List

from shadercomp.assets.types import ParsedChunk
from shadercomp.graphics.shaders.chunk_store import ChunkStore


def collect_requirements(
    store: ChunkStore,
    default_requirements: Iterable[str],
    chunk: ParsedChunk,
) -> List[str]:
    """
    Ordered transitive closure of `chunk`'s requirements.

    Defaults come first, in the given order, and are not expanded. Each
    requirement is recorded before its own requirements are visited, so an
    id already present is never visited again; that is what stops cycles
    and shares a chunk reached from two branches.

    Depth-first with an explicit stack of iterators, so deep chains do not
    grow the call stack.
    """
    resolved: Dict[str, None] = dict.fromkeys(default_requirements)
    stack: List[Iterator[str]] = [iter(chunk.required)]

    while stack:
        for requirement in stack[-1]:
            if requirement not in resolved:
                resolved[requirement] = None
                stack.append(iter(store.resolve(requirement).required))
                break
        else:
            stack.pop()

    return list(resolved)
