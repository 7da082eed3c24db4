# shadercomp/graphics/util/ids.py
from __future__ import annotations

from typing import NewType

ChunkId = NewType("ChunkId", str)
