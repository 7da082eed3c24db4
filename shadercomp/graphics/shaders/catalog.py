# shadercomp/graphics/shaders/catalog.py
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

from shadercomp.assets import defaults
from shadercomp.assets.tree import ResourceTree
from shadercomp.graphics.shaders.chunk_store import ChunkStore
from shadercomp.graphics.shaders.compiler import ProgramCompiler
from shadercomp.graphics.shaders.errors import ShaderCompositionError
from shadercomp.graphics.shaders.material_loader import MaterialLoader
from shadercomp.graphics.shaders.program_types import ProgramHandle
from shadercomp.graphics.shaders.settings import ShaderSettings

logger = logging.getLogger(__name__)


class ProgramCatalog:
    """
    Every material program, compiled once and looked up by name.

    The catalog never changes after `build`; to pick up different sources,
    build a new one.
    """

    def __init__(
        self,
        programs: Mapping[str, ProgramHandle],
        failures: Mapping[str, ShaderCompositionError] | None = None,
    ) -> None:
        self._programs: Dict[str, ProgramHandle] = dict(programs)
        self.failures: Mapping[str, ShaderCompositionError] = MappingProxyType(
            dict(failures or {})
        )

    @classmethod
    def build(
        cls,
        materials: ResourceTree,
        chunks: ResourceTree,
        compiler: ProgramCompiler,
        settings: ShaderSettings | None = None,
        *,
        strict: bool = True,
    ) -> ProgramCatalog:
        """
        Compile one program per immediate subdirectory of `materials`.

        With `strict` (the default) the first failure propagates and no
        catalog is produced. `strict=False` logs and skips failing
        materials, recording them in `failures`.
        """
        settings = settings or ShaderSettings()
        loader = MaterialLoader(
            materials, ChunkStore(chunks, settings), compiler, settings
        )

        programs: Dict[str, ProgramHandle] = {}
        failures: Dict[str, ShaderCompositionError] = {}
        for name in materials.subdirectories():
            try:
                programs[name] = loader.load(name)
            except ShaderCompositionError as e:
                if strict:
                    raise
                logger.warning("Skipping material %s: %s", name, e)
                failures[name] = e

        logger.info(
            "Built program catalog with %d program(s) (%d chunk(s) loaded)",
            len(programs),
            len(loader.chunks),
        )
        return cls(programs, failures)

    @classmethod
    def from_package(
        cls,
        compiler: ProgramCompiler,
        settings: ShaderSettings | None = None,
    ) -> ProgramCatalog:
        """Build from the chunk and material libraries shipped with shadercomp."""
        return cls.build(
            defaults.materials_tree(), defaults.chunks_tree(), compiler, settings
        )

    def get(self, name: str) -> Optional[ProgramHandle]:
        return self._programs.get(name)

    def names(self) -> List[str]:
        return list(self._programs)

    @property
    def programs(self) -> Mapping[str, ProgramHandle]:
        return MappingProxyType(self._programs)

    def __contains__(self, name: object) -> bool:
        return name in self._programs

    def __len__(self) -> int:
        return len(self._programs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._programs)
