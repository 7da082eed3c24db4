# shadercomp/assets/registry.py
from typing import Dict, Generic, Hashable, Iterator, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class AssetRegistry(Generic[K, V]):
    """
    Stores loaded asset data mapped by key.

    Entries are write-once: once a key is stored it keeps its value for the
    lifetime of the registry.
    """

    def __init__(self) -> None:
        self._storage: Dict[K, V] = {}

    def store(self, key: K, data: V) -> None:
        """Register a loaded asset."""
        if key in self._storage and self._storage[key] != data:
            raise ValueError(f"Asset '{key}' is already registered")
        self._storage[key] = data

    def get(self, key: K) -> Optional[V]:
        """Retrieve asset data if available."""
        return self._storage.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._storage

    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[K]:
        return iter(self._storage)
