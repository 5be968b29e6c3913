"""In-memory storage backend."""

import copy
from typing import Any

from loguru import logger

from objectgraph.ports.storage import PlainObjectSource
from objectgraph.storage.base import Storage


class MemoryStorage(Storage):
    """
    Storage that keeps the last pushed snapshot in memory.

    The snapshot lives as long as this instance. Push and pull always
    succeed.
    """

    def __init__(self) -> None:
        self._data: dict[str, list[dict[str, Any]]] | None = None

    @property
    def has_snapshot(self) -> bool:
        """True once something has been pushed."""
        return self._data is not None

    async def push(self, store: PlainObjectSource) -> None:
        """Capture the store's plain form."""
        self._data = store.to_plain_object()
        logger.debug("MemoryStorage captured {} groups", len(self._data))

    async def pull(self, store: PlainObjectSource) -> dict[str, list[dict[str, Any]]]:
        """Return a copy of the captured snapshot, or an empty mapping."""
        if self._data is None:
            return {}
        return copy.deepcopy(self._data)
