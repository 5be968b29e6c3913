"""Storage backends writing the whole store under one key of a key-value engine."""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from objectgraph.errors import StorageError
from objectgraph.ports.storage import KeyValueEnginePort, PlainObjectSource
from objectgraph.storage.base import Storage
from objectgraph.storage.engines import SessionKeyValueEngine, SqliteKeyValueEngine


class KeyValueStorage(Storage):
    """
    Storage adapter over a key-value engine.

    The store's plain form is encoded as one JSON document and kept
    under a fixed key.
    """

    def __init__(self, key: str, engine: KeyValueEnginePort) -> None:
        """
        Initialize KeyValueStorage.

        Args:
            key: Key under which the document is stored.
            engine: Engine holding the document.
        """
        if not key:
            raise ValueError("key must not be empty")
        self._key = key
        self._engine = engine

    @property
    def key(self) -> str:
        """Key under which the document is stored."""
        return self._key

    @property
    def engine(self) -> KeyValueEnginePort:
        """Engine holding the document."""
        return self._engine

    async def push(self, store: PlainObjectSource) -> None:
        """Encode the store's plain form and write it under the key."""
        document = json.dumps(store.to_plain_object())
        await self._engine.set_item(self._key, document)
        logger.debug("Pushed {} chars under key {!r}", len(document), self._key)

    async def pull(self, store: PlainObjectSource) -> dict[str, list[dict[str, Any]]]:
        """
        Read and decode the document stored under the key.

        Returns:
            The decoded mapping, or an empty mapping when nothing is stored.

        Raises:
            StorageError: If the stored text is not a JSON object.
        """
        document = await self._engine.get_item(self._key)
        # Nothing pushed yet
        if not document:
            return {}

        try:
            data = json.loads(document)
        except json.JSONDecodeError as e:
            raise StorageError(f"Invalid JSON under key {self._key!r}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(
                f"Document under key {self._key!r} must be an object, not {type(data).__name__}"
            )
        return data

    async def erase(self) -> None:
        """Remove the stored document."""
        await self._engine.remove_item(self._key)


class LocalKeyValueStorage(KeyValueStorage):
    """KeyValueStorage persisted in a SQLite file."""

    def __init__(self, key: str, db_path: Path | str) -> None:
        super().__init__(key, SqliteKeyValueEngine(db_path))


class SessionKeyValueStorage(KeyValueStorage):
    """KeyValueStorage kept for the lifetime of the process."""

    def __init__(self, key: str, engine: SessionKeyValueEngine | None = None) -> None:
        super().__init__(key, engine if engine is not None else SessionKeyValueEngine.shared())
