"""Tests for KeyValueStorage and its local and session flavors."""

import json
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from objectgraph.errors import StorageError
from objectgraph.models import NamedEntity
from objectgraph.storage import (
    KeyValueStorage,
    LocalKeyValueStorage,
    SessionKeyValueEngine,
    SessionKeyValueStorage,
    SqliteKeyValueEngine,
)
from objectgraph.store import ObjectStore


class Book(NamedEntity):
    pages: int = 0


@pytest.fixture
def engine() -> SessionKeyValueEngine:
    return SessionKeyValueEngine()


class TestKeyValueStorage:
    """Tests for the shared adapter."""

    def test_rejects_empty_key(self, engine: SessionKeyValueEngine) -> None:
        with pytest.raises(ValueError):
            KeyValueStorage("", engine)

    def test_exposes_key_and_engine(self, engine: SessionKeyValueEngine) -> None:
        storage = KeyValueStorage("library", engine)
        assert storage.key == "library"
        assert storage.engine is engine

    async def test_push_writes_json_under_key(self, engine: SessionKeyValueEngine) -> None:
        storage = KeyValueStorage("library", engine)
        store = ObjectStore(storage).register(Book, "books")
        store.create(Book, {"id": "b1", "name": "Dune", "pages": 412})

        await store.flush()

        document = await engine.get_item("library")
        assert document is not None
        assert json.loads(document) == {"books": [{"id": "b1", "name": "Dune", "pages": 412}]}

    async def test_pull_missing_key_returns_empty_mapping(
        self, engine: SessionKeyValueEngine
    ) -> None:
        storage = KeyValueStorage("library", engine)
        assert await storage.pull(ObjectStore(storage)) == {}

    async def test_pull_empty_document_returns_empty_mapping(self) -> None:
        engine = AsyncMock()
        engine.get_item.return_value = ""
        storage = KeyValueStorage("library", engine)
        assert await storage.pull(ObjectStore(storage)) == {}

    async def test_pull_decodes_document(self, engine: SessionKeyValueEngine) -> None:
        await engine.set_item("library", '{"books": [{"id": "b1"}]}')
        storage = KeyValueStorage("library", engine)
        assert await storage.pull(ObjectStore(storage)) == {"books": [{"id": "b1"}]}

    async def test_pull_invalid_json_raises(self, engine: SessionKeyValueEngine) -> None:
        await engine.set_item("library", "{not json")
        storage = KeyValueStorage("library", engine)
        with pytest.raises(StorageError, match="Invalid JSON"):
            await storage.pull(ObjectStore(storage))

    async def test_pull_non_object_raises(self, engine: SessionKeyValueEngine) -> None:
        await engine.set_item("library", "[1, 2]")
        storage = KeyValueStorage("library", engine)
        with pytest.raises(StorageError, match="must be an object"):
            await storage.pull(ObjectStore(storage))

    async def test_keys_are_independent(self, engine: SessionKeyValueEngine) -> None:
        first = ObjectStore(KeyValueStorage("first", engine)).register(Book)
        second = ObjectStore(KeyValueStorage("second", engine)).register(Book)
        first.create(Book)

        await first.flush()
        await second.reload()

        assert second.fetch_all(Book) == []

    async def test_erase_removes_document(self, engine: SessionKeyValueEngine) -> None:
        storage = KeyValueStorage("library", engine)
        await storage.push(ObjectStore(storage))
        await storage.erase()
        assert await engine.get_item("library") is None

    async def test_engine_failure_propagates(self) -> None:
        engine = AsyncMock()
        engine.set_item.side_effect = StorageError("quota exceeded")
        store = ObjectStore(KeyValueStorage("library", engine)).register(Book)
        book = store.create(Book)

        with pytest.raises(StorageError, match="quota exceeded"):
            await store.flush()

        assert store.fetch_all(Book) == [book]


class TestSessionKeyValueStorage:
    """Tests for the session flavor."""

    def test_uses_shared_engine_by_default(self) -> None:
        storage = SessionKeyValueStorage("library")
        assert storage.engine is SessionKeyValueEngine.shared()

    def test_accepts_explicit_engine(self, engine: SessionKeyValueEngine) -> None:
        assert SessionKeyValueStorage("library", engine).engine is engine

    async def test_separate_storages_share_session_data(self) -> None:
        writer = ObjectStore(SessionKeyValueStorage("library")).register(Book, "books")
        book = writer.create(Book, {"name": "Dune"})
        await writer.flush()

        reader = ObjectStore(SessionKeyValueStorage("library")).register(Book, "books")
        await reader.reload()

        restored = reader.fetch(Book, book.id)
        assert restored is not None
        assert restored.name == "Dune"
        assert restored.root is reader


class TestLocalKeyValueStorage:
    """Tests for the SQLite backed flavor."""

    def test_uses_sqlite_engine(self, db_path: Path) -> None:
        storage = LocalKeyValueStorage("library", db_path)
        assert isinstance(storage.engine, SqliteKeyValueEngine)
        assert storage.engine.db_path == db_path

    async def test_round_trip_survives_new_instances(self, db_path: Path) -> None:
        writer = ObjectStore(LocalKeyValueStorage("library", db_path)).register(Book, "books")
        book = writer.create(Book, {"name": "Dune", "pages": 412})
        await writer.flush()

        reader = ObjectStore(LocalKeyValueStorage("library", db_path)).register(Book, "books")
        await reader.reload()

        restored = reader.fetch(Book, book.id)
        assert restored is not None
        assert restored.pages == 412
        assert db_path.exists()

    async def test_pull_from_fresh_file_is_empty(self, db_path: Path) -> None:
        storage = LocalKeyValueStorage("library", db_path)
        assert await storage.pull(ObjectStore(storage)) == {}
