"""Tests for StorageBackendFactory."""

from pathlib import Path

import pytest

from objectgraph.config.models import Config, StorageConfig
from objectgraph.errors import ConfigurationError
from objectgraph.storage import (
    LocalKeyValueStorage,
    MemoryStorage,
    SessionKeyValueEngine,
    SessionKeyValueStorage,
    StorageBackendFactory,
)
from objectgraph.store import ObjectStore


class TestStorageBackendFactory:
    """Tests for backend selection."""

    def test_default_backend_is_memory(self) -> None:
        factory = StorageBackendFactory(Config())
        assert factory.backend == "memory"
        assert isinstance(factory.create_storage(), MemoryStorage)

    def test_local_backend(self, tmp_path: Path) -> None:
        config = Config(
            storage=StorageConfig(backend="local", key="app", data_directory=tmp_path)
        )
        storage = StorageBackendFactory(config).create_storage()
        assert isinstance(storage, LocalKeyValueStorage)
        assert storage.key == "app"
        assert storage.engine.db_path == tmp_path.resolve() / "objectgraph.db"  # type: ignore[attr-defined]

    def test_session_backend(self) -> None:
        config = Config(storage=StorageConfig(backend="session", key="app"))
        storage = StorageBackendFactory(config).create_storage()
        assert isinstance(storage, SessionKeyValueStorage)
        assert storage.engine is SessionKeyValueEngine.shared()

    def test_unknown_backend_raises(self) -> None:
        config = Config()
        config.storage = StorageConfig.model_construct(backend="redis", key="app")
        with pytest.raises(ConfigurationError, match="redis"):
            StorageBackendFactory(config).create_storage()

    def test_each_call_creates_new_memory_storage(self) -> None:
        factory = StorageBackendFactory(Config())
        assert factory.create_storage() is not factory.create_storage()

    def test_create_store_wires_backend(self) -> None:
        config = Config(storage=StorageConfig(backend="session"))
        store = StorageBackendFactory(config).create_store()
        assert isinstance(store, ObjectStore)
        assert isinstance(store.storage, SessionKeyValueStorage)
        assert len(store) == 0
