"""Storage backend factory.

Instantiates the storage backend selected by config.storage.backend.
"""

from typing import TYPE_CHECKING

from loguru import logger

from objectgraph.config.models import Config
from objectgraph.errors import ConfigurationError
from objectgraph.ports.storage import StoragePort
from objectgraph.storage.key_value import LocalKeyValueStorage, SessionKeyValueStorage
from objectgraph.storage.memory import MemoryStorage

if TYPE_CHECKING:
    from objectgraph.store.object_store import ObjectStore


class StorageBackendFactory:
    """Factory for creating storage backends and stores wired to them."""

    def __init__(self, config: Config) -> None:
        self._config = config

    @property
    def backend(self) -> str:
        """Return the configured backend name."""
        return self._config.storage.backend

    def create_storage(self) -> StoragePort:
        """
        Create the configured storage backend.

        Raises:
            ConfigurationError: If the backend name is unknown.
        """
        storage_config = self._config.storage
        logger.debug("Creating {} storage backend", self.backend)

        if self.backend == "memory":
            return MemoryStorage()
        if self.backend == "local":
            return LocalKeyValueStorage(storage_config.key, storage_config.db_path)
        if self.backend == "session":
            return SessionKeyValueStorage(storage_config.key)
        raise ConfigurationError(f"Unknown storage backend: {self.backend}")

    def create_store(self) -> "ObjectStore":
        """Create an empty ObjectStore using the configured backend."""
        from objectgraph.store.object_store import ObjectStore

        return ObjectStore(self.create_storage())
