"""Entry point for opening a configured object store.

Loads configuration, sets up logging and wires an ObjectStore to the
configured storage backend. Entity classes are registered by the
caller afterwards.
"""

from pathlib import Path

from loguru import logger

from objectgraph.config.loader import load_config
from objectgraph.config.models import Config
from objectgraph.storage.factory import StorageBackendFactory
from objectgraph.store.object_store import ObjectStore
from objectgraph.utils.logging import configure_logging


def open_store(
    config_path: Path | None = None,
    config: Config | None = None,
) -> ObjectStore:
    """
    Open an empty object store from configuration.

    Args:
        config_path: Path to a YAML config file. Ignored when config is given.
        config: Optional pre-loaded configuration.

    Returns:
        An ObjectStore wired to the configured backend.

    Raises:
        FileNotFoundError: If config_path doesn't exist.
        ConfigurationError: If the configuration is invalid.
    """
    if config is None:
        config = load_config(config_path)

    configure_logging(config.logging)

    store = StorageBackendFactory(config).create_store()
    logger.info("Opened object store with {} backend", config.storage.backend)
    return store
