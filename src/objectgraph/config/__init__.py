"""Configuration models and loading."""

from objectgraph.config.loader import load_config
from objectgraph.config.models import Config, LoggingConfig, StorageConfig

__all__ = [
    "Config",
    "LoggingConfig",
    "StorageConfig",
    "load_config",
]
