"""objectgraph: in-memory entity graph with lazy relations and pluggable storage."""

from objectgraph.errors import (
    ClassMismatchError,
    ConfigurationError,
    DetachedEntityError,
    ObjectGraphError,
    StorageError,
    StorageNotImplementedError,
    UnregisteredClassError,
    UnsupportedClassError,
)
from objectgraph.models import Entity, NamedEntity
from objectgraph.relations import Cache, ConnectedEntities
from objectgraph.runtime import open_store
from objectgraph.storage import (
    KeyValueStorage,
    LocalKeyValueStorage,
    MemoryStorage,
    SessionKeyValueStorage,
    Storage,
    StorageBackendFactory,
)
from objectgraph.store import ObjectStore

__version__ = "0.1.0"

__all__ = [
    "Cache",
    "ClassMismatchError",
    "ConfigurationError",
    "ConnectedEntities",
    "DetachedEntityError",
    "Entity",
    "KeyValueStorage",
    "LocalKeyValueStorage",
    "MemoryStorage",
    "NamedEntity",
    "ObjectGraphError",
    "ObjectStore",
    "SessionKeyValueStorage",
    "Storage",
    "StorageBackendFactory",
    "StorageError",
    "StorageNotImplementedError",
    "UnregisteredClassError",
    "UnsupportedClassError",
    "__version__",
    "open_store",
]
