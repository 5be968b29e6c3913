"""Object store and entity class registry."""

from objectgraph.store.object_store import ObjectStore
from objectgraph.store.registry import Registration, kind_of

__all__ = [
    "ObjectStore",
    "Registration",
    "kind_of",
]
