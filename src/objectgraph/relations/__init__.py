"""Relations between entities."""

from objectgraph.relations.cache import Cache
from objectgraph.relations.connected import ConnectedEntities

__all__ = [
    "Cache",
    "ConnectedEntities",
]
