"""Port interfaces for objectgraph.

Ports define the contracts that adapters must implement. The object
store and relations depend only on these abstractions, not on
concrete storage backends.
"""

from objectgraph.ports.root import EntityRootPort
from objectgraph.ports.storage import KeyValueEnginePort, PlainObjectSource, StoragePort

__all__ = [
    "EntityRootPort",
    "KeyValueEnginePort",
    "PlainObjectSource",
    "StoragePort",
]
