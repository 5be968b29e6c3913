"""Domain models for objectgraph."""

from objectgraph.models.entity import Entity, generate_id
from objectgraph.models.named import NamedEntity

__all__ = [
    "Entity",
    "NamedEntity",
    "generate_id",
]
