"""Registered entity kinds and their live collections."""

from dataclasses import dataclass, field

from objectgraph.models.entity import Entity


def kind_of(entity_class: type[Entity]) -> str:
    """Return the registry token for an entity class."""
    return f"{entity_class.__module__}.{entity_class.__qualname__}"


@dataclass
class Registration:
    """
    One registered entity class.

    Members are keyed by entity id and kept in insertion order, so
    the serialized form lists entities in the order they were stored.
    """

    entity_class: type[Entity]
    group: str
    members: dict[str, Entity] = field(default_factory=dict)

    @property
    def kind(self) -> str:
        """Registry token of the entity class."""
        return kind_of(self.entity_class)

    def matches(self, entity_class: type[Entity]) -> bool:
        """Check that entity_class is exactly the registered class."""
        return self.entity_class is entity_class
