"""Port interface for entity lookup roots."""

from typing import Any, Protocol, TypeVar

from objectgraph.models.entity import Entity

E = TypeVar("E", bound=Entity)


class EntityRootPort(Protocol):
    """Protocol for the object store operations relations call back into."""

    def fetch(self, entity_class_or_id: Any, entity_id: str | None = None) -> Any:
        """Fetch an entity by class and id, or by id alone."""
        ...

    def build(self, entity_class: type[E], data: dict[str, Any] | None = None) -> E:
        """Construct a rooted but unstored entity."""
        ...

    def create(self, entity_class: type[E], data: dict[str, Any] | None = None) -> E:
        """Construct and store an entity."""
        ...

    def delete(self, entity: Entity) -> Any:
        """Remove an entity from the store."""
        ...
