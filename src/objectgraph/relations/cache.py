"""Lazily loaded list of entity ids."""

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from objectgraph.errors import ClassMismatchError
from objectgraph.models.entity import Entity
from objectgraph.ports.root import EntityRootPort

E = TypeVar("E", bound=Entity)


class Cache(Generic[E]):
    """
    Ordered ids of entities of one class.

    The ids can be embedded in a serialized entity and turned back
    into instances later. Instances are materialized on first
    iteration by fetching every id from the root store. Ids that do
    not resolve are left out of the materialized list.
    """

    def __init__(self, entity_class: type[E], parent: Any, ids: Iterable[str] = ()) -> None:
        """
        Initialize Cache.

        Args:
            entity_class: Class of the cached entities.
            parent: An object store, or any object exposing ``root``
                such as an entity or a ConnectedEntities.
            ids: Initial ids. The iterable is copied.
        """
        self._entity_class = entity_class
        self._parent = parent
        self._ids: list[str] = list(ids)
        self._entities: list[E] | None = None

    @property
    def entity_class(self) -> type[E]:
        """Class of the cached entities."""
        return self._entity_class

    @property
    def size(self) -> int:
        """Number of ids, loaded or not."""
        return len(self._ids)

    @property
    def root(self) -> EntityRootPort | None:
        """The object store ids are resolved against."""
        if hasattr(self._parent, "root"):
            root: EntityRootPort | None = self._parent.root
            return root
        # The parent is the store itself
        return self._parent  # type: ignore[no-any-return]

    @property
    def is_loaded(self) -> bool:
        """True once the instances have been materialized."""
        return self._entities is not None

    def includes(self, entity: object) -> bool:
        """Check whether an entity's id is in the cache."""
        if not isinstance(entity, self._entity_class):
            return False
        return entity.id in self._ids

    __contains__ = includes

    def _check_class(self, entity: object) -> None:
        if not isinstance(entity, self._entity_class):
            raise ClassMismatchError(self._entity_class, type(entity))

    def attach(self, entity: E) -> "Cache[E]":
        """
        Append an entity.

        Raises:
            ClassMismatchError: If entity is not an entity_class instance.
        """
        self._check_class(entity)
        self._ids.append(entity.id)
        if self._entities is not None:
            self._entities.append(entity)
        return self

    def detach(self, entity: E) -> "Cache[E]":
        """
        Remove an entity. Removing an absent entity is a no-op.

        Raises:
            ClassMismatchError: If entity is not an entity_class instance.
        """
        self._check_class(entity)
        if entity.id not in self._ids:
            return self

        self._ids.remove(entity.id)
        if self._entities is not None and entity in self._entities:
            self._entities.remove(entity)
        return self

    def load(self) -> "Cache[E]":
        """
        Materialize instances for every id.

        Does nothing when already loaded or when no root is reachable.
        """
        if self._entities is not None:
            return self

        root = self.root
        if root is None:
            return self

        resolved = (root.fetch(self._entity_class, entity_id) for entity_id in self._ids)
        self._entities = [entity for entity in resolved if entity is not None]
        return self

    def clear(self) -> "Cache[E]":
        """Remove every id, and every instance if loaded."""
        self._ids.clear()
        if self._entities is not None:
            self._entities.clear()
        return self

    def fill(self, entities: Iterable[E]) -> "Cache[E]":
        """Replace the contents with the given entities."""
        self.clear()
        for entity in entities:
            self.attach(entity)
        return self

    def to_array(self) -> list[str]:
        """Ids of the entities produced by iteration."""
        return [entity.id for entity in self]

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[E]:
        self.load()
        if self._entities is None:
            return
        yield from list(self._entities)
