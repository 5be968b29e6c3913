"""One-to-many relations between entities with lazy id resolution."""

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from objectgraph.errors import ClassMismatchError, DetachedEntityError, UnsupportedClassError
from objectgraph.models.entity import Entity
from objectgraph.ports.root import EntityRootPort

E = TypeVar("E", bound=Entity)


class ConnectedEntities(Generic[E]):
    """
    Children of one class connected to a parent entity.

    Entries are keyed by child id and hold either the child instance
    or None when only the id is known. Unresolved entries are looked
    up in the parent's object store on demand and memoized once found.
    Ids that cannot be resolved are skipped during iteration.
    """

    def __init__(self, parent: Entity, child_class: type[E]) -> None:
        """
        Initialize ConnectedEntities.

        Args:
            parent: Entity the children are attached to.
            child_class: Class every child must be an instance of.
        """
        self._parent = parent
        self._child_class = child_class
        self._entries: dict[str, E | None] = {}

    @property
    def parent(self) -> Entity:
        """Entity the children are attached to."""
        return self._parent

    @property
    def child_class(self) -> type[E]:
        """Class every child must be an instance of."""
        return self._child_class

    @property
    def root(self) -> EntityRootPort | None:
        """Object store of the parent entity."""
        return self._parent.root

    def _require_root(self) -> EntityRootPort:
        root = self.root
        if root is None:
            raise DetachedEntityError(
                f"{type(self._parent).__qualname__} {self._parent.id} is not in an object store"
            )
        return root

    def fetch(self, entity_id: str) -> E | None:
        """
        Fetch a child by id.

        Unresolved entries are looked up in the root store. A failed
        lookup is not memoized, so the id can still resolve later.

        Returns:
            The child, or None if the id is not in the collection or
            cannot be resolved.
        """
        if entity_id not in self._entries:
            return None

        entity = self._entries[entity_id]
        if entity is not None:
            return entity

        # Placeholder: resolve against the root store
        root = self.root
        if root is None:
            return None

        entity = root.fetch(self._child_class, entity_id)
        if entity is None:
            return None

        # Memoize
        self._entries[entity_id] = entity
        return entity

    def has(self, entity: object) -> bool:
        """Check whether an entity is in the collection."""
        if not isinstance(entity, self._child_class):
            return False
        return entity.id in self._entries

    __contains__ = has

    def attach(self, entity: E) -> "ConnectedEntities[E]":
        """
        Attach a child. Attaching a present child is a no-op.

        Raises:
            ClassMismatchError: If entity is not a child_class instance.
        """
        if not isinstance(entity, self._child_class):
            raise ClassMismatchError(self._child_class, type(entity))
        if entity.id not in self._entries:
            self._entries[entity.id] = entity
        return self

    def detach(self, entity: E) -> "ConnectedEntities[E]":
        """
        Detach a child. Detaching an absent child is a no-op.

        Raises:
            ClassMismatchError: If entity is not a child_class instance.
        """
        if not isinstance(entity, self._child_class):
            raise ClassMismatchError(self._child_class, type(entity))
        self._entries.pop(entity.id, None)
        return self

    def create(self) -> E:
        """
        Create a child in the root store and attach it.

        Raises:
            DetachedEntityError: If the parent has no object store.
        """
        entity = self._require_root().create(self._child_class)
        self.attach(entity)
        return entity

    def build(self) -> E:
        """
        Build a rooted child without storing or attaching it.

        Raises:
            DetachedEntityError: If the parent has no object store.
        """
        return self._require_root().build(self._child_class)

    def clean(self) -> "ConnectedEntities[E]":
        """Detach resolved children that are not in an object store."""
        for entity in list(self._entries.values()):
            if entity is not None and not entity.is_stored:
                self.detach(entity)
        return self

    def delete(self, entity: E) -> "ConnectedEntities[E]":
        """
        Detach a child and delete it from the root store.

        The store is only touched when the child was in this collection.

        Raises:
            UnsupportedClassError: If entity is not a child_class instance.
        """
        if not isinstance(entity, self._child_class):
            raise UnsupportedClassError(self._child_class, type(entity))
        if not self.has(entity):
            return self

        self.detach(entity)
        root = self.root
        if root is not None:
            root.delete(entity)
        return self

    def from_iterable(self, items: Iterable[E | str]) -> "ConnectedEntities[E]":
        """
        Replace the collection with the given children.

        Strings are taken as ids and resolved lazily. Anything else is
        attached as an entity. Ids and instances can be mixed. The items
        are read before the collection is cleared, so the relation may be
        rebuilt from itself.
        """
        snapshot = list(items)
        self._entries.clear()
        for item in snapshot:
            if isinstance(item, str):
                self._entries.setdefault(item, None)
            else:
                self.attach(item)
        return self

    def ids(self) -> list[str]:
        """All child ids in order, resolved or not."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[E]:
        for entity_id, entity in list(self._entries.items()):
            if entity is None:
                entity = self.fetch(entity_id)
                if entity is None:
                    continue
            yield entity
