"""Object store: a registry backed identity map for entities."""

from typing import Any, TypeVar, overload

from loguru import logger

from objectgraph.errors import UnregisteredClassError
from objectgraph.models.entity import Entity
from objectgraph.ports.storage import StoragePort
from objectgraph.storage.memory import MemoryStorage
from objectgraph.store.registry import Registration, kind_of

E = TypeVar("E", bound=Entity)


class ObjectStore:
    """
    Registry and identity map for entities.

    Entity classes must be registered before their instances can be
    built, created, stored or deleted. Each registered class owns one
    collection of live instances, unique by id, and a group label
    under which the collection is serialized.

    The whole store can be pushed to and rebuilt from a storage
    backend with flush() and reload().
    """

    def __init__(self, storage: StoragePort | None = None) -> None:
        """
        Initialize ObjectStore.

        Args:
            storage: Backend used by flush() and reload().
                Defaults to a fresh MemoryStorage.
        """
        self._storage: StoragePort = storage if storage is not None else MemoryStorage()
        self._registry: dict[str, Registration] = {}

    @property
    def storage(self) -> StoragePort:
        """The backend used by flush() and reload()."""
        return self._storage

    # =========================================================================
    # Registration
    # =========================================================================

    def register(self, entity_class: type[Entity], group: str | None = None) -> "ObjectStore":
        """
        Register an entity class under a group label.

        Registering the same class again keeps its collection and its
        original group label.

        Args:
            entity_class: Entity subclass to manage.
            group: Serialization label. Defaults to the class name.

        Returns:
            This store, for chaining.

        Raises:
            TypeError: If entity_class is not an Entity subclass.
            ValueError: If a different class with the same registry
                token is already registered, or the group label is
                already claimed by another class.
        """
        if not (isinstance(entity_class, type) and issubclass(entity_class, Entity)):
            raise TypeError(f"Only Entity subclasses can be registered, got {entity_class!r}")

        kind = kind_of(entity_class)
        existing = self._registry.get(kind)
        if existing is not None:
            if not existing.matches(entity_class):
                raise ValueError(f"A different class is already registered as {kind}")
            return self

        label = group or entity_class.__name__
        # Group labels are unique across registrations
        for registration in self._registry.values():
            if registration.group == label:
                raise ValueError(f"Group {label!r} is already used by {registration.kind}")

        self._registry[kind] = Registration(entity_class=entity_class, group=label)
        logger.debug("Registered entity class {} under group {!r}", kind, label)
        return self

    def is_registered(self, entity_class: type[Entity]) -> bool:
        """Check whether entity_class has been registered."""
        return self._lookup(entity_class) is not None

    def group_of(self, entity_class: type[Entity]) -> str:
        """Return the group label of a registered class."""
        return self._require(entity_class).group

    @property
    def registered_classes(self) -> tuple[type[Entity], ...]:
        """Registered classes in registration order."""
        return tuple(registration.entity_class for registration in self._registry.values())

    def _lookup(self, entity_class: type[Entity]) -> Registration | None:
        registration = self._registry.get(kind_of(entity_class))
        if registration is None or not registration.matches(entity_class):
            return None
        return registration

    def _require(self, entity_class: type[Entity]) -> Registration:
        registration = self._lookup(entity_class)
        if registration is None:
            raise UnregisteredClassError(entity_class)
        return registration

    # =========================================================================
    # Entity Operations
    # =========================================================================

    def build(self, entity_class: type[E], data: dict[str, Any] | None = None) -> E:
        """
        Construct a new entity rooted at this store without storing it.

        Raises:
            UnregisteredClassError: If entity_class was never registered.
        """
        self._require(entity_class)
        entity = entity_class.model_validate(data or {})
        entity._bind_root(self)
        return entity

    def create(self, entity_class: type[E], data: dict[str, Any] | None = None) -> E:
        """
        Construct a new entity and store it.

        Raises:
            UnregisteredClassError: If entity_class was never registered.
        """
        entity = self.build(entity_class, data)
        self.store(entity)
        return entity

    def store(self, entity: Entity) -> "ObjectStore":
        """
        Admit an entity into its class collection.

        Storing an entity that is already a member is a no-op. The
        entity's root is only set when it has none, so an entity
        owned by another store keeps its owner.

        Raises:
            UnregisteredClassError: If the entity's class was never registered.
        """
        registration = self._require(type(entity))
        member = registration.members.setdefault(entity.id, entity)
        if member is entity and entity.root is None:
            entity._bind_root(self)
        return self

    def delete(self, entity: Entity) -> "ObjectStore":
        """
        Remove an entity from its class collection.

        Deleting a non-member is a no-op. A removed entity owned by
        this store loses its root.

        Raises:
            UnregisteredClassError: If the entity's class was never registered.
        """
        registration = self._require(type(entity))
        member = registration.members.pop(entity.id, None)
        if member is not None and member.root is self:
            member._unbind_root()
        return self

    def clear(self, entity_class: type[Entity] | None = None) -> "ObjectStore":
        """
        Remove every member of one registered class, or of all classes.

        Raises:
            UnregisteredClassError: If entity_class was never registered.
        """
        if entity_class is None:
            registrations = list(self._registry.values())
        else:
            registrations = [self._require(entity_class)]

        for registration in registrations:
            for member in registration.members.values():
                if member.root is self:
                    member._unbind_root()
            registration.members.clear()
        return self

    @overload
    def fetch(self, entity_class_or_id: str) -> Entity | None: ...

    @overload
    def fetch(self, entity_class_or_id: type[E], entity_id: str) -> E | None: ...

    def fetch(
        self, entity_class_or_id: type[Entity] | str, entity_id: str | None = None
    ) -> Entity | None:
        """
        Fetch an entity by id.

        Called as fetch(EntityClass, id) the search is limited to one
        class. Called as fetch(id) every registered class is searched
        in registration order and the first match is returned.

        Returns:
            The entity, or None when nothing matches.
        """
        if isinstance(entity_class_or_id, str):
            for registration in self._registry.values():
                found = registration.members.get(entity_class_or_id)
                if found is not None:
                    return found
            return None

        registration = self._lookup(entity_class_or_id)
        if registration is None or entity_id is None:
            return None
        return registration.members.get(entity_id)

    @overload
    def fetch_all(self) -> list[Entity]: ...

    @overload
    def fetch_all(self, entity_class: type[E]) -> list[E]: ...

    def fetch_all(self, entity_class: type[Entity] | None = None) -> list[Entity]:
        """
        Return a snapshot of stored entities.

        Args:
            entity_class: Class to list. When omitted, members of every
                registered class are returned in registration order.

        Returns:
            A new list. Empty for unregistered classes.
        """
        if entity_class is None:
            return [
                member
                for registration in self._registry.values()
                for member in registration.members.values()
            ]

        registration = self._lookup(entity_class)
        if registration is None:
            return []
        return list(registration.members.values())

    def __contains__(self, entity: object) -> bool:
        if not isinstance(entity, Entity):
            return False
        registration = self._lookup(type(entity))
        return registration is not None and entity.id in registration.members

    def __len__(self) -> int:
        return sum(len(registration.members) for registration in self._registry.values())

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_plain_object(self) -> dict[str, list[dict[str, Any]]]:
        """
        Serialize every registered collection.

        Returns:
            Mapping of group label to the plain form of each member,
            in insertion order.
        """
        return {
            registration.group: [
                member.to_plain_object() for member in registration.members.values()
            ]
            for registration in self._registry.values()
        }

    async def flush(self) -> None:
        """Push the current state of the store to the storage backend."""
        await self._storage.push(self)
        logger.debug("Flushed {} entities to {}", len(self), type(self._storage).__name__)

    async def reload(self) -> None:
        """
        Pull state from the storage backend and merge it into the store.

        Entities are rebuilt for every registered class whose group
        label appears in the pulled data. Nothing is removed first:
        resident entities stay, and ids already resident keep their
        resident instance. All records are validated before any is
        stored, so a failed pull or an invalid record leaves the store
        untouched.
        """
        data = await self._storage.pull(self)

        # Validate everything before touching the collections
        staged: list[Entity] = []
        known_groups: set[str] = set()
        for registration in self._registry.values():
            known_groups.add(registration.group)
            for record in data.get(registration.group, []):
                staged.append(registration.entity_class.model_validate(record))

        unknown_groups = sorted(set(data) - known_groups)
        if unknown_groups:
            logger.warning("Ignoring unregistered groups in pulled data: {}", unknown_groups)

        # Merge
        for entity in staged:
            self.store(entity)

        logger.debug(
            "Reloaded {} records from {}", len(staged), type(self._storage).__name__
        )
