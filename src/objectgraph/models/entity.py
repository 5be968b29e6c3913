"""Base entity model for objectgraph."""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

if TYPE_CHECKING:
    from objectgraph.store.object_store import ObjectStore


def generate_id() -> str:
    """Generate a fresh globally unique entity identifier."""
    return str(uuid4())


class Entity(BaseModel):
    """
    Base class for all entities.

    An entity is an identity-bearing record. Its ``id`` is fixed at
    construction; any other payload fields are declared by subclasses
    or passed as extra keyword arguments and kept as-is.

    The owning object store is held as a weak reference and can only be
    set by ObjectStore. An entity never assigns its own root.
    """

    id: str = Field(default_factory=generate_id, frozen=True)

    _root: weakref.ref[Any] | None = PrivateAttr(default=None)

    model_config = ConfigDict(extra="allow")

    @field_validator("id", mode="before")
    @classmethod
    def ensure_id(cls, v: Any) -> Any:
        """Generate an identifier when an empty one is supplied."""
        if v is None or v == "":
            return generate_id()
        return v

    @property
    def root(self) -> ObjectStore | None:
        """The object store this entity belongs to, if any."""
        if self._root is None:
            return None
        return self._root()

    @property
    def is_stored(self) -> bool:
        """True once the entity has been admitted into an object store."""
        return self.root is not None

    def to_plain_object(self) -> dict[str, Any]:
        """
        Serialize the entity to a JSON-safe mapping.

        Subclass fields and extra payload fields are included
        automatically. The result always contains ``id``.
        """
        return self.model_dump(mode="json")

    def _bind_root(self, store: ObjectStore) -> None:
        self._root = weakref.ref(store)

    def _unbind_root(self) -> None:
        self._root = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self), self.id))
