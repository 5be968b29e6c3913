"""Port interfaces for storage backends."""

from typing import Any, Protocol


class PlainObjectSource(Protocol):
    """Anything that can be flattened to a group label keyed mapping."""

    def to_plain_object(self) -> dict[str, list[dict[str, Any]]]:
        """Serialize to group label -> list of plain entity records."""
        ...


class StoragePort(Protocol):
    """Protocol for pushing and pulling a whole object store."""

    async def push(self, store: PlainObjectSource) -> None:
        """Persist the store's plain form."""
        ...

    async def pull(self, store: PlainObjectSource) -> dict[str, list[dict[str, Any]]]:
        """Return the last persisted plain form, or an empty mapping."""
        ...


class KeyValueEnginePort(Protocol):
    """Protocol for a string keyed, string valued storage engine."""

    async def get_item(self, key: str) -> str | None:
        """Return the value stored under key, or None."""
        ...

    async def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    async def remove_item(self, key: str) -> None:
        """Remove key if present."""
        ...
