"""Base storage backend."""

from typing import Any

from objectgraph.errors import StorageNotImplementedError
from objectgraph.ports.storage import PlainObjectSource


class Storage:
    """
    Base class for object store backends.

    Subclasses must override push() and pull(). The defaults raise
    StorageNotImplementedError.
    """

    async def push(self, store: PlainObjectSource) -> None:
        """
        Persist the plain form of an object store.

        Args:
            store: Object store to serialize with to_plain_object().
        """
        raise StorageNotImplementedError("push")

    async def pull(self, store: PlainObjectSource) -> dict[str, list[dict[str, Any]]]:
        """
        Return the last persisted plain form.

        Args:
            store: Object store the data is pulled for.

        Returns:
            Mapping of group label to plain records, or an empty mapping.
        """
        raise StorageNotImplementedError("pull")
