"""objectgraph error types.

All custom exceptions inherit from ObjectGraphError to allow
catching any objectgraph-specific error.
"""

from typing import Any


class ObjectGraphError(Exception):
    """Base exception for all objectgraph errors."""

    pass


class ConfigurationError(ObjectGraphError, ValueError):
    """Invalid configuration."""

    pass


class StorageError(ObjectGraphError):
    """Storage backend operation failed."""

    pass


class StorageNotImplementedError(ObjectGraphError, NotImplementedError):
    """A storage backend did not override push() or pull()."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Call to unimplemented .{operation}() method")
        self.operation = operation


class UnregisteredClassError(ObjectGraphError):
    """Entity class was never registered with the object store."""

    def __init__(self, entity_class: type[Any]) -> None:
        super().__init__(f"Entity class {entity_class.__qualname__} is not registered")
        self.entity_class = entity_class


class ClassMismatchError(ObjectGraphError):
    """Entity is not an instance of the class a collection is bound to."""

    def __init__(self, expected: type[Any], actual: type[Any]) -> None:
        super().__init__(
            f"Entity class mismatch: expected {expected.__qualname__}, got {actual.__qualname__}"
        )
        self.expected = expected
        self.actual = actual


class UnsupportedClassError(ClassMismatchError):
    """Entity class is not supported by a relation collection."""

    pass


class DetachedEntityError(ObjectGraphError):
    """Operation needs an object store but none is reachable."""

    pass
