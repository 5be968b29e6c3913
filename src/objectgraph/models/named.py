"""Named entity model."""

from objectgraph.models.entity import Entity


class NamedEntity(Entity):
    """
    Entity carrying a human readable name.

    The name is mutable and always present in the plain form,
    even when unset.
    """

    name: str | None = None
