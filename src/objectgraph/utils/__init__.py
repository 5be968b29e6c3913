"""objectgraph utility modules."""

from objectgraph.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
