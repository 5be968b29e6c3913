"""Shared pytest fixtures for objectgraph tests."""

import io
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger

from objectgraph.storage.engines import SessionKeyValueEngine


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Provide a temporary SQLite database path."""
    return tmp_path / "objectgraph.db"


@pytest.fixture
def log_capture() -> Generator[io.StringIO, None, None]:
    """Capture loguru output to a string buffer."""
    string_io = io.StringIO()
    handler_id = logger.add(string_io, format="{level} {message}", level="DEBUG")
    yield string_io
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def reset_session_engine() -> Generator[None, None, None]:
    """Give every test a fresh process-wide session engine."""
    SessionKeyValueEngine._shared = None
    yield
    SessionKeyValueEngine._shared = None


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Reset loguru and stdlib logging after a test reconfigures them."""
    yield
    logger.remove()
    logger.add(io.StringIO())
    logging.basicConfig(handlers=[logging.NullHandler()], force=True)
