"""Shared pytest fixtures for test modules."""

import logging
import sqlite3
from collections.abc import Generator

import pytest

from fantasy_cricket_manager.db.connection import create_connection


@pytest.fixture
def conn() -> Generator[sqlite3.Connection]:
    connection = create_connection(":memory:")
    yield connection
    connection.close()


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Generator[None]:
    # CLI tests call configure_logging(), which mutates the global root logger
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers[:] = handlers
