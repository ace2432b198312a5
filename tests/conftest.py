"""Test configuration."""
import os
from typing import Generator

import pytest

# Set test environment before any imports
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["TESTING"] = "false"
os.environ["CALENDAR_SERVICE_URL"] = "http://calendar.test"

# Import after environment setup
from core.migrate import run_migrations
from core.setup import DatabaseSetup
from service.storage import MemStorage, SQLStorage, StorageInterface


@pytest.fixture
def mem_storage() -> MemStorage:
    """A fresh in-memory store for each test."""
    return MemStorage()


@pytest.fixture
def sql_storage(tmp_path) -> Generator[SQLStorage, None, None]:
    """A SQL store on a freshly migrated SQLite file."""
    url = f"sqlite:///{tmp_path / 'test.db'}"
    run_migrations(url)
    database = DatabaseSetup(url)
    try:
        yield SQLStorage(database)
    finally:
        database.dispose()


@pytest.fixture(params=["memory", "sql"])
def storage(request) -> StorageInterface:
    """Runs a test once against every storage backend."""
    fixture = {"memory": "mem_storage", "sql": "sql_storage"}[request.param]
    return request.getfixturevalue(fixture)
