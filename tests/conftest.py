"""Pytest fixtures for identity wallet tests."""

import pytest
import pytest_asyncio

from identity_wallet.adapters.database.manager import DatabaseManager
from identity_wallet.adapters.memory import InMemoryRecordStore
from identity_wallet.config import Config


@pytest.fixture
def test_config(tmp_path, monkeypatch):
    """Create test configuration pointing at a throwaway SQLite database."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'wallet.db'}")
    monkeypatch.setenv("ENVIRONMENT", "CI")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FORMAT", "text")

    return Config.from_env()


@pytest_asyncio.fixture
async def db_manager(test_config):
    """Initialized database manager with the schema in place."""
    manager = DatabaseManager(test_config)
    await manager.initialize()
    await manager.create_tables()

    yield manager

    await manager.close()


@pytest.fixture
def memory_store():
    """Create an empty in-memory record store."""
    return InMemoryRecordStore()
