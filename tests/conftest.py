"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from src.db.database import build_engine, build_session_factory
from src.db.memory_repository import InMemoryGameRepository
from src.db.repository import GameRepository
from src.db.sql_repository import SQLGameRepository
from src.main import create_app

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a fresh test database. Every test gets its own engine, so nothing leaks between tests."""
    engine = build_engine(DATABASE_URL)
    db = build_session_factory(engine)()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def memory_repository() -> InMemoryGameRepository:
    return InMemoryGameRepository()


@pytest.fixture(params=["memory", "sql"])
def repository(request: pytest.FixtureRequest) -> GameRepository:
    """Same contract, both data stores."""
    if request.param == "memory":
        return request.getfixturevalue("memory_repository")
    return SQLGameRepository(request.getfixturevalue("db_session_repo"))


@pytest.fixture
def client(memory_repository: InMemoryGameRepository) -> Generator[TestClient, None, None]:
    """HTTP client for an app with its own empty in-memory store."""
    with TestClient(create_app(repository=memory_repository)) as test_client:
        yield test_client
