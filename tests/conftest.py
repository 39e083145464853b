"""
Shared test fixtures and configuration for entire test suite.

Provides: explicit test settings, application/client fixtures backed by an
in-memory gateway, and mock gateway/collection fixtures
Dependencies: pytest, fastapi, pymongo
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from backend.boundary.db.connection import MongoGateway
from backend.configs import AuthSettings, DatabaseSettings, Settings
from backend.main import create_app

from tests.fakes import FakeGateway

TEST_SECRET = "test-signing-secret-0123456789abcdef"


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a dummy MongoDB URI and a cheap bcrypt cost."""
    return Settings(
        database=DatabaseSettings(uri="mongodb://localhost:27017", db_name="test_db"),
        auth=AuthSettings(token_secret=TEST_SECRET, password_hash_rounds=4),
    )


@pytest.fixture
def fake_db() -> FakeGateway:
    """In-memory stand-in for the MongoDB gateway."""
    return FakeGateway()


@pytest.fixture
def app(test_settings: Settings, fake_db: FakeGateway):
    """Application wired to the in-memory gateway (lifespan not run)."""
    application = create_app(test_settings)
    application.state.database = fake_db
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def mock_collection() -> MagicMock:
    """Mock motor collection with async write methods."""
    collection = MagicMock()
    collection.insert_one = AsyncMock()
    collection.find_one = AsyncMock()
    collection.update_one = AsyncMock()
    collection.delete_one = AsyncMock()
    collection.find.return_value.to_list = AsyncMock(return_value=[])
    return collection


@pytest.fixture
def mock_db(mock_collection: MagicMock) -> MagicMock:
    """Mock gateway whose collection() returns mock_collection."""
    db = MagicMock(spec=MongoGateway)
    db.collection.return_value = mock_collection
    return db
