import mongomock
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app


@pytest.fixture
def test_settings():
    return Settings(MONGO_DB="school_test", MONGO_COLLECTION="students")


@pytest.fixture
def mongo_client():
    """In-memory MongoDB stand-in, fresh for every test"""
    return mongomock.MongoClient()


@pytest.fixture
def collection(mongo_client, test_settings):
    return mongo_client[test_settings.MONGO_DB][test_settings.MONGO_COLLECTION]


@pytest.fixture
def app(test_settings, mongo_client):
    return create_app(test_settings, mongo_client)


@pytest.fixture
def client(app):
    """Create a test client"""
    return TestClient(app)
