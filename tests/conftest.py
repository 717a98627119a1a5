"""
Test configuration and fixtures for the link tracker.
This centralizes all test setup, making individual tests clean.
"""

import os

# Must be set before tracker_app.config is imported
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from main import app
from tracker_app.database.connection import Base, get_db

# Test database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    This ensures tests are isolated and don't affect each other.
    """
    Base.metadata.create_all(bind=engine)
    
    db = TestingSessionLocal()
    
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with the database dependency overridden.
    This is the main fixture that tests will use.
    """
    def override_get_db():
        yield db_session
    
    app.dependency_overrides[get_db] = override_get_db
    
    with TestClient(app) as test_client:
        yield test_client
    
    app.dependency_overrides.clear()


@pytest.fixture
def create_link(client):
    """Helper that creates a link through the API and returns its JSON"""
    def _create(name="promo", tracking_id="campaign-7"):
        response = client.post("/api/links", json={"name": name, "trackingId": tracking_id})
        assert response.status_code == 200
        return response.json()
    return _create
