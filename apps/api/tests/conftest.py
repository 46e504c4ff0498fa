"""Pytest configuration and fixtures."""

import os

# Point the application at a throwaway database before anything imports settings
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from apps.api.database import Base, get_db
from apps.api.main import app

VALID_SURVEY = {
    "customerName": "Jane Doe",
    "location": "Downtown",
    "foodQuality": "Highly Satisfied",
    "serviceSpeed": "Satisfied",
    "staffFriendliness": "Satisfied",
    "cleanliness": "Neutral",
    "valueForMoney": "Satisfied",
    "ambiance": "Highly Satisfied",
    "overallRating": 4.5,
    "comments": "Lovely evening.",
}


@pytest.fixture
def test_db():
    """Create test database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def client(test_db):
    """Create test client."""

    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def survey_payload():
    """A fresh copy of a valid survey submission."""
    return dict(VALID_SURVEY)


@pytest.fixture
def submit(client, survey_payload):
    """Submit a survey, overriding fields of the valid payload."""

    def _submit(**overrides):
        response = client.post("/api/survey", json={**survey_payload, **overrides})
        assert response.status_code == 200, response.text
        return response

    return _submit
