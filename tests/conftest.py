"""
pytest configuration and fixtures
The application runs against an in-memory collection; no MongoDB server is needed.
"""

import pytest
from fastapi.testclient import TestClient

from fakes import FakeCollection, FakeConnector
from pizzagoland.app import create_app


@pytest.fixture
def collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def connector(collection) -> FakeConnector:
    return FakeConnector(collection)


@pytest.fixture
def client(connector):
    """TestClient running the app lifespan against the fake connector"""
    app = create_app(connector=connector)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def created_user(client):
    """Add a user through the API and return (id, payload)"""
    payload = {"name": "Mario", "age": 35}
    response = client.post("/add_user", json=payload)
    assert response.status_code == 201, f"User creation failed: {response.text}"
    return response.json(), payload
