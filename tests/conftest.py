"""Pytest fixtures for Order Management tests."""

import os

# Settings are read at import time, so configure before importing oms
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["EVENTS_ENABLED"] = "false"
os.environ["SEED_SAMPLE_DATA"] = "false"

import pytest
from fastapi.testclient import TestClient

from oms.database import SessionLocal, drop_db, init_db
from oms.main import app
from oms.models.product import Product


class RecordingPublisher:
    """Stands in for the broker publisher and keeps what was published."""

    def __init__(self):
        self.created = []
        self.status_changed = []

    def publish_order_created(self, order_data):
        self.created.append(order_data)
        return True

    def publish_order_status_changed(self, order_data):
        self.status_changed.append(order_data)
        return True


@pytest.fixture(autouse=True)
def schema():
    """Fresh tables for every test."""
    init_db()
    yield
    drop_db()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
def add_product(db):
    """Insert a product directly and return it."""

    def _add(name="Widget", price=100.0, stock=5, category=None):
        product = Product(name=name, price=price, stock=stock, category=category)
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _add


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def auth_client(client):
    """Client carrying a bearer token for a freshly registered user."""
    response = client.post(
        "/auth/register",
        json={"name": "Tester", "email": "tester@example.com", "password": "secret123"},
    )
    assert response.status_code == 201
    token = response.json()["data"]["token"]
    client.headers["Authorization"] = f"Bearer {token}"
    return client


@pytest.fixture
def create_product(auth_client):
    """Create a product through the API and return its JSON."""

    def _create(name="Widget", price=100.0, stock=5, category=None):
        payload = {"name": name, "price": price, "stock": stock}
        if category is not None:
            payload["category"] = category
        response = auth_client.post("/products", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create
