"""Tests for the Python API client, run against the app in-process."""

import pytest
from fastapi.testclient import TestClient

from oms.client import ApiError, Credentials, OrderManagementClient
from oms.main import app


@pytest.fixture
def api():
    anonymous = OrderManagementClient(http=TestClient(app))
    credentials = anonymous.register("Admin", "admin@example.com", "admin123")
    return anonymous.with_credentials(credentials)


def test_login_returns_new_credentials_without_mutating_client():
    anonymous = OrderManagementClient(http=TestClient(app))
    anonymous.register("Admin", "admin@example.com", "admin123")

    credentials = anonymous.login("admin@example.com", "admin123")

    assert isinstance(credentials, Credentials)
    assert anonymous.credentials is None
    assert anonymous.with_credentials(credentials).profile()["email"] == "admin@example.com"


def test_unauthenticated_call_raises(api):
    anonymous = OrderManagementClient(http=TestClient(app))
    with pytest.raises(ApiError) as exc_info:
        anonymous.list_products()
    assert exc_info.value.status_code == 401
    assert exc_info.value.code == "Unauthorized"


def test_order_flow(api):
    product = api.create_product("Widget", 100.0, stock=5)

    order = api.place_order([{"productId": product["id"], "quantity": 3}], customer_name="Abebe")
    api.update_order_status(order["id"], "completed")

    assert order["orderNumber"] == 1001
    assert api.list_products()[0]["stock"] == 2
    assert api.search_orders("abebe")[0]["id"] == order["id"]
    assert api.get_stats()["totalRevenue"] == 300.0


def test_rejection_surfaces_code(api):
    product = api.create_product("Widget", 100.0, stock=5)

    with pytest.raises(ApiError) as exc_info:
        api.place_order([{"productId": product["id"], "quantity": 10}])

    assert exc_info.value.status_code == 400
    assert exc_info.value.code == "InsufficientStock"
    assert "Available: 5" in exc_info.value.message
