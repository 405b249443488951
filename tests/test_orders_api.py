"""Tests for the order endpoints."""

import pytest

from oms.services.order_service import OrderService


def place_order(client, items, **extra):
    return client.post("/orders", json={"items": items, **extra})


def product_stock(client, product_id):
    return client.get(f"/products/{product_id}").json()["data"]["stock"]


class TestCreateOrder:
    def test_scenario_abebe(self, auth_client, create_product):
        p1 = create_product(price=100.0, stock=5)

        response = place_order(
            auth_client, [{"productId": p1["id"], "quantity": 3}], customerName="Abebe"
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["total"] == 300.0
        assert body["data"]["orderNumber"] == 1001
        assert body["data"]["status"] == "pending"
        assert body["data"]["items"][0]["productName"] == "Widget"
        assert body["data"]["items"][0]["price"] == 100.0
        assert product_stock(auth_client, p1["id"]) == 2

    def test_insufficient_stock(self, auth_client, create_product):
        p1 = create_product(price=100.0, stock=5)

        response = place_order(auth_client, [{"productId": p1["id"], "quantity": 10}])

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["code"] == "InsufficientStock"
        assert "Available: 5" in body["error"]
        assert product_stock(auth_client, p1["id"]) == 5
        assert auth_client.get("/orders").json()["data"] == []

    def test_ghost_product(self, auth_client):
        response = place_order(auth_client, [{"productId": "ghost"}])

        assert response.status_code == 400
        assert response.json()["code"] == "ProductNotFound"
        assert "ghost" in response.json()["error"]
        assert auth_client.get("/orders").json()["data"] == []

    @pytest.mark.parametrize("product_id", ["²", "99999999999999999999", 99999999999999999999])
    def test_unusable_product_id(self, auth_client, create_product, product_id):
        create_product()

        response = place_order(auth_client, [{"productId": product_id}])

        assert response.status_code == 400
        assert response.json()["code"] == "ProductNotFound"

    def test_customer_id_out_of_range(self, auth_client, create_product):
        p1 = create_product()
        response = place_order(auth_client, [{"productId": p1["id"]}], customerId=99999999999999999999)
        assert response.status_code == 400
        assert response.json()["code"] == "ValidationError"

    def test_order_number_collision_is_conflict(self, auth_client, create_product, monkeypatch):
        p1 = create_product(stock=5)
        assert place_order(auth_client, [{"productId": p1["id"]}]).status_code == 201
        monkeypatch.setattr(OrderService, "_next_order_number", lambda self: 1001)

        response = place_order(auth_client, [{"productId": p1["id"], "quantity": 2}])

        assert response.status_code == 409
        assert response.json()["success"] is False
        assert response.json()["code"] == "Conflict"
        assert len(auth_client.get("/orders").json()["data"]) == 1
        assert product_stock(auth_client, p1["id"]) == 4

    def test_empty_items_rejected(self, auth_client):
        response = place_order(auth_client, [], customerName="Abebe")
        assert response.status_code == 400
        assert response.json()["code"] == "ValidationError"

    def test_zero_quantity_rejected(self, auth_client, create_product):
        p1 = create_product()
        response = place_order(auth_client, [{"productId": p1["id"], "quantity": 0}])
        assert response.status_code == 400
        assert response.json()["code"] == "ValidationError"

    def test_unknown_customer_id(self, auth_client, create_product):
        p1 = create_product()
        response = place_order(auth_client, [{"productId": p1["id"]}], customerId=999)
        assert response.status_code == 400
        assert response.json()["code"] == "CustomerNotFound"

    def test_requires_authentication(self, client):
        response = place_order(client, [{"productId": 1, "quantity": 1}])
        assert response.status_code == 401
        assert response.json()["code"] == "Unauthorized"


class TestListAndGetOrders:
    def test_list_newest_order_number_first(self, auth_client, create_product):
        p1 = create_product(stock=10)
        for name in ("A", "B", "C"):
            place_order(auth_client, [{"productId": p1["id"]}], customerName=name)

        numbers = [o["orderNumber"] for o in auth_client.get("/orders").json()["data"]]

        assert numbers == [1003, 1002, 1001]

    def test_get_by_id(self, auth_client, create_product):
        p1 = create_product()
        created = place_order(auth_client, [{"productId": p1["id"]}]).json()["data"]

        response = auth_client.get(f"/orders/{created['id']}")

        assert response.status_code == 200
        assert response.json()["data"]["orderNumber"] == created["orderNumber"]

    def test_get_missing_order(self, auth_client):
        response = auth_client.get("/orders/12345")
        assert response.status_code == 404
        assert response.json()["code"] == "OrderNotFound"

    @pytest.mark.parametrize("order_id", ["99999999999999999999", "0"])
    def test_order_id_out_of_range(self, auth_client, order_id):
        response = auth_client.get(f"/orders/{order_id}")
        assert response.status_code == 400
        assert response.json()["code"] == "ValidationError"


class TestOrderStatus:
    @pytest.fixture
    def order(self, auth_client, create_product):
        p1 = create_product(stock=10)
        return place_order(auth_client, [{"productId": p1["id"], "quantity": 2}]).json()["data"]

    @pytest.mark.parametrize("method", ["put", "patch"])
    def test_update_status(self, auth_client, order, method):
        response = getattr(auth_client, method)(
            f"/orders/{order['id']}/status", json={"status": "processing"}
        )
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "processing"

    def test_any_transition_allowed(self, auth_client, order):
        for status in ("completed", "pending", "cancelled", "processing"):
            response = auth_client.put(f"/orders/{order['id']}/status", json={"status": status})
            assert response.status_code == 200
            assert response.json()["data"]["status"] == status

    def test_invalid_status(self, auth_client, order):
        response = auth_client.put(f"/orders/{order['id']}/status", json={"status": "shipped"})
        assert response.status_code == 400
        assert response.json()["code"] == "ValidationError"

    def test_missing_order(self, auth_client):
        response = auth_client.put("/orders/999/status", json={"status": "completed"})
        assert response.status_code == 404
        assert response.json()["code"] == "OrderNotFound"


class TestDeleteOrder:
    def test_delete_restores_stock(self, auth_client, create_product):
        p1 = create_product(stock=10)
        order = place_order(auth_client, [{"productId": p1["id"], "quantity": 4}]).json()["data"]
        assert product_stock(auth_client, p1["id"]) == 6

        response = auth_client.delete(f"/orders/{order['id']}")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert product_stock(auth_client, p1["id"]) == 10
        assert auth_client.get(f"/orders/{order['id']}").status_code == 404

    def test_delete_cancelled_order_keeps_stock(self, auth_client, create_product):
        p1 = create_product(stock=10)
        order = place_order(auth_client, [{"productId": p1["id"], "quantity": 4}]).json()["data"]
        auth_client.put(f"/orders/{order['id']}/status", json={"status": "cancelled"})

        auth_client.delete(f"/orders/{order['id']}")

        assert product_stock(auth_client, p1["id"]) == 6

    def test_delete_after_product_removed(self, auth_client, create_product):
        p1 = create_product(stock=10)
        order = place_order(auth_client, [{"productId": p1["id"], "quantity": 1}]).json()["data"]
        auth_client.delete(f"/products/{p1['id']}")

        response = auth_client.delete(f"/orders/{order['id']}")

        assert response.status_code == 200

    def test_delete_missing_order(self, auth_client):
        response = auth_client.delete("/orders/999")
        assert response.status_code == 404
        assert response.json()["code"] == "OrderNotFound"


class TestSearchOrders:
    @pytest.fixture(autouse=True)
    def orders(self, auth_client, create_product):
        laptop = create_product(name="Laptop", stock=10)
        pen = create_product(name="Pen", stock=10)
        place_order(auth_client, [{"productId": laptop["id"]}], customerName="Abebe Bikila")
        place_order(auth_client, [{"productId": pen["id"]}], customerName="Jane Smith")

    def search(self, client, q):
        return [o["orderNumber"] for o in client.get("/orders/search", params={"q": q}).json()["data"]]

    def test_by_customer_name_case_insensitive(self, auth_client):
        assert self.search(auth_client, "abebe") == [1001]

    def test_by_product_name(self, auth_client):
        assert self.search(auth_client, "PEN") == [1002]

    def test_by_order_number(self, auth_client):
        assert self.search(auth_client, "1002") == [1002]

    def test_no_match(self, auth_client):
        assert self.search(auth_client, "nothing") == []

    def test_wildcards_are_literal(self, auth_client):
        assert self.search(auth_client, "%") == []

    @pytest.mark.parametrize("q", ["²", "99999999999999999999", "9" * 5000])
    def test_non_order_number_digits(self, auth_client, q):
        response = auth_client.get("/orders/search", params={"q": q})
        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_query_required(self, auth_client):
        response = auth_client.get("/orders/search")
        assert response.status_code == 400
        assert response.json()["error"] == "Search query is required"
