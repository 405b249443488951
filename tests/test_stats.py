"""Tests for the dashboard stats."""


def place(client, product_id, quantity=1):
    return client.post(
        "/orders", json={"items": [{"productId": product_id, "quantity": quantity}]}
    ).json()["data"]


def test_empty_stats(auth_client):
    response = auth_client.get("/stats")

    assert response.status_code == 200
    assert response.json()["data"] == {
        "totalOrders": 0,
        "totalProducts": 0,
        "totalCustomers": 0,
        "totalRevenue": 0.0,
    }


def test_revenue_counts_only_completed_orders(auth_client, create_product):
    product = create_product(price=10.005, stock=100)
    auth_client.post("/customers", json={"name": "Abebe"})
    first = place(auth_client, product["id"], 2)
    second = place(auth_client, product["id"], 1)
    third = place(auth_client, product["id"], 5)
    auth_client.put(f"/orders/{first['id']}/status", json={"status": "completed"})
    auth_client.put(f"/orders/{second['id']}/status", json={"status": "completed"})
    auth_client.put(f"/orders/{third['id']}/status", json={"status": "cancelled"})

    data = auth_client.get("/stats").json()["data"]

    assert data["totalOrders"] == 3
    assert data["totalProducts"] == 1
    assert data["totalCustomers"] == 1
    assert data["totalRevenue"] == round(first["total"] + second["total"], 2)


def test_stats_require_authentication(client):
    assert client.get("/stats").status_code == 401
