"""
HTTP Client for the Order Management API

Credentials are explicit values handed to a client instance; logging in
returns new credentials instead of mutating shared state.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx


class ApiError(Exception):
    """Request failed; carries the API's error envelope"""

    def __init__(self, status_code: int, message: str, code: Optional[str] = None):
        super().__init__(f"{status_code} {code or 'Error'}: {message}")
        self.status_code = status_code
        self.message = message
        self.code = code


@dataclass(frozen=True)
class Credentials:
    token: str
    token_type: str = "bearer"

    @property
    def authorization(self) -> str:
        return f"Bearer {self.token}"


class OrderManagementClient:
    """Client for communicating with the Order Management API"""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        credentials: Optional[Credentials] = None,
        http: Optional[httpx.Client] = None,
        timeout: float = 5.0
    ):
        self.base_url = base_url
        self.credentials = credentials
        self.timeout = timeout
        self._http = http or httpx.Client(base_url=base_url, timeout=timeout)

    def with_credentials(self, credentials: Credentials) -> "OrderManagementClient":
        """New client sharing the connection pool but using other credentials"""
        return OrderManagementClient(self.base_url, credentials, self._http, self.timeout)

    def close(self):
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        headers = kwargs.pop("headers", {})
        if self.credentials is not None:
            headers["Authorization"] = self.credentials.authorization

        response = self._http.request(method, path, headers=headers, **kwargs)
        try:
            body = response.json()
        except ValueError:
            raise ApiError(response.status_code, response.text or "Invalid response body")

        if response.is_error or not body.get("success", False):
            raise ApiError(
                response.status_code,
                body.get("error") or body.get("message") or "Request failed",
                body.get("code")
            )
        return body.get("data")

    # Auth

    def login(self, email: str, password: str) -> Credentials:
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        return Credentials(token=data["token"], token_type=data.get("tokenType", "bearer"))

    def register(self, name: str, email: str, password: str) -> Credentials:
        data = self._request(
            "POST", "/auth/register",
            json={"name": name, "email": email, "password": password}
        )
        return Credentials(token=data["token"], token_type=data.get("tokenType", "bearer"))

    def profile(self) -> Dict:
        return self._request("GET", "/auth/profile")

    # Products

    def list_products(self) -> List[Dict]:
        return self._request("GET", "/products")

    def create_product(self, name: str, price: float, stock: int = 0, category: Optional[str] = None) -> Dict:
        payload = {"name": name, "price": price, "stock": stock}
        if category is not None:
            payload["category"] = category
        return self._request("POST", "/products", json=payload)

    def update_product(self, product_id: int, **fields) -> Dict:
        return self._request("PATCH", f"/products/{product_id}", json=fields)

    def delete_product(self, product_id: int) -> None:
        self._request("DELETE", f"/products/{product_id}")

    # Customers

    def list_customers(self) -> List[Dict]:
        return self._request("GET", "/customers")

    def create_customer(self, name: str, email: Optional[str] = None, phone: Optional[str] = None) -> Dict:
        return self._request("POST", "/customers", json={"name": name, "email": email, "phone": phone})

    # Orders

    def list_orders(self) -> List[Dict]:
        return self._request("GET", "/orders")

    def get_order(self, order_id: int) -> Dict:
        return self._request("GET", f"/orders/{order_id}")

    def place_order(
        self,
        items: List[Dict],
        customer_name: Optional[str] = None,
        customer_id: Optional[int] = None
    ) -> Dict:
        """
        Place an order

        Args:
            items: [{"productId": ..., "quantity": ...}, ...]
            customer_name: Inline customer name
            customer_id: Existing customer ID
        """
        payload: Dict[str, Any] = {"items": items}
        if customer_name is not None:
            payload["customerName"] = customer_name
        if customer_id is not None:
            payload["customerId"] = customer_id
        return self._request("POST", "/orders", json=payload)

    def update_order_status(self, order_id: int, status: str) -> Dict:
        return self._request("PATCH", f"/orders/{order_id}/status", json={"status": status})

    def delete_order(self, order_id: int) -> None:
        self._request("DELETE", f"/orders/{order_id}")

    def search_orders(self, query: str) -> List[Dict]:
        return self._request("GET", "/orders/search", params={"q": query})

    # Dashboard

    def get_stats(self) -> Dict:
        return self._request("GET", "/stats")

    def get_notifications(self, limit: int = 50) -> List[Dict]:
        return self._request("GET", "/notifications", params={"limit": limit})
