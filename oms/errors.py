"""
Domain exceptions

Raised by the service layer when a business rule is violated. Each carries
the HTTP status and machine-readable code the API layer responds with.
"""
from typing import Optional


class OrderManagementError(Exception):
    """Base exception for Order Management errors"""
    status_code = 500
    code = "InternalError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(OrderManagementError):
    """Bad or missing required field"""
    status_code = 400
    code = "ValidationError"


class NotFoundError(OrderManagementError):
    """Entity id does not resolve"""
    status_code = 404
    code = "NotFound"


class OrderNotFoundError(NotFoundError):
    code = "OrderNotFound"

    def __init__(self, order_id):
        super().__init__(f"Order not found: {order_id}")
        self.order_id = order_id


class ProductNotFoundError(ValidationError):
    """An order item references an unknown product"""
    code = "ProductNotFound"

    def __init__(self, product_id):
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


class CustomerNotFoundError(ValidationError):
    """An order references an unknown customer id"""
    code = "CustomerNotFound"

    def __init__(self, customer_id):
        super().__init__(f"Customer not found: {customer_id}")
        self.customer_id = customer_id


class InsufficientStockError(ValidationError):
    """Requested quantity exceeds available stock"""
    code = "InsufficientStock"

    def __init__(self, product_name: str, available: int, product_id: Optional[int] = None):
        super().__init__(f"Insufficient stock for {product_name}. Available: {available}")
        self.product_name = product_name
        self.available = available
        self.product_id = product_id


class DuplicateCustomerError(ValidationError):
    code = "DuplicateCustomer"

    def __init__(self, message: str = "Customer with this name or email already exists"):
        super().__init__(message)


class ConflictError(OrderManagementError):
    """Concurrent write collided with another request"""
    status_code = 409
    code = "Conflict"


class UnauthorizedError(OrderManagementError):
    status_code = 401
    code = "Unauthorized"


class SessionExpiredError(UnauthorizedError):
    code = "SessionExpired"

    def __init__(self, message: str = "Session expired, please log in again"):
        super().__init__(message)
