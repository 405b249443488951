"""
Repositories package
"""
from oms.repositories.product_repository import ProductRepository
from oms.repositories.customer_repository import CustomerRepository
from oms.repositories.order_repository import OrderRepository
from oms.repositories.notification_repository import NotificationRepository
from oms.repositories.user_repository import UserRepository

__all__ = [
    "ProductRepository",
    "CustomerRepository",
    "OrderRepository",
    "NotificationRepository",
    "UserRepository"
]
