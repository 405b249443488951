"""
Models package
"""
from oms.models.product import Product
from oms.models.customer import Customer
from oms.models.order import Order, OrderItem, ORDER_STATUSES
from oms.models.notification import Notification
from oms.models.user import User

__all__ = [
    "Product",
    "Customer",
    "Order",
    "OrderItem",
    "ORDER_STATUSES",
    "Notification",
    "User"
]
