"""
Services package
"""
from oms.services.product_service import ProductService
from oms.services.customer_service import CustomerService
from oms.services.order_service import OrderService
from oms.services.stats_service import StatsService
from oms.services.notification_service import NotificationService
from oms.services.auth_service import AuthService

__all__ = [
    "ProductService",
    "CustomerService",
    "OrderService",
    "StatsService",
    "NotificationService",
    "AuthService"
]
