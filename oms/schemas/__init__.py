"""
Schemas package
"""
from oms.schemas.common import ApiResponse, ErrorResponse
from oms.schemas.product import ProductCreate, ProductUpdate, ProductResponse
from oms.schemas.customer import CustomerCreate, CustomerUpdate, CustomerResponse
from oms.schemas.order import (
    OrderItemCreate,
    OrderCreate,
    OrderStatusUpdate,
    OrderItemResponse,
    OrderResponse,
    OrderEvent
)
from oms.schemas.notification import NotificationResponse
from oms.schemas.stats import StatsResponse
from oms.schemas.auth import UserCreate, UserLogin, UserResponse, TokenResponse

__all__ = [
    "ApiResponse",
    "ErrorResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "CustomerCreate",
    "CustomerUpdate",
    "CustomerResponse",
    "OrderItemCreate",
    "OrderCreate",
    "OrderStatusUpdate",
    "OrderItemResponse",
    "OrderResponse",
    "OrderEvent",
    "NotificationResponse",
    "StatsResponse",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "TokenResponse"
]
