"""
Pydantic schemas for orders
"""
from pydantic import Field, field_validator
from typing import List, Literal, Optional, Union
from datetime import datetime

from oms.database import MAX_INTEGER_ID
from oms.schemas.common import CamelModel

OrderStatus = Literal['pending', 'processing', 'completed', 'cancelled']


class OrderItemCreate(CamelModel):
    """A requested line item"""
    product_id: Union[int, str] = Field(..., description="Product ID")
    quantity: int = Field(1, ge=1, description="Quantity to order")


class OrderCreate(CamelModel):
    """
    Schema for placing a new order

    Either customer_id (an existing customer) or an inline customer_name may
    be given. With neither the order is placed for "Anonymous".
    """
    customer_id: Optional[int] = Field(None, ge=1, le=MAX_INTEGER_ID, description="Existing customer ID")
    customer_name: Optional[str] = Field(None, max_length=255, description="Customer name")
    customer_email: Optional[str] = Field(None, max_length=255)
    customer_phone: Optional[str] = Field(None, max_length=50)
    items: List[OrderItemCreate] = Field(..., min_length=1, description="Line items")

    @field_validator("customer_name")
    @classmethod
    def strip_name(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class OrderStatusUpdate(CamelModel):
    """Schema for updating order status"""
    status: OrderStatus = Field(..., description="Order status")


class OrderItemResponse(CamelModel):
    product_id: int
    product_name: str
    quantity: int
    price: float


class OrderResponse(CamelModel):
    """Schema for order response"""
    id: int
    order_number: int
    customer_id: Optional[int]
    customer_name: str
    customer_email: Optional[str]
    customer_phone: Optional[str]
    items: List[OrderItemResponse]
    total: float
    status: OrderStatus
    created_at: datetime
    updated_at: datetime


class OrderEvent(CamelModel):
    """Schema for order events published to the broker"""
    event_type: str
    event_id: str
    event_version: str = "1.0"
    timestamp: str
    source: str
    data: dict
