"""
Pydantic schemas for products
"""
from pydantic import Field
from typing import Optional
from datetime import datetime

from oms.schemas.common import CamelModel


class ProductBase(CamelModel):
    """Base Product schema with common fields"""
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    price: float = Field(..., ge=0, description="Unit price (non-negative)")
    category: Optional[str] = Field(None, max_length=100, description="Product category")
    stock: int = Field(0, ge=0, description="Stock quantity (non-negative)")


class ProductCreate(ProductBase):
    """Schema for creating a new product"""
    pass


class ProductUpdate(CamelModel):
    """Schema for updating a product (all fields optional)"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    price: Optional[float] = Field(None, ge=0)
    category: Optional[str] = Field(None, max_length=100)
    stock: Optional[int] = Field(None, ge=0)


class ProductResponse(ProductBase):
    """Schema for product response"""
    id: int
    created_at: datetime
    updated_at: datetime
