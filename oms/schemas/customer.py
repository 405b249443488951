"""
Pydantic schemas for customers
"""
from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime

from oms.schemas.common import CamelModel


class CustomerBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255, description="Customer name")
    email: Optional[EmailStr] = Field(None, description="Customer email address")
    phone: Optional[str] = Field(None, max_length=50, description="Customer phone number")


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)


class CustomerResponse(CamelModel):
    id: int
    name: str
    email: Optional[str]
    phone: Optional[str]
    created_at: datetime
