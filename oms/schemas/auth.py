"""
Pydantic schemas for authentication
"""
from pydantic import EmailStr, Field
from datetime import datetime

from oms.schemas.common import CamelModel


class UserCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    id: int
    name: str
    email: str
    created_at: datetime


class TokenResponse(CamelModel):
    token: str
    token_type: str = "bearer"
    user: UserResponse
