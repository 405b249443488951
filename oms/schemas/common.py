"""
Shared schema configuration and the response envelope
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema exposing camelCase field names while accepting snake_case too"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )


class ApiResponse(CamelModel, Generic[T]):
    """Envelope wrapping every successful response"""
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None


class ErrorResponse(CamelModel):
    """Envelope for failed requests"""
    success: bool = False
    error: str
    code: str
