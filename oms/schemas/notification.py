"""
Pydantic schemas for notifications
"""
from datetime import datetime

from oms.schemas.common import CamelModel


class NotificationResponse(CamelModel):
    id: int
    message: str
    type: str
    time: datetime
