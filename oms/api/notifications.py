"""
Notification API endpoints
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List

from oms.database import get_db
from oms.models.user import User
from oms.security import get_current_user
from oms.services.notification_service import NotificationService
from oms.schemas.common import ApiResponse
from oms.schemas.notification import NotificationResponse

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=ApiResponse[List[NotificationResponse]], summary="Get notifications")
def get_notifications(
    limit: int = Query(50, ge=1, le=500, description="Maximum number of notifications to return"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    """Newest notifications first"""
    return {"success": True, "data": NotificationService(db).get_notifications(limit=limit)}
