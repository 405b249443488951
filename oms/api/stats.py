"""
Dashboard stats endpoint
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from oms.database import get_db
from oms.models.user import User
from oms.security import get_current_user
from oms.services.stats_service import StatsService
from oms.schemas.common import ApiResponse
from oms.schemas.stats import StatsResponse

router = APIRouter(tags=["stats"])


@router.get("/stats", response_model=ApiResponse[StatsResponse], summary="Dashboard stats")
def get_stats(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    """
    Counts of orders, products and customers, and revenue from completed orders
    """
    return {"success": True, "data": StatsService(db).get_stats()}
