"""
Pydantic schemas for dashboard stats
"""
from oms.schemas.common import CamelModel


class StatsResponse(CamelModel):
    total_orders: int
    total_products: int
    total_customers: int
    total_revenue: float
