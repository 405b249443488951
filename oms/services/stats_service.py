"""
Stats Service - dashboard aggregates
"""
from sqlalchemy.orm import Session

from oms.repositories.customer_repository import CustomerRepository
from oms.repositories.order_repository import OrderRepository
from oms.repositories.product_repository import ProductRepository
from oms.schemas.stats import StatsResponse


class StatsService:
    """Read-only aggregation recomputed on every call"""
    
    def __init__(self, db: Session):
        self.orders = OrderRepository(db)
        self.products = ProductRepository(db)
        self.customers = CustomerRepository(db)
    
    def get_stats(self) -> StatsResponse:
        revenue = self.orders.revenue_by_status('completed') or 0.0
        return StatsResponse(
            total_orders=self.orders.count(),
            total_products=self.products.count(),
            total_customers=self.customers.count(),
            total_revenue=round(float(revenue), 2)
        )
