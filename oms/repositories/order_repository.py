"""
Order Repository - Data Access Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import desc, func, or_

from oms.database import MAX_INTEGER_ID
from oms.models.order import Order, OrderItem


class OrderRepository:
    """Repository for Order CRUD operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all(self, skip: int = 0, limit: int = 100) -> List[Order]:
        """Get all orders, newest order number first"""
        return self.db.query(Order).order_by(
            desc(Order.order_number)
        ).offset(skip).limit(limit).all()
    
    def get_by_id(self, order_id: int) -> Optional[Order]:
        """Get order by ID"""
        return self.db.query(Order).filter(Order.id == order_id).first()
    
    def search(self, query: str) -> List[Order]:
        """
        Search orders by customer name, item product name or order number
        
        Name matches are case-insensitive substrings; the order number must
        match exactly and is only tried when the query is numeric.
        """
        conditions = [
            Order.customer_name.icontains(query, autoescape=True),
            Order.items.any(OrderItem.product_name.icontains(query, autoescape=True)),
        ]
        digits = query.isascii() and query.isdecimal() and len(query) <= len(str(MAX_INTEGER_ID))
        if digits and int(query) <= MAX_INTEGER_ID:
            conditions.append(Order.order_number == int(query))
        
        return self.db.query(Order).filter(
            or_(*conditions)
        ).order_by(desc(Order.order_number)).all()
    
    def max_order_number(self) -> Optional[int]:
        """Highest order number allocated so far, None for an empty ledger"""
        return self.db.query(func.max(Order.order_number)).scalar()
    
    def add(self, order: Order) -> Order:
        """Stage a new order with its items. Does not commit."""
        self.db.add(order)
        self.db.flush()
        return order
    
    def update_status(self, order: Order, new_status: str, updated_at) -> Order:
        """Update order status"""
        order.status = new_status
        order.updated_at = updated_at
        self.db.commit()
        self.db.refresh(order)
        return order
    
    def remove(self, order: Order) -> None:
        """Stage an order deletion. Does not commit."""
        self.db.delete(order)
        self.db.flush()
    
    def count(self) -> int:
        """Get total count of orders"""
        return self.db.query(Order).count()
    
    def revenue_by_status(self, status: str) -> float:
        """Sum of order totals with the given status"""
        return self.db.query(
            func.coalesce(func.sum(Order.total), 0.0)
        ).filter(Order.status == status).scalar()
