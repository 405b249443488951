"""
SQLAlchemy Order and OrderItem models
"""
from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from oms.database import Base

ORDER_STATUSES = ('pending', 'processing', 'completed', 'cancelled')


class Order(Base):
    """Order database model"""
    
    __tablename__ = "orders"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    order_number = Column(Integer, nullable=False, unique=True, index=True)
    customer_id = Column(Integer, nullable=True, index=True)
    # Denormalized customer copy
    customer_name = Column(String(255), nullable=False, index=True)
    customer_email = Column(String(255), nullable=True)
    customer_phone = Column(String(50), nullable=True)
    total = Column(Float, nullable=False)
    status = Column(String(50), nullable=False, default='pending', index=True)
    created_by = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
        lazy="selectin"
    )
    
    # Constraints
    __table_args__ = (
        CheckConstraint("status IN ('pending', 'processing', 'completed', 'cancelled')", name='check_status_valid'),
    )
    
    def __repr__(self):
        return f"<Order(id={self.id}, order_number={self.order_number}, total={self.total}, status='{self.status}')>"


class OrderItem(Base):
    """Order line item, a snapshot of the product at order time"""
    
    __tablename__ = "order_items"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    # Not a foreign key: products may be deleted while orders keep their history
    product_id = Column(Integer, nullable=False, index=True)
    product_name = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)
    
    order = relationship("Order", back_populates="items")
    
    __table_args__ = (
        CheckConstraint('quantity > 0', name='check_quantity_positive'),
    )
    
    def __repr__(self):
        return f"<OrderItem(product_id={self.product_id}, quantity={self.quantity}, price={self.price})>"
