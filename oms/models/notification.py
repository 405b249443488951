"""
SQLAlchemy Notification model
"""
from sqlalchemy import CheckConstraint, Column, Integer, String, DateTime
from sqlalchemy.sql import func
from oms.database import Base

NOTIFICATION_TYPES = ('info', 'success', 'warning')


class Notification(Base):
    """Activity feed entry"""
    
    __tablename__ = "notifications"
    __table_args__ = (
        CheckConstraint(
            "type IN (" + ", ".join(f"'{t}'" for t in NOTIFICATION_TYPES) + ")",
            name="check_notification_type_valid"
        ),
    )
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    message = Column(String(500), nullable=False)
    type = Column(String(20), nullable=False, default='info')
    time = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    
    def __repr__(self):
        return f"<Notification(id={self.id}, type='{self.type}', message='{self.message}')>"
