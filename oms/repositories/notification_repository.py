"""
Notification Repository - Data Access Layer
"""
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import desc

from oms.models.notification import Notification


class NotificationRepository:
    """Repository for the notification feed"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_recent(self, limit: int = 50) -> List[Notification]:
        """Newest notifications first"""
        return self.db.query(Notification).order_by(
            desc(Notification.id)
        ).limit(limit).all()
    
    def add(self, message: str, type_: str = "info") -> Notification:
        """Stage a notification. Does not commit."""
        notification = Notification(message=message, type=type_)
        self.db.add(notification)
        self.db.flush()
        return notification
