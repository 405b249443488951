"""
Notification Service - activity feed
"""
from typing import List
from sqlalchemy.orm import Session

from oms.repositories.notification_repository import NotificationRepository
from oms.schemas.notification import NotificationResponse


class NotificationService:
    """Reads the feed written by catalog and order operations"""
    
    def __init__(self, db: Session):
        self.repository = NotificationRepository(db)
    
    def get_notifications(self, limit: int = 50) -> List[NotificationResponse]:
        return [NotificationResponse.model_validate(n) for n in self.repository.get_recent(limit)]
