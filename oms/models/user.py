"""
SQLAlchemy User model
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from oms.database import Base


class User(Base):
    """Admin user able to log in to the dashboard"""
    
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    hashed_password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    
    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
