"""
Customer Repository - Data Access Layer
"""
from typing import Dict, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import func, or_

from oms.models.customer import Customer


class CustomerRepository:
    """Repository for Customer CRUD operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all(self, skip: int = 0, limit: int = 100) -> List[Customer]:
        return self.db.query(Customer).order_by(Customer.id).offset(skip).limit(limit).all()
    
    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        return self.db.query(Customer).filter(Customer.id == customer_id).first()
    
    def find_duplicate(
        self,
        name: str,
        email: Optional[str] = None,
        exclude_id: Optional[int] = None
    ) -> Optional[Customer]:
        """Find a customer with the same email or the same name ignoring case"""
        conditions = [func.lower(Customer.name) == name.lower()]
        if email:
            conditions.append(Customer.email == email)
        
        query = self.db.query(Customer).filter(or_(*conditions))
        if exclude_id is not None:
            query = query.filter(Customer.id != exclude_id)
        return query.first()
    
    def create(self, customer_data: Dict) -> Customer:
        customer = Customer(**customer_data)
        self.db.add(customer)
        self.db.commit()
        self.db.refresh(customer)
        return customer
    
    def update(self, customer_id: int, update_data: Dict) -> Optional[Customer]:
        customer = self.get_by_id(customer_id)
        if not customer:
            return None
        
        for field, value in update_data.items():
            setattr(customer, field, value)
        
        self.db.commit()
        self.db.refresh(customer)
        return customer
    
    def delete(self, customer_id: int) -> bool:
        customer = self.get_by_id(customer_id)
        if not customer:
            return False
        
        self.db.delete(customer)
        self.db.commit()
        return True
    
    def count(self) -> int:
        return self.db.query(Customer).count()
