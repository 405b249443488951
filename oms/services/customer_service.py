"""
Customer Service - Business Logic Layer
"""
from typing import List
from sqlalchemy.orm import Session

from oms.errors import DuplicateCustomerError, NotFoundError, ValidationError
from oms.observability import get_logger
from oms.repositories.customer_repository import CustomerRepository
from oms.schemas.customer import CustomerCreate, CustomerUpdate, CustomerResponse

logger = get_logger(__name__)


class CustomerService:
    """
    Service layer for the customer directory
    
    Duplicates are rejected on create and update: a customer may not share
    an email, or a case-insensitive name, with another customer. Deleting a
    customer is unconditional since orders carry their own customer copy.
    """
    
    def __init__(self, db: Session):
        self.repository = CustomerRepository(db)
    
    def get_all_customers(self, skip: int = 0, limit: int = 100) -> List[CustomerResponse]:
        customers = self.repository.get_all(skip=skip, limit=limit)
        return [CustomerResponse.model_validate(c) for c in customers]
    
    def get_customer_by_id(self, customer_id: int) -> CustomerResponse:
        customer = self.repository.get_by_id(customer_id)
        if not customer:
            raise NotFoundError(f"Customer not found: {customer_id}")
        return CustomerResponse.model_validate(customer)
    
    def create_customer(self, customer_data: CustomerCreate) -> CustomerResponse:
        data = customer_data.model_dump()
        data["name"] = data["name"].strip()
        if not data["name"]:
            raise ValidationError("Customer name is required")
        
        if self.repository.find_duplicate(data["name"], data.get("email")):
            raise DuplicateCustomerError()
        
        customer = self.repository.create(data)
        logger.info("customer_created", customer_id=customer.id)
        return CustomerResponse.model_validate(customer)
    
    def update_customer(self, customer_id: int, customer_data: CustomerUpdate) -> CustomerResponse:
        update_data = customer_data.model_dump(exclude_unset=True)
        if "name" in update_data:
            name = (update_data["name"] or "").strip()
            if not name:
                raise ValidationError("Customer name is required")
            update_data["name"] = name
        
        current = self.repository.get_by_id(customer_id)
        if not current:
            raise NotFoundError(f"Customer not found: {customer_id}")
        
        name = update_data.get("name", current.name)
        email = update_data.get("email", current.email)
        if self.repository.find_duplicate(name, email, exclude_id=customer_id):
            raise DuplicateCustomerError()
        
        customer = self.repository.update(customer_id, update_data)
        logger.info("customer_updated", customer_id=customer_id, fields=sorted(update_data))
        return CustomerResponse.model_validate(customer)
    
    def delete_customer(self, customer_id: int) -> None:
        if not self.repository.delete(customer_id):
            raise NotFoundError(f"Customer not found: {customer_id}")
        logger.info("customer_deleted", customer_id=customer_id)
