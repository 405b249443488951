"""
Customer API endpoints
"""
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from typing import List

from oms.database import MAX_INTEGER_ID, get_db
from oms.models.user import User
from oms.security import get_current_user
from oms.services.customer_service import CustomerService
from oms.schemas.common import ApiResponse
from oms.schemas.customer import CustomerCreate, CustomerUpdate, CustomerResponse

router = APIRouter(prefix="/customers", tags=["customers"])


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    """Dependency to get CustomerService instance"""
    return CustomerService(db)


@router.get("", response_model=ApiResponse[List[CustomerResponse]], summary="Get all customers")
def get_customers(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    service: CustomerService = Depends(get_customer_service),
    user: User = Depends(get_current_user)
):
    return {"success": True, "data": service.get_all_customers(skip=skip, limit=limit)}


@router.get("/{customer_id}", response_model=ApiResponse[CustomerResponse], summary="Get customer by ID")
def get_customer(
    customer_id: int = Path(..., ge=1, le=MAX_INTEGER_ID),
    service: CustomerService = Depends(get_customer_service),
    user: User = Depends(get_current_user)
):
    return {"success": True, "data": service.get_customer_by_id(customer_id)}


@router.post(
    "",
    response_model=ApiResponse[CustomerResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create customer"
)
def create_customer(
    customer_data: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
    user: User = Depends(get_current_user)
):
    """
    Create a new customer
    
    Rejected when another customer has the same email or, ignoring case,
    the same name.
    
    - **name**: Customer name (required)
    - **email**: Customer email (optional)
    - **phone**: Customer phone (optional)
    """
    customer = service.create_customer(customer_data)
    return {"success": True, "message": "Customer created successfully", "data": customer}


@router.api_route(
    "/{customer_id}",
    methods=["PUT", "PATCH"],
    response_model=ApiResponse[CustomerResponse],
    summary="Update customer"
)
def update_customer(
    customer_data: CustomerUpdate,
    customer_id: int = Path(..., ge=1, le=MAX_INTEGER_ID),
    service: CustomerService = Depends(get_customer_service),
    user: User = Depends(get_current_user)
):
    customer = service.update_customer(customer_id, customer_data)
    return {"success": True, "message": "Customer updated successfully", "data": customer}


@router.delete("/{customer_id}", response_model=ApiResponse[None], summary="Delete customer")
def delete_customer(
    customer_id: int = Path(..., ge=1, le=MAX_INTEGER_ID),
    service: CustomerService = Depends(get_customer_service),
    user: User = Depends(get_current_user)
):
    service.delete_customer(customer_id)
    return {"success": True, "message": "Customer deleted successfully"}
