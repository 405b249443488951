"""
Product API endpoints
"""
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from typing import List

from oms.database import MAX_INTEGER_ID, get_db
from oms.models.user import User
from oms.security import get_current_user
from oms.services.product_service import ProductService
from oms.schemas.common import ApiResponse
from oms.schemas.product import ProductCreate, ProductUpdate, ProductResponse

router = APIRouter(prefix="/products", tags=["products"])


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """Dependency to get ProductService instance"""
    return ProductService(db)


@router.get("", response_model=ApiResponse[List[ProductResponse]], summary="Get all products")
def get_products(
    skip: int = Query(0, ge=0, description="Number of products to skip"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of products to return"),
    service: ProductService = Depends(get_product_service),
    user: User = Depends(get_current_user)
):
    """
    Retrieve all products with pagination
    
    - **skip**: Number of products to skip (default: 0)
    - **limit**: Maximum number of products to return (default: 100, max: 1000)
    """
    return {"success": True, "data": service.get_all_products(skip=skip, limit=limit)}


@router.get("/{product_id}", response_model=ApiResponse[ProductResponse], summary="Get product by ID")
def get_product(
    product_id: int = Path(..., ge=1, le=MAX_INTEGER_ID),
    service: ProductService = Depends(get_product_service),
    user: User = Depends(get_current_user)
):
    """
    Retrieve a specific product by ID
    
    - **product_id**: Product ID
    """
    return {"success": True, "data": service.get_product_by_id(product_id)}


@router.post(
    "",
    response_model=ApiResponse[ProductResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create product"
)
def create_product(
    product_data: ProductCreate,
    service: ProductService = Depends(get_product_service),
    user: User = Depends(get_current_user)
):
    """
    Create a new product
    
    - **name**: Product name (required)
    - **price**: Product price (required, must be non-negative)
    - **category**: Product category (optional)
    - **stock**: Stock quantity (optional, default 0, must be non-negative)
    """
    product = service.create_product(product_data, created_by=user.id)
    return {"success": True, "message": "Product created successfully", "data": product}


@router.api_route(
    "/{product_id}",
    methods=["PUT", "PATCH"],
    response_model=ApiResponse[ProductResponse],
    summary="Update product"
)
def update_product(
    product_data: ProductUpdate,
    product_id: int = Path(..., ge=1, le=MAX_INTEGER_ID),
    service: ProductService = Depends(get_product_service),
    user: User = Depends(get_current_user)
):
    """
    Update an existing product
    
    All fields are optional. Only provided fields will be updated.
    
    - **product_id**: Product ID
    """
    product = service.update_product(product_id, product_data)
    return {"success": True, "message": "Product updated successfully", "data": product}


@router.delete("/{product_id}", response_model=ApiResponse[None], summary="Delete product")
def delete_product(
    product_id: int = Path(..., ge=1, le=MAX_INTEGER_ID),
    service: ProductService = Depends(get_product_service),
    user: User = Depends(get_current_user)
):
    """
    Delete a product
    
    Orders that reference it keep their item snapshots.
    
    - **product_id**: Product ID
    """
    service.delete_product(product_id)
    return {"success": True, "message": "Product deleted successfully"}
