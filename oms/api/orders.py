"""
Order API endpoints
"""
from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from oms.database import MAX_INTEGER_ID, get_db
from oms.models.user import User
from oms.security import get_current_user
from oms.services.order_service import OrderService
from oms.schemas.common import ApiResponse
from oms.schemas.order import OrderCreate, OrderStatusUpdate, OrderResponse

router = APIRouter(prefix="/orders", tags=["orders"])


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    """Dependency to get OrderService instance"""
    return OrderService(db)


@router.get("", response_model=ApiResponse[List[OrderResponse]], summary="Get all orders")
def get_orders(
    skip: int = Query(0, ge=0, description="Number of orders to skip"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of orders to return"),
    service: OrderService = Depends(get_order_service),
    user: User = Depends(get_current_user)
):
    """
    Retrieve orders, newest order number first
    
    - **skip**: Number of orders to skip (default: 0)
    - **limit**: Maximum number of orders to return (default: 100, max: 1000)
    """
    return {"success": True, "data": service.get_all_orders(skip=skip, limit=limit)}


@router.get("/search", response_model=ApiResponse[List[OrderResponse]], summary="Search orders")
def search_orders(
    q: Optional[str] = Query(None, description="Customer name, product name or order number"),
    service: OrderService = Depends(get_order_service),
    user: User = Depends(get_current_user)
):
    """
    Search orders
    
    - **q**: matched case-insensitively against customer and product names,
      and exactly against the order number when numeric
    """
    return {"success": True, "data": service.search_orders(q)}


@router.get("/{order_id}", response_model=ApiResponse[OrderResponse], summary="Get order by ID")
def get_order(
    order_id: int = Path(..., ge=1, le=MAX_INTEGER_ID),
    service: OrderService = Depends(get_order_service),
    user: User = Depends(get_current_user)
):
    """
    Retrieve a specific order by ID
    
    - **order_id**: Order ID
    """
    return {"success": True, "data": service.get_order_by_id(order_id)}


@router.post(
    "",
    response_model=ApiResponse[OrderResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create order"
)
def create_order(
    order_data: OrderCreate,
    service: OrderService = Depends(get_order_service),
    user: User = Depends(get_current_user)
):
    """
    Place a new order
    
    Process:
    1. Validate every product exists
    2. Check stock availability
    3. Calculate total from current catalog prices
    4. Save order and decrement stock in one transaction
    5. Publish OrderCreated event
    
    - **customerId** or **customerName**: customer (defaults to "Anonymous")
    - **items**: list of {productId, quantity}
    """
    order = service.create_order(order_data, created_by=user.id)
    return {"success": True, "message": "Order created successfully", "data": order}


@router.api_route(
    "/{order_id}/status",
    methods=["PUT", "PATCH"],
    response_model=ApiResponse[OrderResponse],
    summary="Update order status"
)
def update_order_status(
    status_data: OrderStatusUpdate,
    order_id: int = Path(..., ge=1, le=MAX_INTEGER_ID),
    service: OrderService = Depends(get_order_service),
    user: User = Depends(get_current_user)
):
    """
    Update order status
    
    - **order_id**: Order ID
    - **status**: New status (pending, processing, completed, cancelled)
    """
    order = service.update_order_status(order_id, status_data.status)
    return {"success": True, "message": "Order status updated successfully", "data": order}


@router.delete("/{order_id}", response_model=ApiResponse[None], summary="Delete order")
def delete_order(
    order_id: int = Path(..., ge=1, le=MAX_INTEGER_ID),
    service: OrderService = Depends(get_order_service),
    user: User = Depends(get_current_user)
):
    """
    Delete an order
    
    Stock is restored for every line item unless the order was cancelled.
    
    - **order_id**: Order ID
    """
    service.delete_order(order_id)
    return {"success": True, "message": "Order deleted successfully"}
