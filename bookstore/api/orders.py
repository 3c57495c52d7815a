"""
Order API endpoints
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from bookstore.database import get_db
from bookstore.models.order import OrderStatus
from bookstore.services.order_service import OrderService
from bookstore.schemas.order import OrderCreate, OrderStatusUpdate, OrderResponse

router = APIRouter(prefix="/api/orders", tags=["orders"])


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    """Dependency to get OrderService instance"""
    return OrderService(db)


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED, summary="Place order")
def create_order(
    order_data: OrderCreate,
    service: OrderService = Depends(get_order_service)
):
    """
    Place a new order

    Process (all-or-nothing):
    1. Validate customer exists
    2. For each line: validate quantity, book and stock, then decrement stock
    3. Calculate total from the current prices
    4. Save order with status PENDING

    Body is either `{"customerId", "items": [{"bookId", "quantity"}]}` or
    `{"customerId", "bookIds": [...], "quantities": [...]}`.
    """
    return service.create_order(order_data)


@router.get("", response_model=List[OrderResponse], summary="Get all orders")
def get_orders(
    order_status: Optional[OrderStatus] = Query(None, alias="status", description="Only orders in this status"),
    skip: int = Query(0, ge=0, description="Number of orders to skip"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of orders to return"),
    service: OrderService = Depends(get_order_service)
):
    """Retrieve all orders with pagination, optionally filtered by status"""
    return service.get_all_orders(status=order_status, skip=skip, limit=limit)


@router.get("/customer/{customer_id}", response_model=List[OrderResponse], summary="Get orders by customer")
def get_customer_orders(customer_id: int, service: OrderService = Depends(get_order_service)):
    """Get all orders of a customer, newest first"""
    return service.get_customer_orders(customer_id)


@router.get("/{order_id}", response_model=OrderResponse, summary="Get order by ID")
def get_order(order_id: int, service: OrderService = Depends(get_order_service)):
    """Retrieve a specific order by ID"""
    return service.get_order_by_id(order_id)


@router.patch("/{order_id}/status", response_model=OrderResponse, summary="Update order status")
def update_order_status(
    order_id: int,
    status_data: OrderStatusUpdate,
    service: OrderService = Depends(get_order_service)
):
    """
    Update order status

    - **status**: PENDING, CONFIRMED, SHIPPED, DELIVERED or CANCELLED
    """
    return service.update_order_status(order_id, status_data.status)
