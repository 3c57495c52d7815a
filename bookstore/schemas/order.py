"""
Pydantic schemas for order request/response validation
"""
from pydantic import Field
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

from bookstore.models.order import OrderStatus
from bookstore.schemas.base import CamelModel


class OrderItemRequest(CamelModel):
    """One requested line: a book and how many copies"""
    book_id: int = Field(..., description="Book ID")
    quantity: int = Field(..., description="Quantity to order")


class OrderCreate(CamelModel):
    """
    Schema for placing an order

    Lines are given either as ``items`` or as parallel ``bookIds`` /
    ``quantities`` arrays.
    """
    customer_id: int = Field(..., description="Customer ID")
    items: Optional[List[OrderItemRequest]] = Field(None, description="Ordered lines")
    book_ids: Optional[List[int]] = Field(None, description="Book IDs, parallel to quantities")
    quantities: Optional[List[int]] = Field(None, description="Quantities, parallel to bookIds")
    shipping_address: Optional[str] = Field(
        None,
        max_length=200,
        description="Shipping address (defaults to the customer's address)"
    )


class OrderStatusUpdate(CamelModel):
    """Schema for updating order status"""
    status: OrderStatus = Field(..., description="Order status")


class OrderItemResponse(CamelModel):
    """Schema for an order line in responses"""
    book_id: int
    book_title: str
    quantity: int
    price: Decimal
    subtotal: Decimal


class OrderResponse(CamelModel):
    """Schema for order response"""
    id: int
    customer_id: int
    customer_name: str
    status: OrderStatus
    shipping_address: Optional[str] = None
    items: List[OrderItemResponse]
    total_amount: Decimal
    order_date: Optional[datetime] = None
