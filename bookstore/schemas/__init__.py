"""
Schemas package
"""
from bookstore.schemas.book import (
    BookBase,
    BookCreate,
    BookUpdate,
    BookResponse
)
from bookstore.schemas.customer import (
    CustomerBase,
    CustomerCreate,
    CustomerUpdate,
    CustomerResponse
)
from bookstore.schemas.order import (
    OrderItemRequest,
    OrderCreate,
    OrderStatusUpdate,
    OrderItemResponse,
    OrderResponse
)
from bookstore.schemas.error import ErrorResponse

__all__ = [
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "CustomerBase",
    "CustomerCreate",
    "CustomerUpdate",
    "CustomerResponse",
    "OrderItemRequest",
    "OrderCreate",
    "OrderStatusUpdate",
    "OrderItemResponse",
    "OrderResponse",
    "ErrorResponse"
]
