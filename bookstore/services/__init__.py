"""
Services package
"""
from bookstore.services.book_service import BookService
from bookstore.services.customer_service import CustomerService
from bookstore.services.order_service import OrderService

__all__ = ["BookService", "CustomerService", "OrderService"]
