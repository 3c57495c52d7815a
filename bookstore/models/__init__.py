"""
Models package
"""
from bookstore.models.book import Book
from bookstore.models.customer import Customer
from bookstore.models.order import Order, OrderItem, OrderStatus

__all__ = ["Book", "Customer", "Order", "OrderItem", "OrderStatus"]
