"""
Repositories package
"""
from bookstore.repositories.book_repository import BookRepository
from bookstore.repositories.customer_repository import CustomerRepository
from bookstore.repositories.order_repository import OrderRepository

__all__ = ["BookRepository", "CustomerRepository", "OrderRepository"]
