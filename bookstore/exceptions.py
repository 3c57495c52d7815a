"""
Domain exceptions raised by the service layer
"""
from typing import Any


class BookstoreError(Exception):
    """Base exception for bookstore errors"""
    pass


class ResourceNotFoundError(BookstoreError):
    """Entity lookup by id, email or isbn missed"""

    def __init__(self, resource: str, field: str, value: Any):
        self.resource = resource
        self.field = field
        self.value = value
        super().__init__(f"{resource} not found with {field} : '{value}'")


class InvalidArgumentError(BookstoreError, ValueError):
    """Business rule violation (bad range, duplicate email, insufficient stock, ...)"""
    pass


class OrderValidationError(InvalidArgumentError):
    """Order request is malformed (empty cart, non-positive quantity)"""
    pass
