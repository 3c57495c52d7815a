"""
Pydantic schemas for book request/response validation
"""
from pydantic import Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime
from decimal import Decimal

from bookstore.schemas.base import CamelModel

ISBN_PATTERN = r"^[0-9-]{10,17}$"


class BookBase(CamelModel):
    """Base Book schema with common fields"""
    title: str = Field(..., min_length=1, max_length=200, description="Book title")
    author: str = Field(..., min_length=1, max_length=100, description="Author name")
    isbn: str = Field(..., pattern=ISBN_PATTERN, description="ISBN (10-17 digits or dashes)")
    category: str = Field(..., min_length=1, max_length=50, description="Book category")
    price: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, description="Unit price (must be positive)")
    stock_quantity: int = Field(0, ge=0, description="Stock quantity (must be non-negative)")
    description: Optional[str] = Field(None, max_length=1000, description="Book description")


class BookCreate(BookBase):
    """Schema for creating a new book"""
    pass


class BookUpdate(BookBase):
    """Schema for replacing all fields of a book"""
    pass


class BookResponse(BookBase):
    """Schema for book response"""
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
