"""
Pydantic schemas for customer request/response validation
"""
from pydantic import AliasChoices, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime

from bookstore.schemas.base import CamelModel

PHONE_PATTERN = r"^[\d\s\-\+\(\)]+$"


class CustomerBase(CamelModel):
    """Base Customer schema"""
    first_name: str = Field(..., min_length=1, max_length=50, description="First name")
    last_name: str = Field(..., min_length=1, max_length=50, description="Last name")
    email: EmailStr = Field(..., description="Email address (unique)")
    # Older clients send "phone"
    phone_number: str = Field(
        ...,
        min_length=1,
        max_length=20,
        pattern=PHONE_PATTERN,
        validation_alias=AliasChoices("phoneNumber", "phone", "phone_number"),
        serialization_alias="phoneNumber",
        description="Phone number"
    )
    address: Optional[str] = Field(None, max_length=200, description="Postal address")


class CustomerCreate(CustomerBase):
    """Schema for creating a new customer"""
    pass


class CustomerUpdate(CustomerBase):
    """Schema for replacing all fields of a customer"""
    pass


class CustomerResponse(CustomerBase):
    """Schema for customer response"""
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
