"""
Customer Service - Business Logic Layer
"""
import logging
from typing import List
from sqlalchemy.orm import Session

from bookstore.exceptions import InvalidArgumentError, ResourceNotFoundError
from bookstore.repositories.customer_repository import CustomerRepository
from bookstore.schemas.customer import CustomerCreate, CustomerUpdate, CustomerResponse

logger = logging.getLogger(__name__)


class CustomerService:
    """Service layer for customer business logic"""

    def __init__(self, db: Session):
        self.repository = CustomerRepository(db)

    def create_customer(self, customer_data: CustomerCreate) -> CustomerResponse:
        """
        Create new customer

        Raises:
            InvalidArgumentError: If the email is already registered
        """
        if self.repository.get_by_email(customer_data.email):
            raise InvalidArgumentError(f"Email already exists: {customer_data.email}")

        customer = self.repository.create(customer_data)
        logger.info("Customer created: id=%s", customer.id)
        return CustomerResponse.model_validate(customer)

    def get_customer_by_id(self, customer_id: int) -> CustomerResponse:
        """Get customer by ID"""
        customer = self.repository.get_by_id(customer_id)
        if not customer:
            raise ResourceNotFoundError("Customer", "id", customer_id)
        return CustomerResponse.model_validate(customer)

    def find_customer_by_email(self, email: str) -> CustomerResponse:
        """Get customer by email"""
        customer = self.repository.get_by_email(email)
        if not customer:
            raise ResourceNotFoundError("Customer", "email", email)
        return CustomerResponse.model_validate(customer)

    def get_all_customers(self, skip: int = 0, limit: int = 100) -> List[CustomerResponse]:
        """Get all customers with pagination"""
        customers = self.repository.get_all(skip=skip, limit=limit)
        return [CustomerResponse.model_validate(c) for c in customers]

    def update_customer(self, customer_id: int, customer_data: CustomerUpdate) -> CustomerResponse:
        """
        Replace all fields of a customer

        Raises:
            ResourceNotFoundError: If no customer has this ID
            InvalidArgumentError: If the new email belongs to another customer
        """
        customer = self.repository.get_by_id(customer_id)
        if not customer:
            raise ResourceNotFoundError("Customer", "id", customer_id)

        existing = self.repository.get_by_email(customer_data.email)
        if existing and existing.id != customer_id:
            raise InvalidArgumentError(f"Email already exists: {customer_data.email}")

        customer = self.repository.update(customer_id, customer_data)
        return CustomerResponse.model_validate(customer)

    def delete_customer(self, customer_id: int) -> None:
        """Delete customer and, by cascade, their orders"""
        if not self.repository.delete(customer_id):
            raise ResourceNotFoundError("Customer", "id", customer_id)
        logger.info("Customer deleted with their orders: id=%s", customer_id)
