"""
Customer Repository - Data Access Layer
"""
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from bookstore.models.customer import Customer
from bookstore.schemas.customer import CustomerCreate, CustomerUpdate


class CustomerRepository:
    """Repository for Customer CRUD operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self, skip: int = 0, limit: int = 100) -> List[Customer]:
        """Get all customers with pagination"""
        return self.db.query(Customer).order_by(Customer.id).offset(skip).limit(limit).all()

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Get customer by ID"""
        return self.db.query(Customer).filter(Customer.id == customer_id).first()

    def get_by_email(self, email: str) -> Optional[Customer]:
        """Get customer by email, ignoring case"""
        return self.db.query(Customer).filter(
            func.lower(Customer.email) == email.lower()
        ).first()

    def create(self, customer_data: CustomerCreate) -> Customer:
        """Create new customer"""
        customer = Customer(**customer_data.model_dump())
        self.db.add(customer)
        self.db.commit()
        self.db.refresh(customer)
        return customer

    def update(self, customer_id: int, customer_data: CustomerUpdate) -> Optional[Customer]:
        """Replace all fields of an existing customer"""
        customer = self.get_by_id(customer_id)
        if not customer:
            return None

        for field, value in customer_data.model_dump().items():
            setattr(customer, field, value)

        self.db.commit()
        self.db.refresh(customer)
        return customer

    def delete(self, customer_id: int) -> bool:
        """Delete customer together with their orders"""
        customer = self.get_by_id(customer_id)
        if not customer:
            return False

        self.db.delete(customer)
        self.db.commit()
        return True
