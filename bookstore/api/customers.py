"""
Customer API endpoints
"""
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import List

from bookstore.database import get_db
from bookstore.services.customer_service import CustomerService
from bookstore.schemas.customer import CustomerCreate, CustomerUpdate, CustomerResponse

router = APIRouter(prefix="/api/customers", tags=["customers"])


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    """Dependency to get CustomerService instance"""
    return CustomerService(db)


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED, summary="Create customer")
def create_customer(
    customer_data: CustomerCreate,
    service: CustomerService = Depends(get_customer_service)
):
    """
    Register a new customer

    - **email**: must not belong to another customer
    - **phoneNumber** (or **phone**): digits, spaces and + - ( )
    """
    return service.create_customer(customer_data)


@router.get("", response_model=List[CustomerResponse], summary="Get all customers")
def get_customers(
    skip: int = Query(0, ge=0, description="Number of customers to skip"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of customers to return"),
    service: CustomerService = Depends(get_customer_service)
):
    """Retrieve all customers with pagination"""
    return service.get_all_customers(skip=skip, limit=limit)


@router.get("/email/{email}", response_model=CustomerResponse, summary="Get customer by email")
def get_customer_by_email(email: str, service: CustomerService = Depends(get_customer_service)):
    """Retrieve a customer by email address"""
    return service.find_customer_by_email(email)


@router.get("/{customer_id}", response_model=CustomerResponse, summary="Get customer by ID")
def get_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    """Retrieve a specific customer by ID"""
    return service.get_customer_by_id(customer_id)


@router.put("/{customer_id}", response_model=CustomerResponse, summary="Update customer")
def update_customer(
    customer_id: int,
    customer_data: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service)
):
    """Replace all fields of an existing customer"""
    return service.update_customer(customer_id, customer_data)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete customer")
def delete_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    """Delete a customer together with all their orders"""
    service.delete_customer(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
