"""
Customer API endpoints.
Handles registration, lookup, employment updates and removal.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from banking.api.deps import get_customer_service
from banking.schemas.customer import CustomerCreate, CustomerResponse, EmploymentUpdate
from banking.services.customer_service import CustomerService

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.post("/", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def register_customer(
    customer_data: CustomerCreate,
    customer_service: CustomerService = Depends(get_customer_service)
):
    """
    Register a customer together with a login.

    - **username**: must not be taken already
    - **employer_name** / **employer_address**: optional, needed later for cheque accounts
    """
    customer = customer_service.register_customer(
        first_name=customer_data.first_name,
        last_name=customer_data.last_name,
        address=customer_data.address,
        username=customer_data.username,
        password=customer_data.password,
        employer_name=customer_data.employer_name,
        employer_address=customer_data.employer_address,
    )

    return CustomerResponse.model_validate(customer)


@router.get("/", response_model=List[CustomerResponse])
def list_customers(
    customer_service: CustomerService = Depends(get_customer_service)
):
    """
    List all customers with their accounts.
    """
    return [CustomerResponse.model_validate(customer) for customer in customer_service.list_customers()]


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(
    customer_id: int,
    customer_service: CustomerService = Depends(get_customer_service)
):
    """
    Get a customer and their accounts.
    """
    customer = customer_service.get_customer(customer_id)

    if not customer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Customer {customer_id} not found"
        )

    return CustomerResponse.model_validate(customer)


@router.put("/{customer_id}/employment", response_model=CustomerResponse)
def update_employment(
    customer_id: int,
    employment: EmploymentUpdate,
    customer_service: CustomerService = Depends(get_customer_service)
):
    """
    Record the customer's employer.
    """
    customer = customer_service.update_employment(
        customer_id,
        employment.employer_name,
        employment.employer_address,
    )

    return CustomerResponse.model_validate(customer)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(
    customer_id: int,
    customer_service: CustomerService = Depends(get_customer_service)
):
    """
    Delete a customer together with their accounts and login.
    """
    if not customer_service.delete_customer(customer_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Customer {customer_id} not found"
        )

    return None
