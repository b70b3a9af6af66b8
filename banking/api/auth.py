"""
Login endpoint.
Resolves a username and password to the customer or employee behind it.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from banking.api.deps import get_auth_service
from banking.domain.customers import Customer
from banking.schemas.auth import LoginRequest, LoginResponse
from banking.schemas.customer import CustomerResponse, EmployeeResponse
from banking.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Log in as a customer or an employee.

    Customers come back with all their accounts loaded.
    """
    principal = auth_service.authenticate(credentials.username, credentials.password)

    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password"
        )

    if isinstance(principal, Customer):
        return LoginResponse(role="customer", customer=CustomerResponse.model_validate(principal))
    return LoginResponse(role="employee", employee=EmployeeResponse.model_validate(principal))
