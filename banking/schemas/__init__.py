"""
Pydantic schemas package.
"""

from banking.schemas.account import AccountCreate, AccountResponse, AmountRequest
from banking.schemas.auth import LoginRequest, LoginResponse
from banking.schemas.customer import CustomerCreate, CustomerResponse, EmployeeResponse, EmploymentUpdate

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "AmountRequest",
    "CustomerCreate",
    "CustomerResponse",
    "EmployeeResponse",
    "EmploymentUpdate",
    "LoginRequest",
    "LoginResponse",
]
