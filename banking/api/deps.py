"""
FastAPI dependencies wiring repositories into services.
"""

from fastapi import Depends

from banking.database import get_session_factory
from banking.repositories import AccountRepository, CustomerRepository, EmployeeRepository, UserRepository
from banking.services import AccountService, AuthService, CustomerService


def get_account_service(session_factory=Depends(get_session_factory)) -> AccountService:
    return AccountService(
        accounts=AccountRepository(session_factory),
        customers=CustomerRepository(session_factory),
    )


def get_customer_service(session_factory=Depends(get_session_factory)) -> CustomerService:
    return CustomerService(
        customers=CustomerRepository(session_factory),
        employees=EmployeeRepository(session_factory),
    )


def get_auth_service(session_factory=Depends(get_session_factory)) -> AuthService:
    return AuthService(
        users=UserRepository(session_factory),
        customers=CustomerRepository(session_factory),
        employees=EmployeeRepository(session_factory),
    )
