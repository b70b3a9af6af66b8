"""
Repositories translating between database rows and domain entities.
"""

from banking.repositories.accounts import AccountRepository
from banking.repositories.customers import CustomerRepository
from banking.repositories.employees import EmployeeRepository
from banking.repositories.users import Credential, UserRepository

__all__ = [
    "AccountRepository",
    "Credential",
    "CustomerRepository",
    "EmployeeRepository",
    "UserRepository",
]
