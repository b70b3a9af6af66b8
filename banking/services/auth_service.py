"""
Login lookup for customers and employees.
"""

from typing import Optional, Union

from banking.core.exceptions import DataIntegrityError
from banking.core.logger import get_logger
from banking.core.security import verify_password
from banking.domain.customers import Customer, Employee
from banking.repositories.customers import CustomerRepository
from banking.repositories.employees import EmployeeRepository
from banking.repositories.users import UserRepository

logger = get_logger(__name__)


class AuthService:
    def __init__(self, users: UserRepository, customers: CustomerRepository, employees: EmployeeRepository):
        self.users = users
        self.customers = customers
        self.employees = employees

    def authenticate(self, username: str, password: str) -> Optional[Union[Customer, Employee]]:
        """
        Return the customer (with accounts) or employee behind a login,
        or None when the username is unknown or the password is wrong.
        """
        credential = self.users.get_by_username(username)
        if credential is None or not verify_password(password, credential.password_hash):
            logger.warning(f"Failed login for {username!r}")
            return None

        if (credential.customer_id is None) == (credential.employee_id is None):
            raise DataIntegrityError(f"Login {username!r} must belong to exactly one customer or employee")

        if credential.customer_id is not None:
            principal = self.customers.get_by_id(credential.customer_id)
        else:
            principal = self.employees.get_by_id(credential.employee_id)

        if principal is None:
            raise DataIntegrityError(f"Login {username!r} points at a missing record")

        logger.info(f"{username!r} logged in as {type(principal).__name__.lower()} {principal.id}")
        return principal
