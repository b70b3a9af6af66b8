"""
Customer and employee registration and maintenance.
"""

from typing import List, Optional

from banking.core.exceptions import ValidationError
from banking.core.logger import get_logger
from banking.core.security import hash_password
from banking.domain.customers import Customer, Employee, EmploymentInfo
from banking.repositories.customers import CustomerRepository
from banking.repositories.employees import EmployeeRepository

logger = get_logger(__name__)


def _require(**fields) -> None:
    for name, value in fields.items():
        if value is None or not str(value).strip():
            raise ValidationError(f"{name.replace('_', ' ').capitalize()} is required.")


class CustomerService:
    def __init__(self, customers: CustomerRepository, employees: EmployeeRepository):
        self.customers = customers
        self.employees = employees

    def register_customer(
        self,
        first_name: str,
        last_name: str,
        address: Optional[str],
        username: str,
        password: str,
        employer_name: Optional[str] = None,
        employer_address: Optional[str] = None,
    ) -> Customer:
        """
        Create a customer and its login together.

        Either both rows are written or neither is; a taken username raises
        ConstraintViolationError and leaves no customer behind.
        """
        _require(first_name=first_name, last_name=last_name, username=username, password=password)

        customer = self.customers.create_with_credentials(
            first_name=first_name,
            last_name=last_name,
            address=address,
            employment=EmploymentInfo.from_fields(employer_name, employer_address),
            username=username,
            password_hash=hash_password(password),
        )
        logger.info(f"Registered customer {customer.id} ({customer.full_name}) as {username!r}")
        return customer

    def register_employee(
        self,
        first_name: str,
        last_name: str,
        email: str,
        role: str,
        username: str,
        password: str,
    ) -> Employee:
        _require(
            first_name=first_name,
            last_name=last_name,
            email=email,
            role=role,
            username=username,
            password=password,
        )

        employee = self.employees.create_with_credentials(
            first_name=first_name,
            last_name=last_name,
            email=email,
            role=role.upper(),
            username=username,
            password_hash=hash_password(password),
        )
        logger.info(f"Registered employee {employee.id} ({employee.role}) as {username!r}")
        return employee

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        return self.customers.get_by_id(customer_id)

    def list_customers(self) -> List[Customer]:
        return self.customers.list_all()

    def update_employment(self, customer_id: int, employer_name: str, employer_address: str) -> Customer:
        employment = EmploymentInfo(employer_name=employer_name, employer_address=employer_address)
        if not employment.is_complete:
            raise ValidationError("Employer name and address are both required.")

        if not self.customers.update_employment(customer_id, employment):
            raise ValidationError("Customer not found.")

        logger.info(f"Updated employment information for customer {customer_id}")
        return self.customers.get_by_id(customer_id)

    def delete_customer(self, customer_id: int) -> bool:
        deleted = self.customers.delete(customer_id)
        if deleted:
            logger.info(f"Deleted customer {customer_id} with its accounts and login")
        return deleted
