"""
Customer persistence, including registration with login credentials.
"""

from typing import List, Optional

from banking.database import session_scope
from banking.domain.customers import Customer, EmploymentInfo
from banking.models.customer import CustomerModel
from banking.models.user import UserModel
from banking.repositories.accounts import account_from_row


def customer_from_row(row: CustomerModel, with_accounts: bool = True) -> Customer:
    customer = Customer(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        address=row.address,
        employment=EmploymentInfo.from_fields(row.employer_name, row.employer_address),
    )
    if with_accounts:
        for account_row in row.accounts:
            customer.add_account(account_from_row(account_row))
    return customer


class CustomerRepository:
    """Reads and writes customers, one session per call."""

    def __init__(self, session_factory):
        self.session_factory = session_factory

    def create_with_credentials(
        self,
        first_name: str,
        last_name: str,
        address: Optional[str],
        employment: Optional[EmploymentInfo],
        username: str,
        password_hash: str,
    ) -> Customer:
        """
        Insert the customer and its login in one unit of work.

        If the login cannot be written (duplicate username, for one) the
        customer row is rolled back with it.
        """
        with session_scope(self.session_factory) as db:
            row = CustomerModel(
                first_name=first_name,
                last_name=last_name,
                address=address,
                employer_name=employment.employer_name if employment else None,
                employer_address=employment.employer_address if employment else None,
            )
            db.add(row)
            db.flush()

            db.add(UserModel(username=username, password_hash=password_hash, customer_id=row.id))
            db.flush()

            return customer_from_row(row, with_accounts=False)

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        with session_scope(self.session_factory) as db:
            row = db.query(CustomerModel).filter(CustomerModel.id == customer_id).first()
            return customer_from_row(row) if row else None

    def list_all(self) -> List[Customer]:
        with session_scope(self.session_factory) as db:
            rows = db.query(CustomerModel).order_by(CustomerModel.id).all()
            return [customer_from_row(row) for row in rows]

    def count(self) -> int:
        with session_scope(self.session_factory) as db:
            return db.query(CustomerModel).count()

    def update_employment(self, customer_id: int, employment: EmploymentInfo) -> bool:
        with session_scope(self.session_factory) as db:
            updated = db.query(CustomerModel).filter(CustomerModel.id == customer_id).update({
                CustomerModel.employer_name: employment.employer_name,
                CustomerModel.employer_address: employment.employer_address,
            })
            return updated > 0

    def delete(self, customer_id: int) -> bool:
        """Delete the customer together with its accounts and login."""
        with session_scope(self.session_factory) as db:
            row = db.query(CustomerModel).filter(CustomerModel.id == customer_id).first()
            if not row:
                return False
            db.delete(row)
            return True
