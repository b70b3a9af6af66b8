"""
Account persistence.

Every variant lives in the single `accounts` table; the `type` column is
the discriminator used to rebuild the right variant on load.
"""

from typing import List, Optional

from banking.core.exceptions import DataIntegrityError, PersistenceError, ValidationError
from banking.database import session_scope
from banking.domain.accounts import Account, AccountType
from banking.domain.customers import EmploymentInfo
from banking.models.account import AccountModel
from banking.models.customer import CustomerModel


def account_from_row(row: AccountModel) -> Account:
    """
    Build the domain account a row describes.

    Rows that cannot describe a valid account raise DataIntegrityError
    instead of being skipped.
    """
    try:
        account_type = AccountType(row.type)
    except ValueError:
        raise DataIntegrityError(
            f"Account {row.account_number} (id={row.id}) has unknown type {row.type!r}"
        ) from None

    if row.balance is None or row.balance < 0:
        raise DataIntegrityError(
            f"Account {row.account_number} (id={row.id}) has invalid balance {row.balance!r}"
        )

    employment = None
    if account_type == AccountType.CHEQUE:
        employment = EmploymentInfo.from_fields(row.employer_name, row.employer_address)

    try:
        return Account(
            id=row.id,
            account_number=row.account_number,
            balance=row.balance,
            branch=row.branch,
            customer_id=row.customer_id,
            account_type=account_type,
            employment=employment,
        )
    except ValidationError as e:
        raise DataIntegrityError(f"Account {row.account_number} (id={row.id}): {e}") from e


class AccountRepository:
    """Reads and writes accounts, one session per call."""

    def __init__(self, session_factory):
        self.session_factory = session_factory

    def create(
        self,
        customer_id: int,
        account_number: str,
        balance: float,
        branch: Optional[str],
        account_type: AccountType,
        employment: Optional[EmploymentInfo] = None,
        record_customer_employment: bool = False,
    ) -> Account:
        """
        Insert a new account row.

        With `record_customer_employment` the owning customer gets `employment`
        saved as well, in the same unit of work: either both writes land or
        neither does.
        """
        with session_scope(self.session_factory) as db:
            if record_customer_employment and employment is not None:
                db.query(CustomerModel).filter(CustomerModel.id == customer_id).update({
                    CustomerModel.employer_name: employment.employer_name,
                    CustomerModel.employer_address: employment.employer_address,
                })

            row = AccountModel(
                account_number=account_number,
                balance=balance,
                branch=branch,
                type=account_type.value,
                customer_id=customer_id,
            )
            if account_type == AccountType.CHEQUE and employment is not None:
                row.employer_name = employment.employer_name
                row.employer_address = employment.employer_address

            db.add(row)
            db.flush()
            return account_from_row(row)

    def update_balance(self, account: Account) -> None:
        """
        Store the in-memory balance of `account`.

        Keyed by id because account numbers are not guaranteed unique.
        """
        with session_scope(self.session_factory) as db:
            updated = db.query(AccountModel).filter(
                AccountModel.id == account.id
            ).update({AccountModel.balance: account.balance})

            if updated == 0:
                raise PersistenceError(f"Account {account.account_number} (id={account.id}) no longer exists")

    def get_by_id(self, account_id: int) -> Optional[Account]:
        with session_scope(self.session_factory) as db:
            row = db.query(AccountModel).filter(AccountModel.id == account_id).first()
            return account_from_row(row) if row else None

    def get_by_number(self, account_number: str) -> Optional[Account]:
        # Lowest id wins if the same number was issued twice
        with session_scope(self.session_factory) as db:
            row = db.query(AccountModel).filter(
                AccountModel.account_number == account_number
            ).order_by(AccountModel.id).first()
            return account_from_row(row) if row else None

    def list_for_customer(self, customer_id: int) -> List[Account]:
        with session_scope(self.session_factory) as db:
            rows = db.query(AccountModel).filter(AccountModel.customer_id == customer_id).all()
            return [account_from_row(row) for row in rows]
