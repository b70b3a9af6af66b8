"""
Account operations with their validation rules.

Each operation validates first, then changes the in-memory account, then
stores the new state. A rejected operation never reaches the store.
"""

import math
from typing import List, Optional

from banking.core.exceptions import BankingError, ValidationError
from banking.core.logger import get_logger
from banking.domain.accounts import ACCOUNT_POLICIES, Account, AccountType, is_positive_amount
from banking.domain.customers import Customer, EmploymentInfo
from banking.repositories.accounts import AccountRepository
from banking.repositories.customers import CustomerRepository

logger = get_logger(__name__)


class AccountService:
    def __init__(self, accounts: AccountRepository, customers: CustomerRepository):
        self.accounts = accounts
        self.customers = customers

    # ==================== BALANCE OPERATIONS ====================

    def deposit(self, account: Account, amount: float) -> Account:
        if not is_positive_amount(amount):
            logger.warning(f"Rejected deposit of {amount} into {account.account_number}: amount must be positive")
            raise ValidationError("Amount must be positive.")

        account.deposit(amount)
        self.accounts.update_balance(account)

        logger.info(f"Deposited BWP {amount:.2f} into {account.account_number}, balance {account.balance:.2f}")
        return account

    def withdraw(self, account: Account, amount: float) -> Account:
        if not is_positive_amount(amount):
            logger.warning(f"Rejected withdrawal of {amount} from {account.account_number}: amount must be positive")
            raise ValidationError("Amount must be positive.")

        try:
            account.withdraw(amount)
        except BankingError as e:
            logger.warning(f"Rejected withdrawal of {amount:.2f} from {account.account_number}: {e}")
            raise

        self.accounts.update_balance(account)

        logger.info(f"Withdrew BWP {amount:.2f} from {account.account_number}, balance {account.balance:.2f}")
        return account

    def apply_monthly_interest(self, account: Account) -> Account:
        """
        Credit one month of interest and store the balance.

        The balance is written even for cheque accounts, which earn nothing,
        so callers can treat every variant the same way.
        """
        account.apply_monthly_interest()
        self.accounts.update_balance(account)

        logger.info(f"Applied monthly interest to {account.account_number}, balance {account.balance:.2f}")
        return account

    # ==================== ACCOUNT OPENING ====================

    def create_savings_account(
        self,
        customer_id: int,
        account_number: str,
        initial_deposit: float,
        branch: Optional[str],
    ) -> Account:
        self._check_initial_deposit(AccountType.SAVINGS, initial_deposit)
        self._require_customer(customer_id)

        return self._open(customer_id, account_number, initial_deposit, branch, AccountType.SAVINGS)

    def create_investment_account(
        self,
        customer_id: int,
        account_number: str,
        initial_deposit: float,
        branch: Optional[str],
    ) -> Account:
        self._check_initial_deposit(AccountType.INVESTMENT, initial_deposit)
        self._require_customer(customer_id)

        return self._open(customer_id, account_number, initial_deposit, branch, AccountType.INVESTMENT)

    def create_cheque_account(
        self,
        customer_id: int,
        account_number: str,
        initial_deposit: float,
        branch: Optional[str],
        employer_name: Optional[str] = None,
        employer_address: Optional[str] = None,
    ) -> Account:
        """
        Open a cheque account.

        Without employer details the customer's stored employment is used
        and must be complete. With employer details they must be non-blank;
        a customer who had no employment on file gets them saved too.
        """
        self._check_initial_deposit(AccountType.CHEQUE, initial_deposit)

        if employer_name is None and employer_address is None:
            customer = self._require_customer(customer_id)
            if not customer.has_employment_info:
                logger.warning(f"Rejected cheque account for customer {customer_id}: no employment information")
                raise ValidationError(
                    "Customer must have employment information (company name and address) "
                    "to open a Cheque account."
                )
            employment = customer.employment
        else:
            employment = EmploymentInfo(employer_name=employer_name, employer_address=employer_address)
            if not employment.is_complete:
                logger.warning(f"Rejected cheque account for customer {customer_id}: blank employment information")
                raise ValidationError(
                    "Employment information (company name and address) is required to open a Cheque account."
                )

            # The customer's own record is only filled in when it was empty
            customer = self._require_customer(customer_id)
            return self._open(
                customer_id, account_number, initial_deposit, branch, AccountType.CHEQUE, employment,
                record_customer_employment=not customer.has_employment_info,
            )

        return self._open(customer_id, account_number, initial_deposit, branch, AccountType.CHEQUE, employment)

    # ==================== LOOKUPS ====================

    def get_account_by_number(self, account_number: str) -> Optional[Account]:
        return self.accounts.get_by_number(account_number)

    def get_customer_accounts(self, customer_id: int) -> List[Account]:
        return self.accounts.list_for_customer(customer_id)

    # ==================== HELPERS ====================

    def _check_initial_deposit(self, account_type: AccountType, initial_deposit: float) -> None:
        if not math.isfinite(initial_deposit):
            raise ValidationError("Initial deposit must be a finite amount.")
        if initial_deposit < 0:
            raise ValidationError("Initial deposit cannot be negative.")

        minimum = ACCOUNT_POLICIES[account_type].minimum_opening_deposit
        if initial_deposit < minimum:
            raise ValidationError(
                f"{account_type.value.title()} account requires minimum deposit of BWP {minimum:.2f}"
            )

    def _require_customer(self, customer_id: int) -> Customer:
        customer = self.customers.get_by_id(customer_id)
        if customer is None:
            raise ValidationError("Customer not found.")
        return customer

    def _open(
        self,
        customer_id: int,
        account_number: str,
        initial_deposit: float,
        branch: Optional[str],
        account_type: AccountType,
        employment: Optional[EmploymentInfo] = None,
        record_customer_employment: bool = False,
    ) -> Account:
        account = self.accounts.create(
            customer_id=customer_id,
            account_number=account_number,
            balance=initial_deposit,
            branch=branch,
            account_type=account_type,
            employment=employment,
            record_customer_employment=record_customer_employment,
        )
        logger.info(
            f"Opened {account_type.value} account {account_number} for customer {customer_id} "
            f"with BWP {initial_deposit:.2f}"
        )
        if record_customer_employment:
            logger.info(f"Recorded employment information for customer {customer_id}")
        return account
