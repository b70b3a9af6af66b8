"""
Account variants and their business rules.

Every account is the same `Account` record tagged with an `AccountType`.
What a variant may do lives in `ACCOUNT_POLICIES`, looked up by tag:

    Savings     deposits only, 0.05% monthly interest
    Investment  deposits and withdrawals, 5% monthly interest, opens with BWP 500.00
    Cheque      deposits and withdrawals, no interest, needs employment details

All amounts are in BWP.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from banking.core.exceptions import InsufficientFundsError, UnsupportedOperationError, ValidationError
from banking.domain.customers import EmploymentInfo


class AccountType(str, Enum):
    """Account variants; the value is the discriminator stored with each row."""
    SAVINGS = "SAVINGS"
    INVESTMENT = "INVESTMENT"
    CHEQUE = "CHEQUE"


@dataclass
class Account:
    """
    A customer account of any variant.

    Only cheque accounts carry employment details.
    """
    id: int
    account_number: str
    balance: float
    branch: Optional[str]
    customer_id: int
    account_type: AccountType
    employment: Optional[EmploymentInfo] = None

    def __post_init__(self):
        if self.account_type == AccountType.CHEQUE and not (self.employment and self.employment.is_complete):
            raise ValidationError("A cheque account requires employer name and address.")

    @property
    def policy(self) -> "AccountPolicy":
        return ACCOUNT_POLICIES[self.account_type]

    @property
    def employer_name(self) -> Optional[str]:
        return self.employment.employer_name if self.employment else None

    @property
    def employer_address(self) -> Optional[str]:
        return self.employment.employer_address if self.employment else None

    def deposit(self, amount: float) -> None:
        deposit(self, amount)

    def withdraw(self, amount: float) -> None:
        withdraw(self, amount)

    def apply_monthly_interest(self) -> None:
        apply_monthly_interest(self)


def is_positive_amount(amount: float) -> bool:
    """True for a finite amount above zero; NaN and infinity never qualify."""
    return math.isfinite(amount) and amount > 0


def _withdraw_funds(account: Account, amount: float) -> None:
    if not is_positive_amount(amount):
        raise ValidationError("Amount must be positive.")
    if amount > account.balance:
        raise InsufficientFundsError(
            f"Insufficient funds. Balance: {account.balance:.2f}, Required: {amount:.2f}"
        )
    account.balance -= amount


def _withdraw_unsupported(account: Account, amount: float) -> None:
    raise UnsupportedOperationError("Withdrawals not allowed from a Savings Account.")


@dataclass(frozen=True)
class AccountPolicy:
    """Rules one account variant follows."""
    monthly_interest_rate: float
    minimum_opening_deposit: float
    requires_employment: bool
    withdraw: Callable[[Account, float], None]

    @property
    def allows_withdrawal(self) -> bool:
        return self.withdraw is not _withdraw_unsupported


ACCOUNT_POLICIES: Dict[AccountType, AccountPolicy] = {
    AccountType.SAVINGS: AccountPolicy(
        monthly_interest_rate=0.0005,
        minimum_opening_deposit=0.0,
        requires_employment=False,
        withdraw=_withdraw_unsupported,
    ),
    AccountType.INVESTMENT: AccountPolicy(
        monthly_interest_rate=0.05,
        minimum_opening_deposit=500.0,
        requires_employment=False,
        withdraw=_withdraw_funds,
    ),
    AccountType.CHEQUE: AccountPolicy(
        monthly_interest_rate=0.0,
        minimum_opening_deposit=0.0,
        requires_employment=True,
        withdraw=_withdraw_funds,
    ),
}


def deposit(account: Account, amount: float) -> None:
    """Add `amount` to the balance. Same rule for every variant."""
    if not is_positive_amount(amount):
        raise ValidationError("Amount must be positive.")
    account.balance += amount


def withdraw(account: Account, amount: float) -> None:
    """Take `amount` off the balance if the variant allows it and funds cover it."""
    account.policy.withdraw(account, amount)


def apply_monthly_interest(account: Account) -> None:
    """Credit one month of interest. Cheque accounts earn none."""
    rate = account.policy.monthly_interest_rate
    if rate:
        account.balance += account.balance * rate
