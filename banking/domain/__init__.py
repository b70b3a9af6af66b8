"""
Domain entities and the per-account-type business rules.
"""

from banking.domain.accounts import (
    ACCOUNT_POLICIES,
    Account,
    AccountPolicy,
    AccountType,
    apply_monthly_interest,
    deposit,
    is_positive_amount,
    withdraw,
)
from banking.domain.customers import Customer, Employee, EmploymentInfo

__all__ = [
    "ACCOUNT_POLICIES",
    "Account",
    "AccountPolicy",
    "AccountType",
    "Customer",
    "Employee",
    "EmploymentInfo",
    "apply_monthly_interest",
    "deposit",
    "is_positive_amount",
    "withdraw",
]
