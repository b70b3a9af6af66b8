"""
Customer and employee entities.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from banking.domain.accounts import Account


@dataclass(frozen=True)
class EmploymentInfo:
    """Employer details; a customer needs complete ones to hold a cheque account."""
    employer_name: Optional[str]
    employer_address: Optional[str]

    @property
    def is_complete(self) -> bool:
        return bool(
            self.employer_name and self.employer_name.strip()
            and self.employer_address and self.employer_address.strip()
        )

    @classmethod
    def from_fields(cls, employer_name: Optional[str], employer_address: Optional[str]) -> Optional["EmploymentInfo"]:
        if employer_name is None and employer_address is None:
            return None
        return cls(employer_name=employer_name, employer_address=employer_address)


@dataclass
class Customer:
    """
    A bank customer.

    `accounts` is filled in only when the customer is loaded from the store
    and is not refreshed when those accounts change afterwards.
    """
    id: int
    first_name: str
    last_name: str
    address: Optional[str] = None
    employment: Optional[EmploymentInfo] = None
    accounts: List["Account"] = field(default_factory=list)

    @property
    def has_employment_info(self) -> bool:
        return self.employment is not None and self.employment.is_complete

    @property
    def employer_name(self) -> Optional[str]:
        return self.employment.employer_name if self.employment else None

    @property
    def employer_address(self) -> Optional[str]:
        return self.employment.employer_address if self.employment else None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def add_account(self, account: "Account") -> None:
        self.accounts.append(account)


@dataclass
class Employee:
    """A member of staff, e.g. a MANAGER or TELLER."""
    id: int
    first_name: str
    last_name: str
    email: str
    role: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
