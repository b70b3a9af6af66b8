"""
Error categories raised by the domain, repositories and services.

The HTTP layer maps each category to a status code; nothing in the core
retries, every failure goes straight back to the caller.
"""


class BankingError(Exception):
    """Base class for every failure the service reports."""


class ValidationError(BankingError):
    """Input is malformed or a business precondition is not met."""


class InsufficientFundsError(ValidationError):
    """Withdrawal amount exceeds the available balance."""


class UnsupportedOperationError(BankingError):
    """The operation is categorically disallowed for this account type."""


class PersistenceError(BankingError):
    """The store could not be reached or a write failed."""


class ConstraintViolationError(PersistenceError):
    """A write was refused by a store constraint (e.g. duplicate username)."""


class DataIntegrityError(BankingError):
    """A stored row cannot be mapped to a valid entity."""
