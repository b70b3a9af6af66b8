"""
Service layer: business rules applied before anything is persisted.
"""

from banking.services.account_service import AccountService
from banking.services.auth_service import AuthService
from banking.services.customer_service import CustomerService

__all__ = ["AccountService", "AuthService", "CustomerService"]
