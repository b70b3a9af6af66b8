"""
Database models package.
"""

from banking.models.account import AccountModel
from banking.models.customer import CustomerModel
from banking.models.employee import EmployeeModel
from banking.models.user import UserModel

__all__ = ["AccountModel", "CustomerModel", "EmployeeModel", "UserModel"]
