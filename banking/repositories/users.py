"""
Credential lookup.
"""

from dataclasses import dataclass
from typing import Optional

from banking.database import session_scope
from banking.models.user import UserModel


@dataclass(frozen=True)
class Credential:
    """A stored login; exactly one of customer_id / employee_id should be set."""
    username: str
    password_hash: str
    customer_id: Optional[int]
    employee_id: Optional[int]


class UserRepository:
    def __init__(self, session_factory):
        self.session_factory = session_factory

    def get_by_username(self, username: str) -> Optional[Credential]:
        with session_scope(self.session_factory) as db:
            row = db.query(UserModel).filter(UserModel.username == username).first()
            if not row:
                return None
            return Credential(
                username=row.username,
                password_hash=row.password_hash,
                customer_id=row.customer_id,
                employee_id=row.employee_id,
            )
