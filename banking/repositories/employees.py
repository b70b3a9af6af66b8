"""
Employee persistence.
"""

from typing import Optional

from banking.database import session_scope
from banking.domain.customers import Employee
from banking.models.employee import EmployeeModel
from banking.models.user import UserModel


def employee_from_row(row: EmployeeModel) -> Employee:
    return Employee(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        role=row.role,
    )


class EmployeeRepository:
    def __init__(self, session_factory):
        self.session_factory = session_factory

    def create_with_credentials(
        self,
        first_name: str,
        last_name: str,
        email: str,
        role: str,
        username: str,
        password_hash: str,
    ) -> Employee:
        with session_scope(self.session_factory) as db:
            row = EmployeeModel(first_name=first_name, last_name=last_name, email=email, role=role)
            db.add(row)
            db.flush()

            db.add(UserModel(username=username, password_hash=password_hash, employee_id=row.id))
            db.flush()

            return employee_from_row(row)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with session_scope(self.session_factory) as db:
            row = db.query(EmployeeModel).filter(EmployeeModel.id == employee_id).first()
            return employee_from_row(row) if row else None

    def count(self) -> int:
        with session_scope(self.session_factory) as db:
            return db.query(EmployeeModel).count()

    def delete(self, employee_id: int) -> bool:
        with session_scope(self.session_factory) as db:
            row = db.query(EmployeeModel).filter(EmployeeModel.id == employee_id).first()
            if not row:
                return False
            db.delete(row)
            return True
