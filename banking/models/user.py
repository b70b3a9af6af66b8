"""
Credential database model.
Links a username and password hash to exactly one customer or employee.
"""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from banking.database import Base


class UserModel(Base):
    """
    Users table - login credentials.
    """
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "(customer_id IS NULL) <> (employee_id IS NULL)",
            name="ck_users_single_owner"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=True)

    customer = relationship("CustomerModel", back_populates="users")
    employee = relationship("EmployeeModel", back_populates="users")

    def __repr__(self):
        return f"<User(username={self.username}, customer_id={self.customer_id}, employee_id={self.employee_id})>"
