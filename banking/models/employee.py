"""
Employee database model.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from banking.database import Base


class EmployeeModel(Base):
    """
    Employees table - bank staff such as managers and tellers.
    """
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False)

    users = relationship(
        "UserModel",
        back_populates="employee",
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Employee(id={self.id}, email={self.email}, role={self.role})>"
