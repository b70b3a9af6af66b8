"""
Customer database model.
Represents bank customers and their optional employment details.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from banking.database import Base


class CustomerModel(Base):
    """
    Customers table - one row per registered customer.
    """
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    address = Column(String(255), nullable=True)
    employer_name = Column(String(255), nullable=True)
    employer_address = Column(String(255), nullable=True)

    # Deleting a customer removes its accounts and its login
    accounts = relationship(
        "AccountModel",
        back_populates="customer",
        cascade="all, delete-orphan"
    )
    users = relationship(
        "UserModel",
        back_populates="customer",
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Customer(id={self.id}, name={self.first_name} {self.last_name})>"
