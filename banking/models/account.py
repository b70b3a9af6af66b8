"""
Account database model.
All account variants share this table; the type column says which one a row is.
"""

from sqlalchemy import Column, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from banking.database import Base


class AccountModel(Base):
    """
    Accounts table - savings, investment and cheque accounts.
    """
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    # Indexed for lookups but deliberately not unique
    account_number = Column(String(50), index=True, nullable=False)
    balance = Column(Float, nullable=False, default=0.0)
    branch = Column(String(100), nullable=True)
    type = Column(String(20), nullable=False)
    employer_name = Column(String(255), nullable=True)
    employer_address = Column(String(255), nullable=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True)

    customer = relationship("CustomerModel", back_populates="accounts")

    def __repr__(self):
        return f"<Account(number={self.account_number}, type={self.type}, balance={self.balance})>"
