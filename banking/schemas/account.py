"""
Pydantic schemas for Account API requests and responses.
"""

from pydantic import BaseModel, Field, ConfigDict
from typing import Optional

from banking.domain.accounts import AccountType


class AccountCreate(BaseModel):
    """Schema for opening a new account."""
    customer_id: int = Field(..., description="Owning customer")
    account_number: str = Field(..., min_length=1, max_length=50, description="Account number")
    account_type: AccountType = Field(..., description="SAVINGS, INVESTMENT or CHEQUE")
    initial_deposit: float = Field(default=0.0, allow_inf_nan=False, description="Opening balance in BWP")
    branch: Optional[str] = Field(None, max_length=100, description="Branch name")
    employer_name: Optional[str] = Field(None, max_length=255, description="Cheque accounts only")
    employer_address: Optional[str] = Field(None, max_length=255, description="Cheque accounts only")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "customer_id": 1,
                "account_number": "INV-004",
                "account_type": "INVESTMENT",
                "initial_deposit": 750.00,
                "branch": "Main"
            }
        }
    )


class AmountRequest(BaseModel):
    """Schema for a deposit or withdrawal."""
    amount: float = Field(..., allow_inf_nan=False, description="Amount in BWP")


class AccountResponse(BaseModel):
    """Schema for account response."""
    id: int
    account_number: str
    account_type: AccountType
    balance: float
    branch: Optional[str]
    customer_id: int
    employer_name: Optional[str] = None
    employer_address: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
