"""
Pydantic schemas for Customer and Employee API requests and responses.
"""

from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional

from banking.schemas.account import AccountResponse


class CustomerCreate(BaseModel):
    """Schema for registering a customer with a login."""
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    address: Optional[str] = Field(None, max_length=255)
    employer_name: Optional[str] = Field(None, max_length=255)
    employer_address: Optional[str] = Field(None, max_length=255)
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "first_name": "Katlego",
                "last_name": "Sekgoma",
                "address": "Gaborone",
                "employer_name": "Acme Corp",
                "employer_address": "Gaborone",
                "username": "ksekgoma",
                "password": "change-me"
            }
        }
    )


class EmploymentUpdate(BaseModel):
    """Schema for recording a customer's employer."""
    employer_name: str = Field(..., max_length=255)
    employer_address: str = Field(..., max_length=255)


class CustomerResponse(BaseModel):
    """Schema for customer response."""
    id: int
    first_name: str
    last_name: str
    address: Optional[str]
    employer_name: Optional[str] = None
    employer_address: Optional[str] = None
    has_employment_info: bool
    accounts: List[AccountResponse] = []

    model_config = ConfigDict(from_attributes=True)


class EmployeeResponse(BaseModel):
    """Schema for employee response."""
    id: int
    first_name: str
    last_name: str
    email: str
    role: str

    model_config = ConfigDict(from_attributes=True)
