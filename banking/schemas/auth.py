"""
Pydantic schemas for login.
"""

from pydantic import BaseModel, Field
from typing import Literal, Optional

from banking.schemas.customer import CustomerResponse, EmployeeResponse


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Who logged in: exactly one of customer / employee is set."""
    role: Literal["customer", "employee"]
    customer: Optional[CustomerResponse] = None
    employee: Optional[EmployeeResponse] = None
