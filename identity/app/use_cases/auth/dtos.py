"""
Authentication Use Case DTOs (Data Transfer Objects)

Command/Response classes for registration and login.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, Field, StringConstraints

from identity.app.use_cases.users.dtos import (
    CompanyName,
    EmailAddress,
    MIN_PASSWORD_LENGTH,
    PersonName,
    PhoneNumber,
    UserResponse,
)
from identity.domain.entities import UserType

Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=50)]


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Registration command - represents validated signup intent

    Field constraints mirror the users table columns, so anything that
    parses here fits the store.
    """

    username: Username
    email: EmailAddress
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)
    first_name: PersonName
    last_name: PersonName
    company_name: Optional[CompanyName] = None
    phone_number: Optional[PhoneNumber] = None
    user_type: UserType = UserType.EXTERNAL


class LoginCommand(BaseModel):
    username_or_email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """Response for the login use case"""

    token: str
    token_type: str = "Bearer"
    expires_in: int
    user: UserResponse
