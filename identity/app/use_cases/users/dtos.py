"""
User Management DTOs (Data Transfer Objects)

Command and Response classes for the user management use cases.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Optional, Set, Type, TypeVar, Union

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, StringConstraints, field_validator

from identity.domain.entities import User, UserStatus, UserType
from identity.domain.errors import ValidationError

E = TypeVar("E", bound=Enum)

PersonName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]
CompanyName = Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)]
PhoneNumber = Annotated[str, StringConstraints(strip_whitespace=True, max_length=20)]

MIN_PASSWORD_LENGTH = 8


def _check_email_syntax(value: str) -> str:
    # Syntax only; the address is stored and compared exactly as supplied
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"Invalid email address: {exc}") from None
    return value


EmailAddress = Annotated[
    str, StringConstraints(max_length=100), AfterValidator(_check_email_syntax)
]


# ============================================================================
# Command DTOs
# ============================================================================


class UpdateProfileCommand(BaseModel):
    """
    Profile update command.

    Username is not part of the command: it never changes after registration.
    A blank or missing password leaves the stored hash untouched; a missing
    user_type keeps the current one.
    """

    email: EmailAddress
    first_name: PersonName
    last_name: PersonName
    company_name: Optional[CompanyName] = None
    phone_number: Optional[PhoneNumber] = None
    user_type: Optional[UserType] = None
    password: Optional[str] = None

    @field_validator("password")
    @classmethod
    def blank_or_long_enough(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        return value


# ============================================================================
# Response DTOs
# ============================================================================


class UserResponse(BaseModel):
    """Sanitized user projection - never carries the password hash"""

    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    full_name: str
    company_name: Optional[str] = None
    phone_number: Optional[str] = None
    user_type: UserType
    status: UserStatus
    roles: Set[str]
    created_at: datetime
    updated_at: datetime
    last_login: Optional[datetime] = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            full_name=user.full_name,
            company_name=user.company_name,
            phone_number=user.phone_number,
            user_type=user.user_type,
            status=user.status,
            roles=user.roles,
            created_at=user.created_at,
            updated_at=user.updated_at,
            last_login=user.last_login,
        )


def parse_enum(enum_cls: Type[E], value: Union[E, str]) -> E:
    """Coerce a raw query value into enum_cls or raise ValidationError"""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(
            f"Invalid value: {value}. Must be one of: {allowed}"
        ) from None
