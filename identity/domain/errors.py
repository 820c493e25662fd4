"""
Identity Domain Errors

Every failure the identity core reports to its callers. Each error carries a
stable machine-readable code and a human-readable message; the HTTP layer maps
the error class to a status code and never has to parse messages.
"""

from typing import Any, Dict, Optional

INVALID_CREDENTIALS_MESSAGE = "Invalid username/email or password"


class IdentityError(Exception):
    """Base class for all domain errors"""

    code = "IDENTITY_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)


class ValidationError(IdentityError):
    """Malformed or missing input, detected before touching the store"""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class DuplicateResourceError(IdentityError):
    """Username or email already taken"""

    code = "DUPLICATE_RESOURCE"

    def __init__(self, field: str):
        self.field = field
        super().__init__(
            f"{field.capitalize()} already exists",
            code=f"{field.upper()}_ALREADY_EXISTS",
        )


class NotFoundError(IdentityError):
    code = "USER_NOT_FOUND"

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class AuthenticationError(IdentityError):
    """
    Credential lookup or password verification failed.

    The message is fixed so callers cannot tell an unknown identity from a
    wrong password.
    """

    code = "INVALID_CREDENTIALS"

    def __init__(self):
        super().__init__(INVALID_CREDENTIALS_MESSAGE)


class AccountStatusError(IdentityError):
    """Credentials were valid but the account status does not permit login"""

    code = "ACCOUNT_NOT_ACTIVE"


class AuthorizationError(IdentityError):
    code = "ACCESS_DENIED"

    def __init__(self, message: str = "You don't have permission to access this resource"):
        super().__init__(message)


class TokenError(IdentityError):
    """Session token signature, expiry or subject check failed"""

    code = "INVALID_TOKEN"
