from typing import Any, Dict

from fastapi import status

from identity.domain.errors import (
    AccountStatusError,
    AuthenticationError,
    AuthorizationError,
    DuplicateResourceError,
    IdentityError,
    NotFoundError,
    TokenError,
    ValidationError,
)

ERROR_STATUS_CODES = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    TokenError: status.HTTP_401_UNAUTHORIZED,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    AccountStatusError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateResourceError: status.HTTP_409_CONFLICT,
}


def status_code_for(exc: IdentityError) -> int:
    for error_class in type(exc).__mro__:
        if error_class in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[error_class]
    return status.HTTP_400_BAD_REQUEST


def error_body(code: str, message: str, **extra: Any) -> Dict[str, Any]:
    error_dict = {"code": code, "message": message}
    error_dict.update(extra)
    return {"error": error_dict}
