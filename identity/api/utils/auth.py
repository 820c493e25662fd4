"""
Bearer Token Authentication

Resolves the Authorization header into a CallerContext and applies the
authorization guard's rules as FastAPI dependencies.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from identity.app.services.authorization import AccessRule, CallerContext, authorize
from identity.app.services.token_issuer import ITokenIssuer
from identity.app.services.unit_of_work import UnitOfWork
from identity.app.use_cases.users import LoadContextUseCase
from identity.depends import get_token_issuer, get_unit_of_work
from identity.domain.errors import TokenError

security = HTTPBearer(auto_error=False)


async def get_current_caller(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_issuer: ITokenIssuer = Depends(get_token_issuer),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> CallerContext:
    """
    Dependency to validate the bearer token and load the caller.

    Raises:
        TokenError: 401 if the header is missing or the token is invalid,
            expired, or names a deleted user
    """
    if credentials is None:
        raise TokenError("Bearer token required", code="TOKEN_MISSING")

    claims = token_issuer.validate(credentials.credentials)
    return await LoadContextUseCase(uow).execute(claims.user_id, claims.username)


async def require_admin(
    caller: CallerContext = Depends(get_current_caller),
) -> CallerContext:
    """Dependency for admin-only endpoints (403 otherwise)"""
    authorize(caller, AccessRule.ADMIN_ONLY)
    return caller
