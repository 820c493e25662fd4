"""
Login Use Case

Verifies credentials and issues a stateless session token.
"""

import logging

from identity.app.services.password_hasher import IPasswordHasher
from identity.app.services.token_issuer import ITokenIssuer
from identity.app.services.unit_of_work import UnitOfWork
from identity.app.use_cases.users.dtos import UserResponse
from identity.domain.entities import UserStatus
from identity.domain.errors import AccountStatusError, AuthenticationError

from .dtos import LoginResponse

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and token issuance.

    Business Rules:
    - Identifier is tried as a username first, then as an email
    - Unknown identity and wrong password fail identically (same error, same
      message, and a dummy hash check keeps the timing the same)
    - Status is only checked when require_active_status is set
    - Updates user.last_login
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        token_issuer: ITokenIssuer,
        require_active_status: bool = False,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer
        self.require_active_status = require_active_status

    async def execute(self, username_or_email: str, password: str) -> LoginResponse:
        """
        Execute login use case.

        Args:
            username_or_email: Username or email address
            password: Plain text password

        Returns:
            LoginResponse with token, token type, expiry and user projection

        Raises:
            AuthenticationError: identity unknown or password wrong
            AccountStatusError: account not ACTIVE while status gating is on
        """
        async with self.uow:
            user = await self.uow.users.get_by_username(username_or_email)
            if user is None:
                user = await self.uow.users.get_by_email(username_or_email)

            if user is None:
                self.password_hasher.verify(password, None)
                logger.warning("Login failed: invalid credentials")
                raise AuthenticationError()

            if not self.password_hasher.verify(password, user.password_hash):
                logger.warning("Login failed: invalid credentials")
                raise AuthenticationError()

            if self.require_active_status and user.status != UserStatus.ACTIVE:
                logger.warning(f"Login refused for user {user.id}: status {user.status.value}")
                raise AccountStatusError(f"User account is {user.status.value.lower()}")

            issued = self.token_issuer.issue(user.id, user.username)

            user.record_login()
            user = await self.uow.users.update(user)
            await self.uow.commit()

            logger.info(f"User logged in: {user.username}")
            return LoginResponse(
                token=issued.token,
                token_type=issued.token_type,
                expires_in=issued.expires_in,
                user=UserResponse.from_user(user),
            )
