"""
Change User Role Use Cases

Grant or revoke a single role string on a user.
"""

import logging

from identity.app.services.unit_of_work import UnitOfWork
from identity.domain.errors import NotFoundError, ValidationError

from .dtos import UserResponse

logger = logging.getLogger(__name__)


def _clean_role(role: str) -> str:
    cleaned = (role or "").strip()
    if not cleaned:
        raise ValidationError("Role must not be blank")
    if len(cleaned) > 50:
        raise ValidationError("Role must not exceed 50 characters")
    return cleaned


class AddRoleUseCase:
    """
    Business Rules:
    - Roles are a set: granting a held role is a successful no-op
    - The user's existing tokens are unaffected; roles are read per request
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int, role: str) -> UserResponse:
        role = _clean_role(role)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError()

            if user.add_role(role):
                user.touch()
                user = await self.uow.users.update(user)
                await self.uow.commit()
                logger.info(f"Role {role} granted to user {user_id}")

            return UserResponse.from_user(user)


class RemoveRoleUseCase:
    """
    Business Rules:
    - Revoking a role the user does not hold is a successful no-op
    - The role set may become empty
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int, role: str) -> UserResponse:
        role = _clean_role(role)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError()

            if user.remove_role(role):
                user.touch()
                user = await self.uow.users.update(user)
                await self.uow.commit()
                logger.info(f"Role {role} revoked from user {user_id}")

            return UserResponse.from_user(user)
