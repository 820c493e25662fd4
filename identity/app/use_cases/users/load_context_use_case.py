"""
Load Context Use Case

Resolves the subject of a validated token into the caller context used by
the authorization guard.
"""

from identity.app.services.authorization import CallerContext
from identity.app.services.unit_of_work import UnitOfWork
from identity.domain.errors import TokenError


class LoadContextUseCase:
    """
    Business Rules:
    - Token carries user_id; roles are always read fresh from the store, so a
      role change takes effect on the next request
    - A token whose user has since been deleted is rejected, and so is one
      whose subject username no longer matches the row behind its user_id
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int, username: str) -> CallerContext:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None or user.username != username:
                raise TokenError("Token subject no longer exists")

            return CallerContext(
                user_id=user.id, username=user.username, roles=user.roles
            )
