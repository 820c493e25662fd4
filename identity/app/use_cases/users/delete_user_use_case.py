import logging

from identity.app.services.unit_of_work import UnitOfWork
from identity.domain.errors import NotFoundError

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Hard-delete a user and its roles; nothing is tombstoned"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int) -> None:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError()

            await self.uow.users.delete(user)
            await self.uow.commit()

            logger.info(f"User deleted: {user_id}")
