import logging
from typing import Union

from identity.app.services.unit_of_work import UnitOfWork
from identity.domain.entities import UserStatus
from identity.domain.errors import NotFoundError

from .dtos import UserResponse, parse_enum

logger = logging.getLogger(__name__)


class UpdateStatusUseCase:
    """
    Use case for changing a user's account status.

    There is no transition table: any status may move to any other.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int, status: Union[UserStatus, str]) -> UserResponse:
        new_status = parse_enum(UserStatus, status)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError()

            old_status = user.status
            user.status = new_status
            user.touch()
            user = await self.uow.users.update(user)
            await self.uow.commit()

            logger.info(
                f"User {user_id} status changed: {old_status.value} -> {new_status.value}"
            )
            return UserResponse.from_user(user)
