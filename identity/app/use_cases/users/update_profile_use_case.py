import logging

from identity.app.repositories.user_repository import UniqueConstraintViolation
from identity.app.services.password_hasher import IPasswordHasher
from identity.app.services.unit_of_work import UnitOfWork
from identity.domain.errors import DuplicateResourceError, NotFoundError

from .dtos import UpdateProfileCommand, UserResponse

logger = logging.getLogger(__name__)


class UpdateProfileUseCase:
    """
    Use case for updating a user's profile.

    Business Rules:
    - Profile fields and email are overwritten from the command
    - Password is re-hashed only when a non-blank one is supplied
    - A changed email must still be unique; a collision at write time is
      reported the same way as the pre-check
    """

    def __init__(self, uow: UnitOfWork, password_hasher: IPasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    async def execute(self, user_id: int, command: UpdateProfileCommand) -> UserResponse:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError()

            if command.email != user.email:
                if await self.uow.users.exists_by_email(command.email):
                    raise DuplicateResourceError("email")
                user.email = command.email

            user.first_name = command.first_name
            user.last_name = command.last_name
            user.company_name = command.company_name
            user.phone_number = command.phone_number
            if command.user_type is not None:
                user.user_type = command.user_type

            if command.password and command.password.strip():
                user.password_hash = self.password_hasher.hash(command.password)

            user.touch()

            try:
                user = await self.uow.users.update(user)
                await self.uow.commit()
            except UniqueConstraintViolation as exc:
                raise DuplicateResourceError(exc.field) from exc

            logger.info(f"User profile updated: {user.id}")
            return UserResponse.from_user(user)
