"""
Get User Use Cases

Single-user lookups by ID, username or email.
"""

from identity.app.services.unit_of_work import UnitOfWork
from identity.domain.errors import NotFoundError

from .dtos import UserResponse


class GetUserByIdUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int) -> UserResponse:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError()
            return UserResponse.from_user(user)


class GetUserByUsernameUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: str) -> UserResponse:
        async with self.uow:
            user = await self.uow.users.get_by_username(username)
            if user is None:
                raise NotFoundError()
            return UserResponse.from_user(user)


class GetUserByEmailUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str) -> UserResponse:
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                raise NotFoundError()
            return UserResponse.from_user(user)
