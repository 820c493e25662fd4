"""
List / Search Users Use Cases

Read-only projections over the whole directory. No pagination.
"""

from typing import List, Optional, Union

from identity.app.services.unit_of_work import UnitOfWork
from identity.domain.entities import UserStatus, UserType
from identity.domain.errors import ValidationError

from .dtos import UserResponse, parse_enum


class ListUsersUseCase:
    """
    List users, optionally narrowed to one user type or one status.

    Filters arrive as raw strings from query parameters, so unknown values
    are reported as ValidationError rather than silently ignored.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_type: Optional[Union[UserType, str]] = None,
        status: Optional[Union[UserStatus, str]] = None,
    ) -> List[UserResponse]:
        if user_type is not None and status is not None:
            raise ValidationError("Filter by user type or by status, not both")

        async with self.uow:
            if user_type is not None:
                users = await self.uow.users.list_by_type(parse_enum(UserType, user_type))
            elif status is not None:
                users = await self.uow.users.list_by_status(parse_enum(UserStatus, status))
            else:
                users = await self.uow.users.list_all()
            return [UserResponse.from_user(u) for u in users]


class SearchUsersByNameUseCase:
    """Case-insensitive substring search on first or last name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, name: str) -> List[UserResponse]:
        async with self.uow:
            users = await self.uow.users.search_by_name(name)
            return [UserResponse.from_user(u) for u in users]


class SearchUsersByCompanyUseCase:
    """Case-insensitive substring search on company name"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, company_name: str) -> List[UserResponse]:
        async with self.uow:
            users = await self.uow.users.search_by_company(company_name)
            return [UserResponse.from_user(u) for u in users]

