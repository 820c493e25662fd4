from typing import List, Optional

from sqlmodel import or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from identity.adapter.repositories.errors import translate_store_errors
from identity.app.repositories.user_repository import IUserRepository
from identity.domain.entities import User, UserStatus, UserType


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        return await self._one_or_none(stmt)

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by exact username"""
        stmt = select(User).where(User.username == username)
        return await self._one_or_none(stmt)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by exact email address"""
        stmt = select(User).where(User.email == email)
        return await self._one_or_none(stmt)

    async def exists_by_username(self, username: str) -> bool:
        stmt = select(User.id).where(User.username == username).limit(1)
        return await self._exists(stmt)

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(User.id).where(User.email == email).limit(1)
        return await self._exists(stmt)

    async def list_all(self) -> List[User]:
        return await self._all(select(User))

    async def list_by_type(self, user_type: UserType) -> List[User]:
        return await self._all(select(User).where(User.user_type == user_type))

    async def list_by_status(self, status: UserStatus) -> List[User]:
        return await self._all(select(User).where(User.status == status))

    async def search_by_name(self, name: str) -> List[User]:
        stmt = select(User).where(
            or_(
                User.first_name.icontains(name, autoescape=True),
                User.last_name.icontains(name, autoescape=True),
            )
        )
        return await self._all(stmt)

    async def search_by_company(self, company_name: str) -> List[User]:
        stmt = select(User).where(
            User.company_name.icontains(company_name, autoescape=True)
        )
        return await self._all(stmt)

    async def create(self, user: User) -> User:
        """Create a new user; the flush surfaces unique index collisions"""
        with translate_store_errors():
            self.session.add(user)
            await self.session.flush()
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        with translate_store_errors():
            self.session.add(user)
            await self.session.flush()
        return user

    async def delete(self, user: User) -> None:
        """Hard-delete user; role rows go with it (delete-orphan cascade)"""
        with translate_store_errors():
            await self.session.delete(user)
            await self.session.flush()

    async def _one_or_none(self, stmt) -> Optional[User]:
        with translate_store_errors():
            result = await self.session.exec(stmt)
            return result.one_or_none()

    async def _exists(self, stmt) -> bool:
        with translate_store_errors():
            result = await self.session.exec(stmt)
            return result.first() is not None

    async def _all(self, stmt) -> List[User]:
        with translate_store_errors():
            result = await self.session.exec(stmt.order_by(User.id))
            return list(result.all())
