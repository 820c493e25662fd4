from abc import ABC, abstractmethod
from typing import List, Optional

from identity.domain.entities import User, UserStatus, UserType


class StoreError(Exception):
    """Unexpected persistence failure, deliberately outside the domain taxonomy"""


class UniqueConstraintViolation(Exception):
    """A write collided with a unique index (username or email)"""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Unique constraint violated on {field}")


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by exact username"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by exact email address"""
        pass

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        pass

    @abstractmethod
    async def list_by_type(self, user_type: UserType) -> List[User]:
        pass

    @abstractmethod
    async def list_by_status(self, status: UserStatus) -> List[User]:
        pass

    @abstractmethod
    async def search_by_name(self, name: str) -> List[User]:
        """Case-insensitive substring match on first or last name"""
        pass

    @abstractmethod
    async def search_by_company(self, company_name: str) -> List[User]:
        """Case-insensitive substring match on company name"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user. Raises UniqueConstraintViolation on collision."""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user. Raises UniqueConstraintViolation on collision."""
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Hard-delete a user and its roles"""
        pass
