from abc import ABC, abstractmethod

from identity.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """
    Transaction boundary for the identity use cases.

    A use case opens it with `async with`, reads and writes through `users`
    and calls commit() at most once. Leaving the block without a commit
    discards every pending change, so a failed operation writes nothing.
    """

    users: IUserRepository

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWork":
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc, tb) -> None:
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Persist pending changes; raises UniqueConstraintViolation or StoreError"""

    @abstractmethod
    async def rollback(self) -> None:
        pass
