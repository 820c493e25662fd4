import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from identity.adapter.repositories.errors import translate_store_errors
from identity.adapter.repositories.user_repository import UserRepository
from identity.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    One AsyncSession transaction per use case.

    Exit always rolls back. After a successful commit there is nothing left
    to discard, so the rollback only matters for failed operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self) -> "SqlAlchemyUnitOfWork":
        self.users = UserRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None and self.session.in_transaction():
            logger.debug(f"Discarding uncommitted changes after {exc_type.__name__}")
        await self.rollback()

    async def commit(self) -> None:
        with translate_store_errors():
            await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()
