from identity.app.services.unit_of_work import UnitOfWork
from identity.domain.errors import NotFoundError


class UpdateLastLoginUseCase:
    """
    Stamp last_login without going through credential checks.

    Used by system callers that track logins outside LoginUseCase.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int) -> None:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError()

            user.record_login()
            await self.uow.users.update(user)
            await self.uow.commit()
