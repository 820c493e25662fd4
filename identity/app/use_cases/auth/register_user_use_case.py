import logging

from identity.app.repositories.user_repository import UniqueConstraintViolation
from identity.app.services.password_hasher import IPasswordHasher
from identity.app.services.unit_of_work import UnitOfWork
from identity.app.use_cases.users.dtos import UserResponse
from identity.domain.entities import DEFAULT_ROLE, User, UserRole, UserStatus
from identity.domain.errors import DuplicateResourceError

from .dtos import RegisterCommand

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """
    Register User Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: UserResponse (sanitized projection)

    Business Logic:
    1. Reject a taken username, then a taken email (DuplicateResourceError)
    2. Hash password
    3. Create User with status=ACTIVE and roles={USER}
    4. Commit; a unique index collision at write time is reported exactly
       like the pre-check, since two registrations can race past it
    """

    def __init__(self, uow: UnitOfWork, password_hasher: IPasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    async def execute(self, command: RegisterCommand) -> UserResponse:
        async with self.uow:
            if await self.uow.users.exists_by_username(command.username):
                raise DuplicateResourceError("username")
            if await self.uow.users.exists_by_email(command.email):
                raise DuplicateResourceError("email")

            user = User(
                username=command.username,
                email=command.email,
                password_hash=self.password_hasher.hash(command.password),
                first_name=command.first_name,
                last_name=command.last_name,
                company_name=command.company_name,
                phone_number=command.phone_number,
                user_type=command.user_type,
                status=UserStatus.ACTIVE,
                role_links=[UserRole(role=DEFAULT_ROLE)],
            )

            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except UniqueConstraintViolation as exc:
                raise DuplicateResourceError(exc.field) from exc

            logger.info(f"User registered: {user.username}")
            return UserResponse.from_user(user)
