from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from identity.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from identity.adapter.services.jose_token_issuer import JoseTokenIssuer
from identity.domain.entities import User, UserRole, UserStatus, UserType

TEST_JWT_SECRET = "unit-test-secret"


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with the users repository"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_username = AsyncMock(return_value=None)
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.exists_by_username = AsyncMock(return_value=False)
    uow.users.exists_by_email = AsyncMock(return_value=False)
    uow.users.list_all = AsyncMock(return_value=[])
    uow.users.list_by_type = AsyncMock(return_value=[])
    uow.users.list_by_status = AsyncMock(return_value=[])
    uow.users.search_by_name = AsyncMock(return_value=[])
    uow.users.search_by_company = AsyncMock(return_value=[])
    uow.users.delete = AsyncMock()

    async def _assign_id(user):
        if user.id is None:
            user.id = 1
        return user

    async def _echo(user):
        return user

    uow.users.create = AsyncMock(side_effect=_assign_id)
    uow.users.update = AsyncMock(side_effect=_echo)

    return uow


@pytest.fixture
def password_hasher():
    # bcrypt's minimum cost keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def token_issuer():
    return JoseTokenIssuer(secret=TEST_JWT_SECRET, expires_in=86400)


@pytest.fixture
def make_user(password_hasher):
    """Build a persisted-looking User entity"""

    def _make(
        user_id: int = 1,
        username: str = "testuser",
        email: str = "test@example.com",
        password: str = "password123",
        roles=("USER",),
        status: UserStatus = UserStatus.ACTIVE,
        **fields,
    ) -> User:
        now = datetime(2024, 1, 1, 12, 0, 0)
        user = User(
            id=user_id,
            username=username,
            email=email,
            password_hash=password_hasher.hash(password),
            first_name=fields.pop("first_name", "Test"),
            last_name=fields.pop("last_name", "User"),
            company_name=fields.pop("company_name", "Test Company"),
            phone_number=fields.pop("phone_number", "1234567890"),
            user_type=fields.pop("user_type", UserType.EXTERNAL),
            status=status,
            created_at=now,
            updated_at=now,
            **fields,
        )
        for role in roles:
            user.role_links.append(UserRole(role=role))
        return user

    return _make
