import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from tests.utils.api_helpers import TEST_JWT_SECRET, register_and_login
from identity.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from identity.adapter.services.jose_token_issuer import JoseTokenIssuer
from identity.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from identity.app.use_cases.users import AddRoleUseCase
from identity.depends import get_password_hasher, get_token_issuer, get_unit_of_work


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from httpx import ASGITransport
    from identity.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_hasher] = lambda: BcryptPasswordHasher(rounds=4)
    app.dependency_overrides[get_token_issuer] = lambda: JoseTokenIssuer(secret=TEST_JWT_SECRET)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def admin(client, db_session, test_data):
    """A registered user promoted to ADMIN, with bearer headers"""
    account = await register_and_login(client, test_data.get_copy("admin_registration"))
    await AddRoleUseCase(SqlAlchemyUnitOfWork(db_session)).execute(account["id"], "ADMIN")
    return account


@pytest_asyncio.fixture
async def alice(client, test_data):
    return await register_and_login(client, test_data.get_copy("alice_registration"))
