from functools import lru_cache

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from identity.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from identity.adapter.services.jose_token_issuer import JoseTokenIssuer
from identity.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from identity.app.services.password_hasher import IPasswordHasher
from identity.app.services.token_issuer import ITokenIssuer

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@lru_cache
def get_password_hasher() -> IPasswordHasher:
    return BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)


@lru_cache
def get_token_issuer() -> ITokenIssuer:
    return JoseTokenIssuer(
        secret=ApplicationConfig.JWT_SECRET,
        algorithm=ApplicationConfig.JWT_ALGORITHM,
        expires_in=ApplicationConfig.JWT_EXPIRATION_SECONDS,
    )


def get_login_requires_active_status() -> bool:
    return ApplicationConfig.LOGIN_REQUIRES_ACTIVE_STATUS
