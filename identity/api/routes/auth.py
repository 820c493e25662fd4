from fastapi import APIRouter, Depends, status

from identity.app.services.password_hasher import IPasswordHasher
from identity.app.services.token_issuer import ITokenIssuer
from identity.app.services.unit_of_work import UnitOfWork
from identity.app.use_cases.auth import (
    LoginCommand,
    LoginResponse,
    LoginUseCase,
    RegisterCommand,
    RegisterUserUseCase,
)
from identity.app.use_cases.users import UserResponse
from identity.depends import (
    get_login_requires_active_status,
    get_password_hasher,
    get_token_issuer,
    get_unit_of_work,
)

router = APIRouter(prefix="/users", tags=["Authentication"])


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=UserResponse
)
async def register(
    command: RegisterCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Register a new user

    Creates an ACTIVE account holding the USER role.

    Raises:
        - 400 Bad Request: Invalid input
        - 409 Conflict: Username or email already exists
    """
    use_case = RegisterUserUseCase(uow, password_hasher)
    return await use_case.execute(command)


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    command: LoginCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    token_issuer: ITokenIssuer = Depends(get_token_issuer),
    require_active_status: bool = Depends(get_login_requires_active_status),
):
    """
    User login and token generation

    Accepts a username or an email as the identifier.

    Raises:
        - 401 Unauthorized: Invalid credentials (same response whichever part was wrong)
        - 403 Forbidden: Account not active, when status gating is enabled
    """
    use_case = LoginUseCase(uow, password_hasher, token_issuer, require_active_status)
    return await use_case.execute(command.username_or_email, command.password)
