"""
Use Cases

Organized into domain folders:
- auth/: Registration and login
- users/: Lookups, profile, status and role management
"""

from .auth import (
    LoginCommand,
    LoginResponse,
    LoginUseCase,
    RegisterCommand,
    RegisterUserUseCase,
    UpdateLastLoginUseCase,
)
from .users import (
    AddRoleUseCase,
    DeleteUserUseCase,
    GetUserByEmailUseCase,
    GetUserByIdUseCase,
    GetUserByUsernameUseCase,
    ListUsersUseCase,
    LoadContextUseCase,
    RemoveRoleUseCase,
    SearchUsersByCompanyUseCase,
    SearchUsersByNameUseCase,
    UpdateProfileCommand,
    UpdateProfileUseCase,
    UpdateStatusUseCase,
    UserResponse,
)

__all__ = [
    # Auth
    "RegisterUserUseCase",
    "RegisterCommand",
    "LoginUseCase",
    "LoginCommand",
    "LoginResponse",
    "UpdateLastLoginUseCase",
    # Users
    "GetUserByIdUseCase",
    "GetUserByUsernameUseCase",
    "GetUserByEmailUseCase",
    "ListUsersUseCase",
    "SearchUsersByNameUseCase",
    "SearchUsersByCompanyUseCase",
    "UpdateProfileUseCase",
    "UpdateProfileCommand",
    "DeleteUserUseCase",
    "UpdateStatusUseCase",
    "AddRoleUseCase",
    "RemoveRoleUseCase",
    "LoadContextUseCase",
    "UserResponse",
]
