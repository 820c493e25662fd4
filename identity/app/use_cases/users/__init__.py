"""
User Management Use Cases
"""

from .change_role_use_case import AddRoleUseCase, RemoveRoleUseCase
from .delete_user_use_case import DeleteUserUseCase
from .dtos import UpdateProfileCommand, UserResponse
from .get_user_use_case import (
    GetUserByEmailUseCase,
    GetUserByIdUseCase,
    GetUserByUsernameUseCase,
)
from .list_users_use_case import (
    ListUsersUseCase,
    SearchUsersByCompanyUseCase,
    SearchUsersByNameUseCase,
)
from .load_context_use_case import LoadContextUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .update_status_use_case import UpdateStatusUseCase

__all__ = [
    # Use Cases
    "GetUserByIdUseCase",
    "GetUserByUsernameUseCase",
    "GetUserByEmailUseCase",
    "ListUsersUseCase",
    "SearchUsersByNameUseCase",
    "SearchUsersByCompanyUseCase",
    "UpdateProfileUseCase",
    "DeleteUserUseCase",
    "UpdateStatusUseCase",
    "AddRoleUseCase",
    "RemoveRoleUseCase",
    "LoadContextUseCase",
    # DTOs
    "UpdateProfileCommand",
    "UserResponse",
]
