"""
Authentication Use Cases

Registration, login and login bookkeeping.
"""

from .dtos import LoginCommand, LoginResponse, RegisterCommand
from .login_use_case import LoginUseCase
from .register_user_use_case import RegisterUserUseCase
from .update_last_login_use_case import UpdateLastLoginUseCase

__all__ = [
    # Use Cases
    "RegisterUserUseCase",
    "LoginUseCase",
    "UpdateLastLoginUseCase",
    # DTOs - Commands
    "RegisterCommand",
    "LoginCommand",
    # DTOs - Responses
    "LoginResponse",
]
