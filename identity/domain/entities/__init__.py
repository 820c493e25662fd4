"""
Identity Domain Entities
"""

from .enums import UserStatus, UserType
from .user import ADMIN_ROLE, DEFAULT_ROLE, User, UserRole

__all__ = [
    # Enums
    "UserStatus",
    "UserType",
    # Role names
    "ADMIN_ROLE",
    "DEFAULT_ROLE",
    # Entities
    "User",
    "UserRole",
]
