"""
Identity Domain Enums

All enumeration types used by the user entity.
"""

from enum import Enum


class UserType(str, Enum):
    """Who the account belongs to"""

    INTERNAL = "INTERNAL"  # company staff
    EXTERNAL = "EXTERNAL"  # brand partners


class UserStatus(str, Enum):
    """User account status, any status may move to any other"""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"
    PENDING = "PENDING"
