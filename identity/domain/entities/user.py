"""
User Entity

The single account record of the directory, with its role set stored in a
child table and always loaded together with the user row.
"""

from datetime import datetime
from typing import List, Optional, Set

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from ..base import utcnow
from .enums import UserStatus, UserType

DEFAULT_ROLE = "USER"
ADMIN_ROLE = "ADMIN"


class UserRole(SQLModel, table=True):
    """One role string granted to one user; (user_id, role) is the key"""

    __tablename__ = "user_roles"

    user_id: Optional[int] = Field(
        default=None, foreign_key="users.id", primary_key=True
    )
    role: str = Field(primary_key=True, max_length=50)

    user: Optional["User"] = Relationship(back_populates="role_links")


class User(SQLModel, table=True):
    """
    User entity - one account in the directory.

    Business Rules:
    - Username and email are each unique across all users
    - Password stored as bcrypt hash only, never exposed
    - New accounts are ACTIVE, EXTERNAL and hold exactly the USER role
    - updated_at moves on every mutation, created_at never does
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=50)
    email: str = Field(unique=True, index=True, max_length=100)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)
    company_name: Optional[str] = Field(default=None, max_length=100)
    phone_number: Optional[str] = Field(default=None, max_length=20)

    user_type: UserType = Field(default=UserType.EXTERNAL)
    status: UserStatus = Field(default=UserStatus.ACTIVE)

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )
    last_login: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Relationships
    role_links: List[UserRole] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"lazy": "selectin", "cascade": "all, delete-orphan"},
    )

    __table_args__ = (
        Index("idx_user_status", "status"),
        Index("idx_user_type", "user_type"),
        # ids of deleted users are never handed out again
        {"sqlite_autoincrement": True},
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def roles(self) -> Set[str]:
        return {link.role for link in self.role_links}

    def add_role(self, role: str) -> bool:
        """Grant a role. Returns False when it was already held."""
        if role in self.roles:
            return False
        self.role_links.append(UserRole(role=role))
        return True

    def remove_role(self, role: str) -> bool:
        """Revoke a role. Returns False when it was not held."""
        for link in list(self.role_links):
            if link.role == role:
                self.role_links.remove(link)
                return True
        return False

    def touch(self) -> None:
        self.updated_at = utcnow()

    def record_login(self) -> None:
        self.last_login = utcnow()
        self.updated_at = self.last_login
