from abc import ABC, abstractmethod
from datetime import datetime

from pydantic import BaseModel


class IssuedToken(BaseModel):
    """A freshly signed session token and how long it lives"""

    token: str
    token_type: str = "Bearer"
    expires_in: int  # seconds


class TokenClaims(BaseModel):
    """Identity extracted from a validated token"""

    user_id: int
    username: str
    expires_at: datetime


class ITokenIssuer(ABC):
    """Stateless signed session tokens; there is no server-side revocation"""

    @abstractmethod
    def issue(self, user_id: int, username: str) -> IssuedToken:
        pass

    @abstractmethod
    def validate(self, token: str) -> TokenClaims:
        """Verify signature and expiry. Raises TokenError."""
        pass
