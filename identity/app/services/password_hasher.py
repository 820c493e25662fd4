from abc import ABC, abstractmethod
from typing import Optional


class IPasswordHasher(ABC):
    """
    One-way password hashing.

    hash() is salted, so hashing the same password twice gives two different
    digests; verify() is the only way to compare.
    """

    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: Optional[str]) -> bool:
        """
        Constant-time check of password against password_hash.

        A None hash burns the same work against a dummy digest and returns
        False, so callers can hide whether the account exists.
        """
        pass
