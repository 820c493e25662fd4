from typing import Optional

import bcrypt

from identity.app.services.password_hasher import IPasswordHasher

BCRYPT_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    # bcrypt only consumes the first 72 bytes; newer releases reject longer input
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


class BcryptPasswordHasher(IPasswordHasher):
    """
    bcrypt hasher with a tunable cost factor.

    Default cost is 12; tests use the bcrypt minimum of 4.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self._dummy_hash = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(_encode(password), bcrypt.gensalt(self.rounds)).decode("utf-8")

    def verify(self, password: str, password_hash: Optional[str]) -> bool:
        if password_hash is None:
            # Unknown account: burn one real check against the dummy digest
            bcrypt.checkpw(_encode(password), self._dummy_hash)
            return False
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
