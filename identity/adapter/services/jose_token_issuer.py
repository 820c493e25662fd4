from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError

from identity.app.services.token_issuer import IssuedToken, ITokenIssuer, TokenClaims
from identity.domain.errors import TokenError


class JoseTokenIssuer(ITokenIssuer):
    """
    JWT session tokens signed with a shared secret.

    Claims: sub (username), user_id, iat, exp. Expiry is a fixed window from
    issuance; there is no refresh or revocation.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_in: int = 86400):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    def issue(self, user_id: int, username: str) -> IssuedToken:
        """
        Generate a session token

        Args:
            user_id: User ID
            username: Username, carried as the subject claim

        Returns:
            IssuedToken with the encoded JWT and its lifetime in seconds
        """
        now = datetime.now(UTC)
        payload = {
            "sub": username,
            "user_id": user_id,
            "exp": now + timedelta(seconds=self.expires_in),
            "iat": now,
        }
        token = jwt.encode(payload, self.secret, algorithm=self.algorithm)
        return IssuedToken(token=token, expires_in=self.expires_in)

    def validate(self, token: str) -> TokenClaims:
        """
        Verify and decode a session token

        Raises:
            TokenError: expired, badly signed or malformed token
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise TokenError("Token has expired", code="TOKEN_EXPIRED") from exc
        except JWTError as exc:
            raise TokenError("Invalid token") from exc

        user_id = payload.get("user_id")
        username = payload.get("sub")
        if not isinstance(user_id, int) or not username:
            raise TokenError("Invalid token")

        return TokenClaims(
            user_id=user_id,
            username=username,
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )
