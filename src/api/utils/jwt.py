from datetime import UTC, datetime, timedelta
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from pydantic import ValidationError

from src.domain.base import AuthContext

ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(days=7)


class InvalidTokenError(Exception):
    """Signature mismatch, malformed token and expiry all look the same"""

    def __init__(self):
        super().__init__("Invalid token")


class TokenCodec:
    """
    Issues and verifies session credentials (HS256 JWT).

    Args:
        secret: Signing key, must be non-empty
        ttl: Default lifetime of issued tokens

    Raises:
        ValueError: if secret is missing or empty
    """

    def __init__(self, secret: Optional[str], ttl: timedelta = DEFAULT_TTL):
        if not secret:
            raise ValueError("JWT_SECRET missing")
        self._secret = secret
        self.ttl = ttl

    def issue(self, claims: Dict[str, Any], ttl: Optional[timedelta] = None) -> str:
        """
        Generate a signed token

        Args:
            claims: Identity claims (userId, email)
            ttl: Lifetime override, defaults to self.ttl

        Returns:
            JWT token string
        """
        now = datetime.now(UTC)
        payload = {
            **claims,
            "iat": now,
            "exp": now + (ttl if ttl is not None else self.ttl),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def issue_for(self, user_id: int, email: str) -> str:
        return self.issue({"userId": user_id, "email": email})

    def verify(self, token: str) -> AuthContext:
        """
        Verify and decode a token

        Returns:
            AuthContext built from the embedded claims

        Raises:
            InvalidTokenError: on any failure
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[ALGORITHM])
            return AuthContext.model_validate(payload)
        except (JWTError, ValidationError) as exc:
            raise InvalidTokenError() from exc
