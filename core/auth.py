"""
Token-based authentication.
The signing secret comes from Settings and is passed in explicitly.
"""
import hmac
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import jwt

from core.config import Settings
from core.exceptions import AuthenticationError
from core.logger import setup_logger
from core.schema import Caller

logger = setup_logger(__name__)

JWT_ALGORITHM = "HS256"


class TokenService:
    """Issues and verifies signed session tokens."""

    def __init__(
        self,
        secret: str,
        issuer: str = "pillar-bank",
        ttl_minutes: int = 15,
        credentials: Optional[Dict[str, str]] = None
    ):
        """
        Initialize token service.

        Args:
            secret: HMAC signing key
            issuer: Value for the iss claim, checked on verification
            ttl_minutes: Token lifetime
            credentials: username -> password pairs accepted at login
        """
        self._secret = secret
        self.issuer = issuer
        self.ttl = timedelta(minutes=ttl_minutes)
        self._credentials = credentials or {}

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            issuer=settings.jwt_issuer,
            ttl_minutes=settings.token_ttl_minutes,
            credentials=settings.credentials(),
        )

    def create_token(self, username: str, now: Optional[datetime] = None) -> str:
        """
        Create a signed token for username.

        Args:
            username: Subject of the token
            now: Issue time (defaults to current UTC time)

        Returns:
            Encoded JWT string
        """
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": username,
            "iss": self.issuer,
            "iat": issued_at,
            "exp": issued_at + self.ttl,
        }
        token = jwt.encode(claims, self._secret, algorithm=JWT_ALGORITHM)
        logger.debug(f"Issued token for {username}")
        return token

    def verify_token(self, token: str) -> Caller:
        """
        Verify a token and return the caller it identifies.

        Raises:
            AuthenticationError: If the token is expired, tampered with or malformed
        """
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                issuer=self.issuer,
                options={"require": ["sub", "exp", "iss"]},
            )
        except jwt.PyJWTError as e:
            logger.warning(f"Token verification failed: {e}")
            raise AuthenticationError("Invalid token", details={"error": str(e)})

        return Caller(
            username=claims["sub"],
            issuer=claims["iss"],
            expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
        )

    def check_credentials(self, username: str, password: str) -> bool:
        """Check a username/password pair against the configured users."""
        expected = self._credentials.get(username)
        if expected is None:
            return False
        return hmac.compare_digest(expected.encode(), password.encode())
