"""
Session tokens.

Issues and verifies HMAC-signed JWTs carrying the account id and email.
Tokens are stateless: validity depends only on signature and expiry, and
there is no server-side revocation.

Dependencies: PyJWT, backend.models.auth
System role: Token issuer and verifier
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import ValidationError

from backend.core.exceptions import InvalidTokenError
from backend.models.auth import TokenPayload


class TokenService:
    """Issue and verify signed, time-limited session tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: int = 3600,
    ) -> None:
        """
        Args:
            secret: HMAC signing secret
            algorithm: JWT algorithm
            expires_in: Token lifetime in seconds
        """
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    def issue(self, user_id: str, email: str, now: datetime | None = None) -> str:
        """
        Create a signed token for an account.

        Args:
            user_id: Account identifier (stringified ObjectId)
            email: Account email
            now: Issue time (defaults to current UTC time)

        Returns:
            str: Encoded JWT
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "user_id": str(user_id),
            "email": email,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + timedelta(seconds=self.expires_in)).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenPayload:
        """
        Decode a token after checking signature and expiry.

        Raises:
            InvalidTokenError: If the token is expired, tampered with or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError("Invalid token", details={"reason": str(e)}) from e
        try:
            return TokenPayload(**payload)
        except ValidationError as e:
            raise InvalidTokenError("Invalid token", details={"reason": "missing claims"}) from e
