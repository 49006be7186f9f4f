"""
Session tokens.

Issues and verifies HS256 JWTs carrying the user id, company id and role.
Verification is stateless: there is no revocation list, so a token stays
valid until it expires. Callers depend on the TokenVerifier protocol so a
revocation-aware verifier can be substituted later.

Dependencies: PyJWT
System role: Token service for the authorization guard
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Protocol

import jwt

from docvault.core.exceptions import TokenExpired, TokenInvalid

logger = logging.getLogger(__name__)

DEFAULT_LIFETIME = timedelta(hours=1)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Claim:
    """
    Verified identity extracted from a session token.

    Attributes:
        user_id: Authenticated user id
        company_id: Tenant the user belongs to
        role: User role ("member" or "operator")
        expires_at: Token expiry instant (UTC)
    """

    user_id: int
    company_id: int
    role: str
    expires_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Serialize claim for API responses."""
        return {
            "id": self.user_id,
            "company_id": self.company_id,
            "role": self.role,
            "exp": int(self.expires_at.timestamp()),
        }


class TokenVerifier(Protocol):
    """Anything that can turn a bearer token into a Claim."""

    def verify(self, token: str) -> Claim:
        """Return the verified claim or raise a TokenError."""
        ...


class TokenService:
    """Issue and verify signed, time-limited session tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        lifetime: timedelta = DEFAULT_LIFETIME,
        clock: Clock = utc_now,
    ) -> None:
        """
        Initialize token service.

        Args:
            secret: HMAC signing secret
            algorithm: JWT algorithm
            lifetime: Time from issue to expiry
            clock: Returns the current aware datetime (injectable for tests)
        """
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self.lifetime = lifetime
        self._clock = clock

    def issue(self, user_id: int, company_id: int, role: str = "member") -> str:
        """
        Create a signed token for a verified login.

        Args:
            user_id: User primary key
            company_id: Tenant id of the user
            role: User role

        Returns:
            Encoded JWT string
        """
        now = self._clock().timestamp()
        payload = {
            "sub": str(user_id),
            "company_id": company_id,
            "role": role,
            "iat": int(now),
            # Rounded up so the token never expires before its full lifetime
            "exp": math.ceil(now + self.lifetime.total_seconds()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Claim:
        """
        Verify signature and expiry, then decode the claim.

        Expiry is checked against the injected clock: the token is rejected
        at and after its exp instant.

        Args:
            token: Encoded JWT

        Returns:
            Claim: Verified identity

        Raises:
            TokenExpired: If now >= exp
            TokenInvalid: If the signature or payload is bad
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "require": ["exp", "sub", "company_id"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as e:
            logger.info("Token rejected", extra={"reason": type(e).__name__})
            raise TokenInvalid() from e

        try:
            expires_at = int(payload["exp"])
            user_id = int(payload["sub"])
            company_id = int(payload["company_id"])
        except (TypeError, ValueError) as e:
            raise TokenInvalid("Token payload is malformed") from e

        if self._clock().timestamp() >= expires_at:
            raise TokenExpired()

        return Claim(
            user_id=user_id,
            company_id=company_id,
            role=str(payload.get("role", "member")),
            expires_at=datetime.fromtimestamp(expires_at, tz=timezone.utc),
        )
