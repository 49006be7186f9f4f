"""
Authorization guard.

FastAPI dependencies that authenticate the bearer token before any handler
or session-opening dependency runs. The guard only verifies the token: it
never touches the database or object storage.

Dependencies: fastapi, docvault.core
System role: Authentication gate for protected routers
"""

import logging

from fastapi import Depends, Request

from docvault.api.deps.dependencies import get_token_verifier
from docvault.core.exceptions import (
    AccessDenied,
    AuthorizationError,
    InvalidToken,
    TokenError,
    TokenExpired,
)
from docvault.core.security import Claim, TokenVerifier
from docvault.boundary.db.models.user_model import UserRole

logger = logging.getLogger(__name__)


def extract_bearer_token(authorization: str) -> str:
    """
    Extract the token from an Authorization header value.

    Raises:
        InvalidToken: If the header is not "Bearer <token>"
    """
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token or " " in token:
        raise InvalidToken("Invalid token: expected 'Bearer <token>'")
    return token


def require_claim(
    request: Request,
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> Claim:
    """
    Authenticate the request.

    Args:
        request: Incoming request
        verifier: Token verifier (injected via Depends)

    Returns:
        Claim: Verified caller identity, also stored on request.state.claim

    Raises:
        AccessDenied: If no Authorization header is present
        InvalidToken: If the token is malformed, forged or expired
    """
    authorization = request.headers.get("Authorization")
    if not authorization:
        raise AccessDenied()

    token = extract_bearer_token(authorization)
    try:
        claim = verifier.verify(token)
    except TokenExpired as e:
        raise InvalidToken("Invalid token: token has expired") from e
    except TokenError as e:
        raise InvalidToken() from e

    request.state.claim = claim
    return claim


def require_operator(claim: Claim = Depends(require_claim)) -> Claim:
    """
    Require an operator role on top of a valid token.

    Raises:
        AuthorizationError: If the caller is not an operator
    """
    if claim.role != UserRole.OPERATOR.value:
        logger.info("Operator route refused", extra={"user_id": claim.user_id})
        raise AuthorizationError("Operator role required")
    return claim
