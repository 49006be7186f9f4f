"""
Auth API endpoints.

Routes:
- POST /register - Create a user in an existing company
- POST /login - Exchange credentials for a session token
- GET /validate-token - Echo the verified claim of the presented token
- GET /user - Current user record

Dependencies: docvault.application.services, docvault.api.deps, docvault.models
System role: Authentication HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status

from docvault.api.deps import (
    get_credential_store,
    get_token_service,
    require_claim,
)
from docvault.application.services import CredentialStore
from docvault.core.security import Claim, TokenService
from docvault.models.auth import (
    ClaimResponse,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
    UserResponse,
    ValidateTokenResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

protected_router = APIRouter(tags=["auth"], dependencies=[Depends(require_claim)])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterRequest,
    credentials: CredentialStore = Depends(get_credential_store),
) -> RegisterResponse:
    """
    Register a member user.

    Args:
        request: Username, password and company id
        credentials: Injected credential store

    Returns:
        RegisterResponse: Confirmation with the new user id

    Raises:
        DuplicateUsername: 400 if the username is taken
        ValidationError: 400 if the company does not exist
    """
    user_id = await credentials.register(
        username=request.username,
        raw_password=request.password,
        company_id=request.company_id,
    )
    return RegisterResponse(user_id=user_id)


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    credentials: CredentialStore = Depends(get_credential_store),
    tokens: TokenService = Depends(get_token_service),
) -> TokenResponse:
    """
    Verify credentials and issue a session token.

    Raises:
        InvalidCredentials: 401 for unknown user or wrong password alike
    """
    user = await credentials.verify(request.username, request.password)
    token = tokens.issue(user.id, user.company_id, user.role)
    logger.info("User logged in", extra={"user_id": user.id, "company_id": user.company_id})
    return TokenResponse(
        token=token,
        expires_in=int(tokens.lifetime.total_seconds()),
    )


@protected_router.get("/validate-token", response_model=ValidateTokenResponse)
async def validate_token(claim: Claim = Depends(require_claim)) -> ValidateTokenResponse:
    """Return the decoded claim of a valid token."""
    return ValidateTokenResponse(user=ClaimResponse(**claim.to_dict()))


@protected_router.get("/user", response_model=UserResponse)
async def current_user(
    claim: Claim = Depends(require_claim),
    credentials: CredentialStore = Depends(get_credential_store),
) -> UserResponse:
    """
    Get the authenticated user's record.

    Raises:
        UserNotFoundError: 404 if the user was deleted after the token was issued
    """
    user = await credentials.get_user(claim.user_id)
    return UserResponse.model_validate(user)
