"""Password verifiers and session tokens."""

from docvault.core.security.passwords import PasswordHasher
from docvault.core.security.tokens import Claim, TokenService, TokenVerifier

__all__ = ["Claim", "PasswordHasher", "TokenService", "TokenVerifier"]
