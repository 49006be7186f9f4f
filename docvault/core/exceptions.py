"""
Exception hierarchy for docvault.

Provides layered exception structure for domain-specific errors. Every
exception carries a machine-readable code and the HTTP status it maps to,
so the API layer can render a uniform error envelope.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DocVaultError(Exception):
    """Base exception for all docvault application errors."""

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(DocVaultError):
    """Raised at startup when required configuration is missing."""

    code = "CONFIGURATION_ERROR"


# Authentication (401)


class AuthenticationError(DocVaultError):
    """Caller could not be authenticated; client must re-authenticate."""

    code = "AUTHENTICATION_ERROR"
    status_code = 401


class AccessDenied(AuthenticationError):
    """Protected route called without an Authorization header."""

    code = "ACCESS_DENIED"

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(message)


class InvalidToken(AuthenticationError):
    """Authorization header present but the bearer token was rejected."""

    code = "INVALID_TOKEN"

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message)


class TokenError(AuthenticationError):
    """Base class for token verification failures."""


class TokenInvalid(TokenError):
    """Bad signature, malformed token, or missing claims."""

    code = "TOKEN_INVALID"

    def __init__(self, message: str = "Token is invalid") -> None:
        super().__init__(message)


class TokenExpired(TokenError):
    """Token is past its expiry instant."""

    code = "TOKEN_EXPIRED"

    def __init__(self, message: str = "Token has expired") -> None:
        super().__init__(message)


class InvalidCredentials(AuthenticationError):
    """Unknown username or wrong password (deliberately indistinguishable)."""

    code = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


# Authorization (403)


class AuthorizationError(DocVaultError):
    """Authenticated caller lacks permission for the operation."""

    code = "AUTHORIZATION_ERROR"
    status_code = 403


# Validation (400)


class ValidationError(DocVaultError):
    """Raised when input validation fails."""

    code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DuplicateUsername(ValidationError):
    """Registration attempted with a username that already exists."""

    code = "DUPLICATE_USERNAME"

    def __init__(self, username: str) -> None:
        super().__init__(f"Username already exists: {username}", field="username")


# Not found (404)


class NotFoundError(DocVaultError):
    """Requested resource does not exist (or is not visible to the caller)."""

    code = "NOT_FOUND"
    status_code = 404

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        message = f"{resource} not found"
        if identifier is not None:
            message += f": {identifier}"
        super().__init__(message, details)


class DocumentNotFoundError(NotFoundError):
    """Raised when a document cannot be found for the caller's company."""

    def __init__(self, document_id: int) -> None:
        super().__init__("Document", document_id, {"document_id": document_id})


class UserNotFoundError(NotFoundError):
    """Raised when a user id does not resolve."""

    def __init__(self, user_id: int) -> None:
        super().__init__("User", user_id, {"user_id": user_id})


class BlobNotFoundError(NotFoundError):
    """Raised when a blob key has no object in storage."""

    def __init__(self, key: str) -> None:
        super().__init__("Blob", key, {"key": key})


# Dependency failures (500)


class DependencyError(DocVaultError):
    """A backing service (database, object storage) failed."""

    code = "DEPENDENCY_ERROR"
    status_code = 500


class DatabaseError(DependencyError):
    """Raised when a relational store operation fails."""

    code = "DATABASE_ERROR"


class StorageError(DependencyError):
    """Raised when an object storage operation fails."""

    code = "STORAGE_ERROR"

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            operation: Operation that failed (put, get, ping)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
