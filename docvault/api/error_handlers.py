"""
Global error handlers.

Renders every failure as the structured error envelope
{"success": false, "error": {"kind", "message", "details"}, "path"}.

Dependencies: fastapi, starlette, docvault.core.exceptions
System role: Error to HTTP response mapping
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from docvault.core.exceptions import DependencyError, DocVaultError
from docvault.models.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)

HTTP_ERROR_KINDS = {
    400: "VALIDATION_ERROR",
    401: "AUTHENTICATION_ERROR",
    403: "AUTHORIZATION_ERROR",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def error_response(
    request: Request,
    status_code: int,
    kind: str,
    message: str,
    details: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the error envelope response."""
    body = ErrorResponse(
        error=ErrorDetail(kind=kind, message=message, details=details or None),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body),
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register error handlers with FastAPI app."""

    @app.exception_handler(DocVaultError)
    async def docvault_exception_handler(request: Request, exc: DocVaultError):
        """Handle application exceptions."""
        if isinstance(exc, DependencyError) or exc.status_code >= 500:
            logger.error(
                f"{exc.code}: {exc.message}",
                exc_info=exc,
                extra={"path": request.url.path, "details": exc.details},
            )
        else:
            logger.info(
                f"{exc.code}: {exc.message}",
                extra={"path": request.url.path, "status_code": exc.status_code},
            )

        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return error_response(
            request,
            exc.status_code,
            exc.code,
            exc.message,
            exc.details,
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Handle malformed request bodies and parameters."""
        errors = jsonable_encoder(exc.errors(), exclude={"input", "ctx"})
        logger.info(
            "Request validation failed",
            extra={"path": request.url.path, "error_count": len(errors)},
        )
        return error_response(
            request,
            400,
            "VALIDATION_ERROR",
            "Request validation failed",
            {"errors": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle framework HTTP errors (unknown routes, wrong methods)."""
        kind = HTTP_ERROR_KINDS.get(exc.status_code, "HTTP_ERROR")
        return error_response(
            request,
            exc.status_code,
            kind,
            str(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(f"Unexpected error: {exc}", exc_info=exc)
        return error_response(
            request,
            500,
            "INTERNAL_ERROR",
            "An unexpected error occurred",
        )
