"""API routers."""

from .auth import protected_router as auth_protected_router
from .auth import router as auth_router
from .documents import router as documents_router
from .health import router as health_router
from .productions import router as productions_router
from .status import router as status_router

__all__ = [
    "auth_protected_router",
    "auth_router",
    "documents_router",
    "health_router",
    "productions_router",
    "status_router",
]
