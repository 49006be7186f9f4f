"""
Health check schemas.

Dependencies: pydantic
System role: Health API contracts
"""

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


class DatabaseTimeResponse(BaseModel):
    """Current database server time."""

    now: datetime
