"""
Production schemas.

Dependencies: pydantic
System role: Production API contracts
"""

from pydantic import BaseModel, ConfigDict


class ProductionResponse(BaseModel):
    """Production visible to the caller's company."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    company_id: int
