"""
Production API endpoints.

Routes: GET /productions

Dependencies: docvault.application.services, docvault.api.deps, docvault.models
System role: Production listing HTTP API
"""

from fastapi import APIRouter, Depends

from docvault.api.deps import get_catalog_service, require_claim
from docvault.application.services import CatalogService
from docvault.core.security import Claim
from docvault.models.production import ProductionResponse

router = APIRouter(tags=["productions"], dependencies=[Depends(require_claim)])


@router.get("/productions", response_model=list[ProductionResponse])
async def list_productions(
    claim: Claim = Depends(require_claim),
    catalog: CatalogService = Depends(get_catalog_service),
) -> list[ProductionResponse]:
    """List productions owned by the caller's company."""
    productions = await catalog.list_productions(claim.company_id)
    return [ProductionResponse.model_validate(production) for production in productions]
