"""Health check endpoint."""

from fastapi import APIRouter, Depends

from monstermaker.api.deps import get_dex_service
from monstermaker.api.schemas import HealthResponse
from monstermaker.services.dex_service import DexService

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(dex: DexService = Depends(get_dex_service)) -> HealthResponse:
    """Return application status and registry sizes."""
    return HealthResponse(
        status="ok",
        types=dex.types.count(),
        species=dex.species.count(),
    )
