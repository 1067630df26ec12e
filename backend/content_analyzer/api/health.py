from fastapi import APIRouter

from content_analyzer.config import settings
from content_analyzer.schemas.common import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(ok=True, service=settings.app_name, version=settings.app_version)
