from fastapi import APIRouter
from datetime import datetime, timezone

from wsb_prices.schemas import HealthResponse
from wsb_prices.settings import settings


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        service=settings.SERVICE_NAME,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
