"""
Pho Huong Viet Order API — Health endpoint
"""
from datetime import datetime, timezone

from fastapi import APIRouter

from restaurant_api.schemas.order import HealthResponse
from restaurant_api.services.catalog import RESTAURANT

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(
        status="ok",
        restaurant=RESTAURANT.name,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
