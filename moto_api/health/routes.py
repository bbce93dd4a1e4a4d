"""FastAPI routes for liveness/readiness."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from moto_api.dependencies import HealthAggregatorDep

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(aggregator: HealthAggregatorDep) -> JSONResponse:
    """Check the database and cache; 503 when any of them is down."""
    health = await aggregator.check_health()
    code = status.HTTP_200_OK if health.ok else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(status_code=code, content=health.as_dict())
