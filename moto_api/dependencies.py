"""FastAPI dependency injection."""

from typing import Annotated
from fastapi import Depends, Request

from moto_data import HealthAggregator


async def get_health_aggregator(request: Request) -> HealthAggregator:
    """Get the HealthAggregator instance from app state."""
    return request.app.state.health_aggregator


HealthAggregatorDep = Annotated[HealthAggregator, Depends(get_health_aggregator)]
