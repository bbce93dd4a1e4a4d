"""Health check endpoint."""

from moto_api.health.routes import router

__all__ = ["router"]
