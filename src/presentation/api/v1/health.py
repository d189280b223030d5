"""Health check endpoint for service monitoring."""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src import __version__
from src.core.config import Settings, get_settings

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str
    version: str
    build_version: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the service.",
)
async def health_check(
    app_settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    return HealthResponse(
        service=app_settings.app_name,
        version=__version__,
        build_version=app_settings.build_version,
    )
