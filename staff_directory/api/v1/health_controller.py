"""
Health Controller
=================

Liveness endpoint. Does not touch the database.
"""
from fastapi import APIRouter

from staff_directory import __version__
from staff_directory.application.dto.health_dto import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="ok", version=__version__)
