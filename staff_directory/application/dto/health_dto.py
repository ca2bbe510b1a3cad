"""
Health DTO
==========
"""
from pydantic import BaseModel


class HealthResponse(BaseModel):
    """DTO for the health check."""
    status: str
    version: str
