"""Health check schemas."""
from typing import Dict, Any
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness of the portal service."""

    status: str = Field(..., description="Health status (healthy/unhealthy)")
    app_name: str = Field(..., description="Service name")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Environment name")


class ReadinessResponse(BaseModel):
    """Readiness of the portal service and its document storage."""

    status: str = Field(..., description="Readiness status (ready/not_ready)")
    services: Dict[str, Any] = Field(..., description="Status of dependent services")
    details: Dict[str, Any] = Field(default_factory=dict, description="Additional details")
