"""Pydantic schemas for session operations."""
from typing import Optional
from pydantic import BaseModel, Field

from portal.services.session.models import PortalType, UserSession


class PortalUpdateRequest(BaseModel):
    portal: PortalType = Field(..., description="Portal to switch to")


class SessionResponse(BaseModel):
    """Current session; user is null when nobody is signed in."""

    user: Optional[UserSession] = None
