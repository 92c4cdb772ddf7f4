"""Session identity models."""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class PortalType(str, Enum):
    """Portals a user can act in."""

    ONLINE = "online"
    OFFLINE = "offline"
    WORKSHOP = "workshop"


class RoleType(str, Enum):
    """Roles within a portal."""

    STUDENT = "student"
    TUTOR = "tutor"
    ADMIN = "admin"


class UserSession(BaseModel):
    """Identity of the user currently acting in the portal."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = Field(default=None, description="User identifier")
    email: Optional[str] = Field(default=None, description="Contact e-mail")
    phone: Optional[str] = Field(default=None, description="Contact phone")
    name: Optional[str] = Field(default=None, description="Display name")
    role: Optional[RoleType] = Field(default=None, description="Acting role")
    portal: Optional[PortalType] = Field(default=None, description="Active portal")
