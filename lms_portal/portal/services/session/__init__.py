"""Session services module."""
from portal.services.session.models import PortalType, RoleType, UserSession
from portal.services.session.store import SessionStore

__all__ = [
    "PortalType",
    "RoleType",
    "UserSession",
    "SessionStore",
]
