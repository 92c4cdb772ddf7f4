"""API module initialization."""
from portal.api.health import router as health_router
from portal.api.documents import router as documents_router
from portal.api.session import router as session_router
from portal.api.contact import router as contact_router
from portal.api.content import router as content_router

__all__ = [
    "health_router",
    "documents_router",
    "session_router",
    "contact_router",
    "content_router",
]
