"""Schemas module initialization."""
from portal.schemas.health import HealthResponse, ReadinessResponse
from portal.schemas.document import (
    DocumentListResponse,
    DocumentPreviewResponse,
    StoredDocumentResponse,
    ErrorResponse,
)
from portal.schemas.session import PortalUpdateRequest, SessionResponse
from portal.schemas.contact import ContactRequest, ContactResponse
from portal.schemas.content import GenerateContentRequest

__all__ = [
    "HealthResponse",
    "ReadinessResponse",
    "DocumentListResponse",
    "DocumentPreviewResponse",
    "StoredDocumentResponse",
    "ErrorResponse",
    "PortalUpdateRequest",
    "SessionResponse",
    "ContactRequest",
    "ContactResponse",
    "GenerateContentRequest",
]
