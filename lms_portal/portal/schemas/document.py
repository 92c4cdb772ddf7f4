"""Pydantic schemas for document operations."""
from typing import Any, Dict, List, Union
from pydantic import BaseModel, Field

from portal.services.parsing.models import DisplayBlock, ParsedDocument, StoredDocument


class DocumentPreviewResponse(BaseModel):
    """A parsed upload together with its rendered blocks."""

    document: ParsedDocument = Field(..., description="Parsed document")
    blocks: List[DisplayBlock] = Field(
        default_factory=list,
        description="Display blocks for the preview"
    )


class StoredDocumentResponse(BaseModel):
    """A library entry with its rendered blocks."""

    document: StoredDocument = Field(..., description="Saved document")
    blocks: List[DisplayBlock] = Field(default_factory=list, description="Display blocks")


class DocumentListResponse(BaseModel):
    """Library entries, optionally filtered by module."""

    documents: List[StoredDocument] = Field(default_factory=list)
    total: int = Field(..., ge=0, description="Number of documents returned")


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str = Field(..., description="Error message")
    status_code: int = Field(..., description="HTTP status code")
    request_id: str = Field(..., description="Request identifier")
    details: Union[Dict[str, Any], List[Any]] = Field(
        default_factory=dict,
        description="Additional error details; field errors for 422 responses",
    )
