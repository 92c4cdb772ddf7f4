"""Data models for parsed document content."""
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import uuid4
from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentMetadata(BaseModel):
    """Facts about the uploaded file."""

    type: str = Field(
        ...,
        description="Display name of the file type (e.g., PDF, Markdown)"
    )
    size: int = Field(
        ...,
        ge=0,
        description="File size in bytes"
    )
    uploaded_at: datetime = Field(
        default_factory=_utcnow,
        description="Upload timestamp (UTC)"
    )
    pages: Optional[int] = Field(
        default=None,
        description="Page count, when the extractor knows it"
    )
    word_count: Optional[int] = Field(
        default=None,
        description="Whitespace-separated token count of the content"
    )


class DocumentSection(BaseModel):
    """A heading-delimited slice of a document."""

    id: str = Field(
        ...,
        description="Sequential identifier, 'section-N'"
    )
    title: str = Field(
        ...,
        description="Heading text with markdown and numbering prefixes removed"
    )
    content: str = Field(
        default="",
        description="Lines under the heading joined by newlines"
    )
    order: int = Field(
        ...,
        ge=1,
        description="1-based position, matches the number in id"
    )


class ParsedDocument(BaseModel):
    """Represents a fully parsed document with all sections."""

    title: str = Field(
        ...,
        description="Filename without its extension"
    )
    content: str = Field(
        default="",
        description="Raw extracted text"
    )
    metadata: DocumentMetadata
    sections: List[DocumentSection] = Field(
        default_factory=list,
        description="Sections in document order"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "week-1-notes",
                "content": "# Introduction\nVariables hold values.",
                "metadata": {
                    "type": "Markdown",
                    "size": 38,
                    "uploaded_at": "2026-02-05T10:30:00Z",
                    "word_count": 5,
                },
                "sections": [
                    {
                        "id": "section-1",
                        "title": "Introduction",
                        "content": "Variables hold values.",
                        "order": 1,
                    }
                ],
            }
        }
    )

    def get_total_sections(self) -> int:
        """Get total number of sections."""
        return len(self.sections)


class StoredDocument(ParsedDocument):
    """A parsed document as kept in the document library."""

    id: str = Field(
        default_factory=lambda: uuid4().hex,
        description="Library identifier"
    )
    module_id: Optional[str] = Field(
        default=None,
        description="Course module the document is linked to"
    )
    subtopic_id: Optional[str] = Field(
        default=None,
        description="Subtopic within the module"
    )


class BlockType(str, Enum):
    """Kinds of display block."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    CODE = "code"
    LIST = "list"
    QUOTE = "quote"


class DisplayBlock(BaseModel):
    """One renderable block of a document preview."""

    type: BlockType
    content: str = ""
    items: Optional[List[str]] = None
    level: Optional[int] = Field(
        default=None,
        ge=1,
        le=6,
        description="Heading depth for markdown headings"
    )
    language: Optional[str] = Field(
        default=None,
        description="Info string of the opening code fence"
    )
