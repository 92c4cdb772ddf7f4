"""Course content models."""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


class ContentBlockType(str, Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    CODE = "code"
    LIST = "list"
    QUOTE = "quote"
    VIDEO = "video"
    IMAGE = "image"
    TABLE = "table"


class ContentType(str, Enum):
    VIDEO = "video"
    CONTENT = "content"
    INTERACTIVE = "interactive"


class CourseCategory(str, Enum):
    KIDS = "kids"
    LANGUAGE = "language"
    TECHNICAL = "technical"
    BUSINESS = "business"
    ARTS = "arts"
    GENERAL = "general"


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ContentBlock(BaseModel):
    """A block of authored course content."""

    type: Optional[ContentBlockType] = None
    content: str = ""
    language: Optional[str] = None
    items: Optional[List[str]] = None
    url: Optional[str] = None
    level: Optional[str] = Field(
        default=None,
        pattern=r'^h[1-6]$',
        description="Heading level, 'h1' to 'h6'"
    )


class ContentMetadata(BaseModel):
    age_group: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    duration: Optional[str] = None
    language: Optional[str] = None


class CourseContent(BaseModel):
    """A lesson: title, category and its blocks."""

    title: str = ""
    type: ContentType = ContentType.CONTENT
    category: Optional[CourseCategory] = CourseCategory.GENERAL
    content: List[ContentBlock] = Field(default_factory=list)
    metadata: ContentMetadata = Field(default_factory=ContentMetadata)


class ContentValidation(BaseModel):
    valid: bool
    errors: List[str] = Field(default_factory=list)
