"""Pydantic schemas for course content operations."""
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

from portal.services.content.models import CourseCategory


class GenerateContentRequest(BaseModel):
    topic: str = Field(..., min_length=1, description="Lesson topic")
    category: CourseCategory = Field(
        default=CourseCategory.GENERAL,
        description="Course category selecting the template",
    )
    custom: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Fields overriding the generated content",
    )
