"""Course content services module."""
from portal.services.content.models import (
    ContentBlock,
    ContentBlockType,
    ContentMetadata,
    ContentType,
    ContentValidation,
    CourseCategory,
    CourseContent,
    Difficulty,
)
from portal.services.content.manager import (
    CONTENT_TEMPLATES,
    generate_content,
    merge_content,
    validate_content,
)
from portal.services.content.resolver import (
    CATEGORY_KEYWORDS,
    ContentSource,
    SubtopicContent,
    SubtopicContentResolver,
    detect_category,
)

__all__ = [
    "ContentBlock",
    "ContentBlockType",
    "ContentMetadata",
    "ContentType",
    "ContentValidation",
    "CourseCategory",
    "CourseContent",
    "Difficulty",
    "CONTENT_TEMPLATES",
    "generate_content",
    "merge_content",
    "validate_content",
    "CATEGORY_KEYWORDS",
    "ContentSource",
    "SubtopicContent",
    "SubtopicContentResolver",
    "detect_category",
]
