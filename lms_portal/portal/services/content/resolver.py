"""Resolves what a student sees for a course subtopic."""
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, ValidationError

from portal.services.content.manager import generate_content
from portal.services.content.models import (
    ContentBlock,
    ContentBlockType,
    ContentType,
    CourseCategory,
    CourseContent,
)
from portal.services.library.manager import DocumentLibrary
from portal.services.parsing.blocks import format_document_for_display
from portal.services.parsing.models import DisplayBlock
from portal.core.logging import get_logger

logger = get_logger(__name__)

CUSTOM_CONTENT_KEY_PREFIX = "content_"
DEFAULT_SUBTOPIC_TITLE = "Course Content"

# Checked in order; the first category with a keyword in the course title wins
CATEGORY_KEYWORDS: Sequence[Tuple[CourseCategory, Tuple[str, ...]]] = (
    (CourseCategory.KIDS, ("kids", "children")),
    (CourseCategory.LANGUAGE, ("language", "spanish", "french")),
    (CourseCategory.TECHNICAL, ("web", "coding", "programming")),
    (CourseCategory.BUSINESS, ("business", "marketing")),
    (CourseCategory.ARTS, ("art", "music", "drawing")),
)


class ContentSource(str, Enum):
    DOCUMENT = "document"
    CUSTOM = "custom"
    GENERATED = "generated"


class SubtopicContent(BaseModel):
    """Blocks to show for a subtopic and where they came from."""

    subtopic_id: str = Field(..., description="Subtopic identifier")
    title: str = Field(..., description="Lesson title")
    type: ContentType = Field(default=ContentType.CONTENT, description="Lesson type")
    source: ContentSource = Field(..., description="Where the blocks were resolved from")
    category: Optional[CourseCategory] = Field(
        default=None,
        description="Category used when content was generated",
    )
    content: List[ContentBlock] = Field(default_factory=list)


def detect_category(course_title: Optional[str]) -> CourseCategory:
    """
    Guess a course category from keywords in its title.

    Matching is case-insensitive substring matching, so "Art" also matches
    inside longer words such as "Smart".

    Args:
        course_title: Title of the course the subtopic belongs to

    Returns:
        CourseCategory: Detected category, GENERAL when nothing matches
    """
    title = (course_title or "").lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in title for keyword in keywords):
            return category
    return CourseCategory.GENERAL


def custom_content_key(subtopic_id: str) -> str:
    return f"{CUSTOM_CONTENT_KEY_PREFIX}{subtopic_id}"


def display_to_content_block(block: DisplayBlock) -> ContentBlock:
    """Convert a parsed display block into a course content block."""
    return ContentBlock(
        type=ContentBlockType(block.type.value),
        content=block.content,
        items=block.items,
        language=block.language,
        level=f"h{block.level}" if block.level else None,
    )


class SubtopicContentResolver:
    """
    Picks the lesson content for a subtopic.

    Lookup order: a library document linked to the subtopic, then custom
    content saved under ``content_<subtopic_id>`` in the library's store,
    then content generated for the course category.
    """

    def __init__(self, library: DocumentLibrary):
        self.library = library

    @property
    def store(self):
        return self.library.store

    async def get_custom_content(self, subtopic_id: str) -> Optional[CourseContent]:
        """
        Load custom content saved for a subtopic.

        Unparseable entries are logged and treated as absent.
        """
        raw = await self.store.get(custom_content_key(subtopic_id))
        if not raw:
            return None
        try:
            return CourseContent.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "Ignoring unreadable custom content",
                extra={"subtopic_id": subtopic_id, "errors": e.error_count()},
            )
            return None

    async def save_custom_content(self, subtopic_id: str, content: CourseContent) -> None:
        await self.store.set(custom_content_key(subtopic_id), content.model_dump_json())
        logger.info(
            "Custom content saved",
            extra={"subtopic_id": subtopic_id, "blocks": len(content.content)},
        )

    async def remove_custom_content(self, subtopic_id: str) -> None:
        await self.store.delete(custom_content_key(subtopic_id))

    async def resolve(
        self,
        subtopic_id: str,
        title: Optional[str] = None,
        course_title: Optional[str] = None,
        category: Optional[CourseCategory] = None,
    ) -> SubtopicContent:
        """
        Resolve the content for a subtopic.

        Args:
            subtopic_id: Subtopic identifier
            title: Subtopic title, used for custom content without a title
                and as the topic of generated content
            course_title: Course title used to detect the category
            category: Explicit category; skips keyword detection

        Returns:
            SubtopicContent: Resolved blocks tagged with their source

        Raises:
            StorageException: If the document library cannot be read
        """
        document = await self.library.document_for_subtopic(subtopic_id)
        if document is not None:
            logger.debug(
                "Subtopic content from library document",
                extra={"subtopic_id": subtopic_id, "document_id": document.id},
            )
            return SubtopicContent(
                subtopic_id=subtopic_id,
                title=document.title,
                source=ContentSource.DOCUMENT,
                content=[
                    display_to_content_block(block)
                    for block in format_document_for_display(document)
                ],
            )

        custom = await self.get_custom_content(subtopic_id)
        if custom is not None:
            return SubtopicContent(
                subtopic_id=subtopic_id,
                title=custom.title or title or DEFAULT_SUBTOPIC_TITLE,
                type=custom.type,
                source=ContentSource.CUSTOM,
                content=custom.content,
            )

        category = CourseCategory(category) if category else detect_category(course_title)
        generated = generate_content(title or DEFAULT_SUBTOPIC_TITLE, category)
        return SubtopicContent(
            subtopic_id=subtopic_id,
            title=generated.title,
            type=generated.type,
            source=ContentSource.GENERATED,
            category=category,
            content=generated.content,
        )
