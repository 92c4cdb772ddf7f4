"""Course content endpoints."""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, status

from portal.api.deps import get_content_resolver
from portal.schemas.content import GenerateContentRequest
from portal.schemas.document import ErrorResponse
from portal.services.content import (
    CONTENT_TEMPLATES,
    ContentValidation,
    CourseCategory,
    CourseContent,
    SubtopicContent,
    SubtopicContentResolver,
    generate_content,
    validate_content,
)
from portal.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/content", tags=["Content"])


@router.get("/templates", summary="List category templates")
async def list_templates() -> Dict[str, Dict[str, Any]]:
    return {category.value: template for category, template in CONTENT_TEMPLATES.items()}


@router.post(
    "/generate",
    response_model=CourseContent,
    summary="Generate lesson content",
)
async def generate(body: GenerateContentRequest) -> CourseContent:
    return generate_content(body.topic, body.category, body.custom)


@router.post(
    "/validate",
    response_model=ContentValidation,
    summary="Validate lesson content",
)
async def validate(content: CourseContent) -> ContentValidation:
    return validate_content(content)


@router.get(
    "/subtopics/{subtopic_id}",
    response_model=SubtopicContent,
    responses={500: {"model": ErrorResponse, "description": "Document storage failure"}},
    summary="Resolve subtopic content",
    description=(
        "Content for a subtopic: the library document linked to it, else saved "
        "custom content, else content generated for the course category."
    ),
)
async def get_subtopic_content(
    subtopic_id: str,
    title: Optional[str] = Query(default=None, description="Subtopic title"),
    course_title: Optional[str] = Query(
        default=None,
        description="Course title, used to detect the category",
    ),
    category: Optional[CourseCategory] = Query(
        default=None,
        description="Category overriding keyword detection",
    ),
    resolver: SubtopicContentResolver = Depends(get_content_resolver),
) -> SubtopicContent:
    resolved = await resolver.resolve(
        subtopic_id,
        title=title,
        course_title=course_title,
        category=category,
    )
    logger.info(
        "Subtopic content resolved",
        extra={"subtopic_id": subtopic_id, "source": resolved.source.value},
    )
    return resolved


@router.put(
    "/subtopics/{subtopic_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Save custom subtopic content",
)
async def save_subtopic_content(
    subtopic_id: str,
    content: CourseContent,
    resolver: SubtopicContentResolver = Depends(get_content_resolver),
) -> None:
    await resolver.save_custom_content(subtopic_id, content)


@router.delete(
    "/subtopics/{subtopic_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove custom subtopic content",
)
async def delete_subtopic_content(
    subtopic_id: str,
    resolver: SubtopicContentResolver = Depends(get_content_resolver),
) -> None:
    await resolver.remove_custom_content(subtopic_id)
