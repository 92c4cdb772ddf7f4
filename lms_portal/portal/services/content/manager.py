"""Course content generation from per-category templates."""
from typing import Any, Callable, Dict, List, Optional

from portal.services.content.models import (
    ContentBlock,
    ContentBlockType,
    ContentMetadata,
    ContentValidation,
    CourseCategory,
    CourseContent,
    Difficulty,
)
from portal.core.logging import get_logger

logger = get_logger(__name__)

CONTENT_TEMPLATES: Dict[CourseCategory, Dict[str, Any]] = {
    CourseCategory.KIDS: {
        "style": "fun",
        "tone": "encouraging",
        "use_emojis": True,
        "simple_language": True,
    },
    CourseCategory.LANGUAGE: {
        "style": "educational",
        "tone": "supportive",
        "use_examples": True,
        "include_pronunciation": True,
    },
    CourseCategory.TECHNICAL: {
        "style": "professional",
        "tone": "informative",
        "include_code": True,
        "detailed": True,
    },
    CourseCategory.BUSINESS: {
        "style": "professional",
        "tone": "authoritative",
        "include_case_studies": True,
        "practical": True,
    },
    CourseCategory.ARTS: {
        "style": "creative",
        "tone": "inspirational",
        "include_visuals": True,
        "expressive": True,
    },
    CourseCategory.GENERAL: {
        "style": "balanced",
        "tone": "friendly",
        "adaptable": True,
    },
}


def _heading(text: str, level: str) -> ContentBlock:
    return ContentBlock(type=ContentBlockType.HEADING, content=text, level=level)


def _paragraph(text: str) -> ContentBlock:
    return ContentBlock(type=ContentBlockType.PARAGRAPH, content=text)


def _list(items: List[str]) -> ContentBlock:
    return ContentBlock(type=ContentBlockType.LIST, items=items)


def _quote(text: str) -> ContentBlock:
    return ContentBlock(type=ContentBlockType.QUOTE, content=text)


def _kids_blocks(topic: str) -> List[ContentBlock]:
    return [
        _heading(f"🎉 Welcome to {topic}! 🎉", "h1"),
        _paragraph(
            f"Hey there, young learner! Are you ready to explore {topic}? This is "
            "going to be so much fun! We'll learn together step by step."
        ),
        _heading("What We'll Learn Today", "h2"),
        _list([
            f"Understanding the basics of {topic}",
            "Fun activities and games",
            "Creative projects to try",
            "Sharing what we learned",
        ]),
        _heading("Let's Get Started! 🚀", "h2"),
        _paragraph(
            f"Learning {topic} is like going on an adventure! Every step you take "
            "brings you closer to becoming amazing at it. Remember, it's okay to "
            "make mistakes - that's how we learn!"
        ),
        _quote("You're doing great! Keep going, little explorer! 🌟"),
    ]


def _language_blocks(topic: str) -> List[ContentBlock]:
    return [
        _heading(f"Introduction to {topic}", "h1"),
        _paragraph(
            f"Welcome to your {topic} language learning journey! In this lesson, "
            "we'll explore essential concepts and build a strong foundation."
        ),
        _heading("Key Learning Objectives", "h2"),
        _list([
            f"Master basic {topic} vocabulary",
            "Understand fundamental grammar rules",
            "Practice pronunciation and speaking",
            "Build confidence in conversations",
        ]),
        _heading("Important Concepts", "h2"),
        _paragraph(
            f"In {topic}, we focus on practical communication. You'll learn how to "
            "express yourself clearly and understand others."
        ),
        _heading("Practice Exercises", "h2"),
        _paragraph(
            "Practice makes perfect! Try to use what you've learned in real "
            "conversations. Don't worry about making mistakes - they're part of "
            "the learning process."
        ),
        _quote("Language learning is a journey, not a destination. Enjoy every step!"),
    ]


def _technical_blocks(topic: str) -> List[ContentBlock]:
    return [
        _heading(f"{topic} - Technical Overview", "h1"),
        _paragraph(
            f"This course covers {topic} from fundamentals to advanced concepts. "
            "You'll gain hands-on experience and build real-world projects."
        ),
        _heading("Course Objectives", "h2"),
        _list([
            f"Understand core concepts of {topic}",
            "Master essential tools and technologies",
            "Build practical projects",
            "Prepare for professional development",
        ]),
        _heading("Prerequisites", "h2"),
        _paragraph(
            "Basic understanding of programming concepts is recommended. We'll "
            "guide you through everything step by step."
        ),
        _heading("What You'll Build", "h2"),
        _paragraph(
            "By the end of this course, you'll have created several projects that "
            "demonstrate your understanding of the concepts."
        ),
    ]


def _general_blocks(topic: str) -> List[ContentBlock]:
    return [
        _heading(f"Introduction to {topic}", "h1"),
        _paragraph(
            f"Welcome to {topic}! This course is designed to help you learn and "
            "master the essential concepts."
        ),
        _heading("What You'll Learn", "h2"),
        _list([
            f"Fundamentals of {topic}",
            "Practical applications",
            "Best practices",
            "Real-world examples",
        ]),
        _heading("Getting Started", "h2"),
        _paragraph(
            "Let's begin our learning journey together. Follow along with the "
            "lessons and practice regularly to get the most out of this course."
        ),
    ]


# Categories without an entry use the general blocks
_CATEGORY_BLOCKS: Dict[CourseCategory, Callable[[str], List[ContentBlock]]] = {
    CourseCategory.KIDS: _kids_blocks,
    CourseCategory.LANGUAGE: _language_blocks,
    CourseCategory.TECHNICAL: _technical_blocks,
}

_CATEGORY_METADATA: Dict[CourseCategory, Dict[str, Any]] = {
    CourseCategory.KIDS: {"age_group": "5-12"},
    CourseCategory.LANGUAGE: {"language": "English"},
    CourseCategory.TECHNICAL: {"difficulty": Difficulty.INTERMEDIATE},
}


def generate_content(
    topic: str,
    category: CourseCategory = CourseCategory.GENERAL,
    custom: Optional[Dict[str, Any]] = None,
) -> CourseContent:
    """
    Build lesson content for a topic.

    Args:
        topic: Lesson topic, used as the title
        category: Course category selecting the template
        custom: Fields overriding the generated structure; when given, no
            template blocks are generated

    Returns:
        CourseContent: The lesson
    """
    category = CourseCategory(category)
    base = CourseContent(
        title=topic,
        category=category,
        metadata=ContentMetadata(difficulty=Difficulty.BEGINNER),
    )

    if custom:
        merged = base.model_dump()
        merged.update({k: v for k, v in custom.items() if v is not None})
        return CourseContent.model_validate(merged)

    build_blocks = _CATEGORY_BLOCKS.get(category, _general_blocks)
    metadata = base.metadata.model_copy(update=_CATEGORY_METADATA.get(category, {}))

    logger.debug(
        "Generated course content",
        extra={"topic": topic, "category": category.value},
    )
    return base.model_copy(update={"content": build_blocks(topic), "metadata": metadata})


def validate_content(content: CourseContent) -> ContentValidation:
    """Check a lesson has a title, a category and non-empty blocks."""
    errors: List[str] = []

    if not content.title or not content.title.strip():
        errors.append("Title is required")

    if not content.content:
        errors.append("Content blocks are required")

    if not content.category:
        errors.append("Category is required")

    for index, block in enumerate(content.content, start=1):
        if not block.type:
            errors.append(f"Content block {index}: Type is required")
        if not block.content and block.items is None:
            errors.append(f"Content block {index}: Content or items required")

    return ContentValidation(valid=not errors, errors=errors)


def merge_content(base: CourseContent, additional: Dict[str, Any]) -> CourseContent:
    """
    Overlay extra fields onto a lesson.

    Blocks are appended after the base blocks and metadata keys are
    overlaid; any other field replaces the base value.
    """
    merged = base.model_dump()
    for key, value in additional.items():
        if key in ("content", "metadata"):
            continue
        merged[key] = value

    merged["content"] = merged["content"] + list(additional.get("content") or [])
    merged["metadata"] = {
        **merged["metadata"],
        **{k: v for k, v in (additional.get("metadata") or {}).items() if v is not None},
    }
    return CourseContent.model_validate(merged)
