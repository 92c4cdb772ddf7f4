"""Tests for subtopic content resolution."""
import pytest

from portal.services.content import (
    ContentBlock,
    ContentBlockType,
    ContentSource,
    CourseCategory,
    CourseContent,
    SubtopicContentResolver,
    detect_category,
)
from portal.services.content.resolver import display_to_content_block
from portal.services.library import DocumentLibrary
from portal.services.parsing import (
    BlockType,
    DisplayBlock,
    DocumentMetadata,
    ParsedDocument,
    extract_sections,
)

LESSON = "# Intro\nhello there."


def _parsed(content: str = LESSON) -> ParsedDocument:
    return ParsedDocument(
        title="lesson",
        content=content,
        metadata=DocumentMetadata(type="Markdown", size=len(content)),
        sections=extract_sections(content),
    )


def _custom(title: str = "") -> CourseContent:
    return CourseContent(
        title=title,
        content=[ContentBlock(type=ContentBlockType.PARAGRAPH, content="hand written")],
    )


class TestDetectCategory:
    @pytest.mark.parametrize(
        "course_title, expected",
        [
            ("Fun Coding for Kids", CourseCategory.KIDS),
            ("Teaching Children Chess", CourseCategory.KIDS),
            ("Spanish for Beginners", CourseCategory.LANGUAGE),
            ("WEB DESIGN", CourseCategory.TECHNICAL),
            ("Programming 101", CourseCategory.TECHNICAL),
            ("Digital Marketing", CourseCategory.BUSINESS),
            ("Music Theory", CourseCategory.ARTS),
            ("World History", CourseCategory.GENERAL),
            ("", CourseCategory.GENERAL),
            (None, CourseCategory.GENERAL),
        ],
    )
    def test_keywords(self, course_title, expected) -> None:
        assert detect_category(course_title) == expected


class TestDisplayToContentBlock:
    def test_heading_level_becomes_tag(self) -> None:
        block = display_to_content_block(
            DisplayBlock(type=BlockType.HEADING, content="Setup", level=2)
        )
        assert block.type == ContentBlockType.HEADING
        assert block.level == "h2"

    def test_list_items_kept(self) -> None:
        block = display_to_content_block(DisplayBlock(type=BlockType.LIST, items=["a", "b"]))
        assert block.items == ["a", "b"]
        assert block.level is None


class TestSubtopicContentResolver:
    @pytest.mark.asyncio
    async def test_linked_document_wins(self, library: DocumentLibrary) -> None:
        resolver = SubtopicContentResolver(library)
        await library.save_document(_parsed(), title="Week 1", module_id="m1", subtopic_id="1.1.1")
        await resolver.save_custom_content("1.1.1", _custom("ignored"))

        resolved = await resolver.resolve("1.1.1", title="Basics", course_title="Web Basics")

        assert resolved.source == ContentSource.DOCUMENT
        assert resolved.title == "Week 1"
        assert [b.type for b in resolved.content] == [
            ContentBlockType.HEADING,
            ContentBlockType.PARAGRAPH,
        ]
        assert resolved.content[0].content == "Intro"
        assert resolved.category is None

    @pytest.mark.asyncio
    async def test_document_for_other_subtopic_ignored(self, library: DocumentLibrary) -> None:
        await library.save_document(_parsed(), title="Week 1", subtopic_id="1.1.2")

        resolved = await SubtopicContentResolver(library).resolve("1.1.1", title="Basics")

        assert resolved.source == ContentSource.GENERATED

    @pytest.mark.asyncio
    async def test_custom_content_before_generation(self, library: DocumentLibrary) -> None:
        resolver = SubtopicContentResolver(library)
        await resolver.save_custom_content("s2", _custom())

        resolved = await resolver.resolve("s2", title="Loops")

        assert resolved.source == ContentSource.CUSTOM
        assert resolved.title == "Loops"
        assert [b.content for b in resolved.content] == ["hand written"]

    @pytest.mark.asyncio
    async def test_custom_content_stored_under_subtopic_key(self, library: DocumentLibrary) -> None:
        await SubtopicContentResolver(library).save_custom_content("s2", _custom("Mine"))
        assert await library.store.get("content_s2") is not None

    @pytest.mark.asyncio
    async def test_unreadable_custom_content_falls_through(self, library: DocumentLibrary) -> None:
        await library.store.set("content_s3", "not json")

        resolved = await SubtopicContentResolver(library).resolve("s3", title="Loops")

        assert resolved.source == ContentSource.GENERATED

    @pytest.mark.asyncio
    async def test_generated_for_detected_category(self, library: DocumentLibrary) -> None:
        resolved = await SubtopicContentResolver(library).resolve(
            "s4", title="Loops", course_title="Intro to Web Development"
        )

        assert resolved.source == ContentSource.GENERATED
        assert resolved.category == CourseCategory.TECHNICAL
        assert resolved.title == "Loops"
        assert resolved.content[0].content == "Loops - Technical Overview"

    @pytest.mark.asyncio
    async def test_explicit_category_overrides_detection(self, library: DocumentLibrary) -> None:
        resolved = await SubtopicContentResolver(library).resolve(
            "s5", title="Colors", course_title="Web Basics", category=CourseCategory.KIDS
        )
        assert resolved.category == CourseCategory.KIDS

    @pytest.mark.asyncio
    async def test_defaults_without_titles(self, library: DocumentLibrary) -> None:
        resolved = await SubtopicContentResolver(library).resolve("s6")

        assert resolved.category == CourseCategory.GENERAL
        assert resolved.title == "Course Content"
        assert resolved.content[0].content == "Introduction to Course Content"

    @pytest.mark.asyncio
    async def test_removed_custom_content_no_longer_used(self, library: DocumentLibrary) -> None:
        resolver = SubtopicContentResolver(library)
        await resolver.save_custom_content("s7", _custom("Mine"))
        await resolver.remove_custom_content("s7")

        resolved = await resolver.resolve("s7", title="Loops")

        assert resolved.source == ContentSource.GENERATED
