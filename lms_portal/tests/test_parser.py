"""Tests for document parsing from uploads."""
import pytest

from portal.core.exceptions import DocumentReadException
from portal.services.parsing import (
    BaseExtractor,
    DocumentParser,
    ExtractedText,
    ParserFactory,
    PlaceholderExtractor,
    TextExtractor,
    UploadedFile,
    get_file_type,
    parse_document,
)


class TestGetFileType:
    def test_known_extensions(self) -> None:
        assert get_file_type("notes.md") == "Markdown"
        assert get_file_type("essay.DOCX") == "Word"
        assert get_file_type("data.csv") == "CSV"

    def test_unknown_extension_is_uppercased(self) -> None:
        assert get_file_type("archive.tar.gz") == "GZ"

    def test_no_extension(self) -> None:
        assert get_file_type("README") == ""


class TestParseDocument:
    @pytest.mark.asyncio
    async def test_markdown_upload(self) -> None:
        data = b"# Intro\nhello world here."
        file = UploadedFile.from_bytes("week-1.md", data, "text/markdown")

        document = await parse_document(file)

        assert document.title == "week-1"
        assert document.content == data.decode()
        assert document.metadata.type == "Markdown"
        assert document.metadata.size == len(data)
        assert document.metadata.word_count == 5
        assert document.metadata.uploaded_at.tzinfo is not None
        assert [s.title for s in document.sections] == ["Intro"]
        assert document.sections[0].content == "hello world here."

    @pytest.mark.asyncio
    async def test_json_is_text_like(self) -> None:
        file = UploadedFile.from_bytes("quiz.json", b'{"q": 1}', "application/json")
        document = await parse_document(file)
        assert document.content == '{"q": 1}'
        assert document.metadata.type == "JSON"

    @pytest.mark.asyncio
    async def test_raw_content_takes_precedence(self) -> None:
        file = UploadedFile.from_bytes("notes.txt", b"ignored bytes", "text/plain")
        document = await parse_document(file, raw_content="already read text")
        assert document.content == "already read text"

    @pytest.mark.asyncio
    async def test_invalid_utf8_is_replaced(self) -> None:
        file = UploadedFile.from_bytes("notes.txt", b"caf\xe9 menu", "text/plain")
        document = await parse_document(file)
        assert document.content == "caf\ufffd menu"

    @pytest.mark.asyncio
    async def test_binary_upload_gets_placeholder(self) -> None:
        file = UploadedFile.from_bytes("slides.pdf", b"%PDF-1.4 binary", "application/pdf")

        document = await parse_document(file)

        assert document.title == "slides"
        assert document.content.startswith("[Document content extracted from slides.pdf]")
        assert document.sections == []
        assert document.metadata.type == "PDF"
        assert document.metadata.word_count is None

    @pytest.mark.asyncio
    async def test_raw_content_ignored_for_binary(self) -> None:
        file = UploadedFile.from_bytes("essay.docx", b"PK\x03\x04", "application/msword")
        document = await parse_document(file, raw_content="should not be used")
        assert document.content.startswith("[Document content extracted from essay.docx]")

    @pytest.mark.asyncio
    async def test_from_path(self, tmp_path) -> None:
        path = tmp_path / "lesson.txt"
        path.write_text("plain lowercase lesson text.", encoding="utf-8")

        document = await parse_document(UploadedFile.from_path(path, "text/plain"))

        assert document.title == "lesson"
        assert document.metadata.size == path.stat().st_size
        assert [s.title for s in document.sections] == ["Content"]

    @pytest.mark.asyncio
    async def test_read_failure(self, tmp_path) -> None:
        file = UploadedFile.from_path(tmp_path / "missing.txt", "text/plain")

        with pytest.raises(DocumentReadException) as exc_info:
            await parse_document(file)

        assert exc_info.value.message == "Failed to read file"
        assert exc_info.value.status_code == 400


class _PagedExtractor(BaseExtractor):
    def supports_format(self, content_type: str) -> bool:
        return content_type == "application/pdf"

    async def extract(self, file: UploadedFile) -> ExtractedText:
        return ExtractedText(content="# Page One\nreal text here.", pages=3)


class TestParserFactory:
    def test_text_types_use_text_extractor(self) -> None:
        factory = ParserFactory()
        assert isinstance(factory.get_extractor("text/plain"), TextExtractor)
        assert isinstance(factory.get_extractor("text/markdown; charset=utf-8"), TextExtractor)

    def test_other_types_fall_back_to_placeholder(self) -> None:
        factory = ParserFactory()
        assert isinstance(factory.get_extractor("application/pdf"), PlaceholderExtractor)
        assert isinstance(factory.get_extractor(""), PlaceholderExtractor)

    @pytest.mark.asyncio
    async def test_registered_extractor_replaces_placeholder(self) -> None:
        factory = ParserFactory()
        factory.register(_PagedExtractor())
        parser = DocumentParser(factory)

        document = await parser.parse(
            UploadedFile.from_bytes("book.pdf", b"%PDF", "application/pdf")
        )

        assert document.metadata.pages == 3
        assert document.metadata.word_count == 6
        assert [s.title for s in document.sections] == ["Page One"]
