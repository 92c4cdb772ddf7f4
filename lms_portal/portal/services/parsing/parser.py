"""Builds ParsedDocument values from uploads."""
from typing import Optional

from portal.services.parsing.base import UploadedFile, is_text_like
from portal.services.parsing.factory import ParserFactory
from portal.services.parsing.models import DocumentMetadata, ParsedDocument
from portal.services.parsing.normalizer import TextNormalizer
from portal.services.parsing.sections import extract_sections
from portal.core.exceptions import DocumentReadException
from portal.core.logging import get_logger

logger = get_logger(__name__)

FILE_TYPE_NAMES = {
    "pdf": "PDF",
    "doc": "Word",
    "docx": "Word",
    "txt": "Text",
    "md": "Markdown",
    "html": "HTML",
    "json": "JSON",
    "csv": "CSV",
}


def get_file_type(filename: str) -> str:
    """
    Display name of a file's type, from its extension.

    Args:
        filename: Name of the uploaded file

    Returns:
        str: e.g. 'Markdown' for 'notes.md', 'XYZ' for 'a.xyz'
    """
    extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    return FILE_TYPE_NAMES.get(extension, extension.upper())


class DocumentParser:
    """Reads an upload through the matching extractor and structures the text."""

    def __init__(self, factory: Optional[ParserFactory] = None):
        self.factory = factory or ParserFactory()

    async def parse(
        self,
        file: UploadedFile,
        raw_content: Optional[str] = None,
    ) -> ParsedDocument:
        """
        Parse an uploaded document.

        Text-like uploads are split into sections; other uploads go to the
        extractor registered for their type, which by default returns
        placeholder text with no sections.

        Args:
            file: The uploaded file
            raw_content: Text already read by the caller; used instead of
                reading a text-like file when non-empty

        Returns:
            ParsedDocument: Title, raw content, metadata and sections

        Raises:
            DocumentReadException: If the file cannot be read
        """
        logger.info(
            "Parsing document",
            extra={
                "file_name": file.name,
                "content_type": file.content_type,
                "size": file.size,
            }
        )

        try:
            if raw_content and is_text_like(file.content_type):
                content, pages, placeholder = raw_content, None, False
            else:
                extractor = self.factory.get_extractor(file.content_type)
                extracted = await extractor.extract(file)
                content = extracted.content
                pages = extracted.pages
                placeholder = extracted.placeholder
        except OSError as e:
            logger.error(
                f"Failed to read file: {str(e)}",
                extra={"file_name": file.name},
                exc_info=True,
            )
            raise DocumentReadException(details={"file_name": file.name}) from e

        metadata = DocumentMetadata(
            type=get_file_type(file.name),
            size=file.size,
            pages=pages,
            word_count=None if placeholder else TextNormalizer.count_words(content),
        )
        document = ParsedDocument(
            title=TextNormalizer.strip_extension(file.name),
            content=content,
            metadata=metadata,
            sections=[] if placeholder else extract_sections(content),
        )

        logger.info(
            "Document parsed successfully",
            extra={
                "file_name": file.name,
                "sections_count": document.get_total_sections(),
                "total_chars": len(content),
                "placeholder": placeholder,
            }
        )

        return document


# Global instance
document_parser = DocumentParser()


async def parse_document(
    file: UploadedFile,
    raw_content: Optional[str] = None,
) -> ParsedDocument:
    """Parse with the default extractors."""
    return await document_parser.parse(file, raw_content)
