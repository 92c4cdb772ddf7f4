"""Document parsing services module."""
from portal.services.parsing.models import (
    BlockType,
    DisplayBlock,
    DocumentMetadata,
    DocumentSection,
    ParsedDocument,
    StoredDocument,
)
from portal.services.parsing.base import BaseExtractor, ExtractedText, UploadedFile
from portal.services.parsing.normalizer import TextNormalizer
from portal.services.parsing.text_parser import PlaceholderExtractor, TextExtractor
from portal.services.parsing.factory import ParserFactory
from portal.services.parsing.sections import extract_sections, is_heading
from portal.services.parsing.blocks import format_document_for_display, parse_content_blocks
from portal.services.parsing.parser import (
    DocumentParser,
    document_parser,
    get_file_type,
    parse_document,
)

__all__ = [
    "BlockType",
    "DisplayBlock",
    "DocumentMetadata",
    "DocumentSection",
    "ParsedDocument",
    "StoredDocument",
    "BaseExtractor",
    "ExtractedText",
    "UploadedFile",
    "TextNormalizer",
    "PlaceholderExtractor",
    "TextExtractor",
    "ParserFactory",
    "extract_sections",
    "is_heading",
    "format_document_for_display",
    "parse_content_blocks",
    "DocumentParser",
    "document_parser",
    "get_file_type",
    "parse_document",
]
