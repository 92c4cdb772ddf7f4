"""Services module initialization."""
from portal.services.parsing import DocumentParser, document_parser, parse_document
from portal.services.session import SessionStore
from portal.services.library import DocumentLibrary

__all__ = [
    "DocumentParser",
    "document_parser",
    "parse_document",
    "SessionStore",
    "DocumentLibrary",
]
