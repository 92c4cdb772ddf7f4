"""Dependencies resolving the per-application services."""
from fastapi import Request

from portal.services.content import SubtopicContentResolver
from portal.services.library import DocumentLibrary
from portal.services.parsing import DocumentParser
from portal.services.session import SessionStore


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_document_library(request: Request) -> DocumentLibrary:
    return request.app.state.document_library


def get_document_parser(request: Request) -> DocumentParser:
    return request.app.state.document_parser


def get_content_resolver(request: Request) -> SubtopicContentResolver:
    return SubtopicContentResolver(request.app.state.document_library)
