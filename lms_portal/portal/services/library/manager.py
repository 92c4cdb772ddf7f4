"""Document library: the tutor's saved uploads under one storage key."""
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from portal.services.library.backends import BaseKeyValueStore
from portal.services.parsing.models import ParsedDocument, StoredDocument
from portal.core.exceptions import (
    DocumentNotFoundException,
    DocumentValidationException,
    StorageException,
)
from portal.core.logging import get_logger

logger = get_logger(__name__)

_documents_adapter = TypeAdapter(List[StoredDocument])


class DocumentLibrary:
    """
    Saved documents, kept as one JSON array under a single key.

    Every change reads the whole array, modifies it and writes it back.
    Concurrent writers are not coordinated.
    """

    def __init__(self, store: BaseKeyValueStore, key: str = "tutor_documents"):
        self.store = store
        self.key = key

    async def list_documents(self) -> List[StoredDocument]:
        """
        Load every saved document.

        Returns:
            List[StoredDocument]: Documents in save order

        Raises:
            StorageException: If the stored value is not a document array
        """
        raw = await self.store.get(self.key)
        if not raw:
            return []
        try:
            return _documents_adapter.validate_json(raw)
        except ValidationError as e:
            logger.error(
                "Stored document library is corrupt",
                extra={"key": self.key, "errors": e.error_count()},
            )
            raise StorageException(
                "Stored document library is corrupt",
                details={"key": self.key},
            ) from e

    async def _write(self, documents: List[StoredDocument]) -> None:
        payload = _documents_adapter.dump_json(documents).decode()
        await self.store.set(self.key, payload)

    async def save_document(
        self,
        document: Optional[ParsedDocument],
        title: Optional[str] = None,
        module_id: Optional[str] = None,
        subtopic_id: Optional[str] = None,
    ) -> StoredDocument:
        """
        Save a parsed document, optionally linked to a module and subtopic.

        Args:
            document: The parsed upload
            title: Title to store; the parsed title is used when omitted
            module_id: Course module to link to
            subtopic_id: Subtopic within the module

        Returns:
            StoredDocument: The saved entry

        Raises:
            DocumentValidationException: If there is no document or the
                title is blank
        """
        if title is None and document is not None:
            title = document.title
        final_title = (title or "").strip()
        if document is None or not final_title:
            raise DocumentValidationException(
                "Please provide a title and upload a document",
                details={
                    "has_document": document is not None,
                    "has_title": bool(final_title),
                },
            )

        stored = StoredDocument(
            **document.model_dump(include={"content", "metadata", "sections"}),
            title=final_title,
            module_id=module_id,
            subtopic_id=subtopic_id,
        )

        documents = await self.list_documents()
        documents.append(stored)
        await self._write(documents)

        logger.info(
            "Document saved to library",
            extra={
                "document_id": stored.id,
                "title": stored.title,
                "module_id": module_id,
                "subtopic_id": subtopic_id,
                "library_size": len(documents),
            }
        )
        return stored

    async def get_document(self, document_id: str) -> StoredDocument:
        """
        Raises:
            DocumentNotFoundException: If no document has this id
        """
        for document in await self.list_documents():
            if document.id == document_id:
                return document
        raise DocumentNotFoundException(document_id)

    async def documents_for_module(
        self,
        module_id: str,
        subtopic_id: Optional[str] = None,
    ) -> List[StoredDocument]:
        """Documents linked to a module, narrowed to a subtopic when one is given."""
        return [
            document
            for document in await self.list_documents()
            if document.module_id == module_id
            and (not subtopic_id or document.subtopic_id == subtopic_id)
        ]

    async def document_for_subtopic(self, subtopic_id: str) -> Optional[StoredDocument]:
        """First saved document linked to a subtopic, or None."""
        for document in await self.list_documents():
            if document.subtopic_id == subtopic_id:
                return document
        return None

    async def remove_document(self, document_id: str) -> None:
        """
        Raises:
            DocumentNotFoundException: If no document has this id
        """
        documents = await self.list_documents()
        remaining = [document for document in documents if document.id != document_id]
        if len(remaining) == len(documents):
            raise DocumentNotFoundException(document_id)
        await self._write(remaining)
        logger.info("Document removed from library", extra={"document_id": document_id})
