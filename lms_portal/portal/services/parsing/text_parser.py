"""Extractors for text-like and binary uploads."""
import asyncio

from portal.services.parsing.base import (
    BaseExtractor,
    ExtractedText,
    UploadedFile,
    is_text_like,
)
from portal.core.logging import get_logger

logger = get_logger(__name__)

PLACEHOLDER_TEMPLATE = (
    "[Document content extracted from {name}]\n\n"
    "This is a placeholder for the actual document content. In production, "
    "this would be extracted using server-side libraries for PDFs or Word "
    "documents."
)


class TextExtractor(BaseExtractor):
    """Uses the bytes of text/* and JSON uploads as-is."""

    def supports_format(self, content_type: str) -> bool:
        return is_text_like(content_type)

    async def extract(self, file: UploadedFile) -> ExtractedText:
        raw = await file.read()
        return ExtractedText(content=raw.decode("utf-8", errors="replace"))


class PlaceholderExtractor(BaseExtractor):
    """
    Stand-in for server-side extraction of binary formats.

    Waits a fixed delay, then returns canned text naming the file. Nothing
    is read from the file itself.
    """

    def __init__(self, delay_ms: int = 100):
        self.delay_ms = delay_ms

    def supports_format(self, content_type: str) -> bool:
        return True

    async def extract(self, file: UploadedFile) -> ExtractedText:
        logger.debug(
            "No extractor for binary upload, using placeholder text",
            extra={"file_name": file.name, "content_type": file.content_type},
        )
        if self.delay_ms > 0:
            await asyncio.sleep(self.delay_ms / 1000)
        return ExtractedText(
            content=PLACEHOLDER_TEMPLATE.format(name=file.name),
            placeholder=True,
        )
