"""Extractor registry keyed on MIME type."""
from typing import List, Optional

from portal.services.parsing.base import BaseExtractor
from portal.services.parsing.text_parser import PlaceholderExtractor, TextExtractor
from portal.core.config import settings
from portal.core.logging import get_logger

logger = get_logger(__name__)


class ParserFactory:
    """Picks the extractor for an upload; the first registered match wins."""

    def __init__(
        self,
        extractors: Optional[List[BaseExtractor]] = None,
        fallback: Optional[BaseExtractor] = None,
    ):
        self._extractors: List[BaseExtractor] = list(extractors or [TextExtractor()])
        self._fallback = fallback or PlaceholderExtractor(
            delay_ms=settings.PLACEHOLDER_EXTRACTION_DELAY_MS
        )

    def register(self, extractor: BaseExtractor) -> None:
        """Add an extractor ahead of the existing ones."""
        self._extractors.insert(0, extractor)

    def get_extractor(self, content_type: str) -> BaseExtractor:
        """
        Get the extractor for a MIME type.

        Args:
            content_type: MIME type of the upload

        Returns:
            BaseExtractor: A matching extractor, or the placeholder fallback
        """
        for extractor in self._extractors:
            if extractor.supports_format(content_type):
                logger.debug(
                    f"Extractor selected for {content_type}",
                    extra={
                        "content_type": content_type,
                        "extractor": extractor.__class__.__name__,
                    }
                )
                return extractor

        logger.info(
            f"No extractor for {content_type}, falling back",
            extra={
                "content_type": content_type,
                "extractor": self._fallback.__class__.__name__,
            }
        )
        return self._fallback
