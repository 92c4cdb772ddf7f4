"""Text extraction interface and the uploaded-file handle it works on."""
import mimetypes
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import aiofiles
from fastapi import UploadFile

from portal.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"
TEXT_LIKE_PREFIX = "text/"
TEXT_LIKE_TYPES = {"application/json"}


def is_text_like(content_type: Optional[str]) -> bool:
    """True for MIME types whose bytes can be used as text directly."""
    if not content_type:
        return False
    content_type = content_type.split(";", 1)[0].strip().lower()
    return content_type.startswith(TEXT_LIKE_PREFIX) or content_type in TEXT_LIKE_TYPES


@dataclass
class UploadedFile:
    """
    A file handed to the parser: name, size, MIME type and a way to read it.

    Either ``data`` holds the bytes already, or ``path`` points to a file
    that is read on demand.
    """

    name: str
    size: int
    content_type: str = DEFAULT_CONTENT_TYPE
    data: Optional[bytes] = None
    path: Optional[Path] = None

    @classmethod
    def from_bytes(
        cls,
        name: str,
        data: bytes,
        content_type: Optional[str] = None,
    ) -> "UploadedFile":
        return cls(
            name=name,
            size=len(data),
            content_type=content_type or _guess_type(name),
            data=data,
        )

    @classmethod
    def from_path(
        cls,
        path: Union[str, Path],
        content_type: Optional[str] = None,
    ) -> "UploadedFile":
        path = Path(path)
        return cls(
            name=path.name,
            size=path.stat().st_size if path.is_file() else 0,
            content_type=content_type or _guess_type(path.name),
            path=path,
        )

    @classmethod
    async def from_upload(cls, upload: UploadFile) -> "UploadedFile":
        """Buffer a FastAPI upload."""
        data = await upload.read()
        return cls.from_bytes(
            name=upload.filename or "upload",
            data=data,
            content_type=upload.content_type,
        )

    async def read(self) -> bytes:
        """
        Read the file contents.

        Raises:
            OSError: If the backing file cannot be read
        """
        if self.data is not None:
            return self.data
        if self.path is None:
            return b""
        async with aiofiles.open(self.path, "rb") as f:
            return await f.read()


def _guess_type(name: str) -> str:
    guessed, _ = mimetypes.guess_type(name)
    return guessed or DEFAULT_CONTENT_TYPE


@dataclass
class ExtractedText:
    """Text pulled out of a file by an extractor."""

    content: str
    pages: Optional[int] = None
    # Canned text standing in for a real extraction
    placeholder: bool = False


class BaseExtractor(ABC):
    """Extracts text from an uploaded document."""

    @abstractmethod
    def supports_format(self, content_type: str) -> bool:
        """
        Check if this extractor handles the given MIME type.

        Args:
            content_type: MIME type of the upload

        Returns:
            bool: True if the type is handled
        """

    @abstractmethod
    async def extract(self, file: UploadedFile) -> ExtractedText:
        """
        Extract the text of a file.

        Args:
            file: The uploaded file

        Returns:
            ExtractedText: Text and whatever the extractor learned about it

        Raises:
            OSError: If the file cannot be read
        """
