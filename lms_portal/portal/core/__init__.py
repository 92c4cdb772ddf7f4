"""Core module initialization."""
from portal.core.config import settings, Settings
from portal.core.logging import setup_logging, get_logger
from portal.core.exceptions import (
    BaseAPIException,
    DocumentReadException,
    DocumentValidationException,
    DocumentNotFoundException,
    StorageException,
)

__all__ = [
    "settings",
    "Settings",
    "setup_logging",
    "get_logger",
    "BaseAPIException",
    "DocumentReadException",
    "DocumentValidationException",
    "DocumentNotFoundException",
    "StorageException",
]
