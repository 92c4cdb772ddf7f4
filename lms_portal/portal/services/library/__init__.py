"""Document library services module."""
from portal.services.library.backends import (
    BaseKeyValueStore,
    LocalFileStore,
    RedisStore,
    build_store,
)
from portal.services.library.manager import DocumentLibrary

__all__ = [
    "BaseKeyValueStore",
    "LocalFileStore",
    "RedisStore",
    "build_store",
    "DocumentLibrary",
]
