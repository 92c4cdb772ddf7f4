"""Key-value backends for the document library."""
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

import aiofiles
import aiofiles.os

from portal.db.redis import RedisClient
from portal.core.config import Settings
from portal.core.exceptions import StorageException
from portal.core.logging import get_logger

logger = get_logger(__name__)

SAFE_KEY = re.compile(r'^[A-Za-z0-9_.-]+$')


class BaseKeyValueStore(ABC):
    """String values under string keys; one value per key, replaced whole."""

    async def connect(self) -> None:
        """Open connections; no-op by default."""

    async def disconnect(self) -> None:
        """Release connections; no-op by default."""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None."""

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove key if present."""

    @abstractmethod
    async def ping(self) -> bool:
        """Whether the backend is usable."""


class LocalFileStore(BaseKeyValueStore):
    """Keeps each key as a JSON file under a base directory."""

    def __init__(self, base_path: Union[str, Path]):
        self.base_path = Path(base_path)

    def _path_for(self, key: str) -> Path:
        # Keys become file names; anything path-like is refused
        if not SAFE_KEY.match(key) or key in (".", ".."):
            raise StorageException(
                "Invalid storage key",
                details={"key": key},
            )
        return self.base_path / f"{key}.json"

    async def connect(self) -> None:
        await aiofiles.os.makedirs(self.base_path, exist_ok=True)

    async def get(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        if not await aiofiles.os.path.exists(path):
            return None
        try:
            async with aiofiles.open(path, "r", encoding="utf-8") as f:
                return await f.read()
        except OSError as e:
            raise StorageException(
                f"Failed to read {key}: {str(e)}",
                details={"key": key},
            ) from e

    async def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            await aiofiles.os.makedirs(self.base_path, exist_ok=True)
            async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
                await f.write(value)
            await aiofiles.os.replace(tmp_path, path)
        except OSError as e:
            raise StorageException(
                f"Failed to write {key}: {str(e)}",
                details={"key": key},
            ) from e

    async def delete(self, key: str) -> None:
        path = self._path_for(key)
        if await aiofiles.os.path.exists(path):
            await aiofiles.os.remove(path)

    async def ping(self) -> bool:
        return await aiofiles.os.path.isdir(self.base_path)


class RedisStore(BaseKeyValueStore):
    """Keeps keys in Redis."""

    def __init__(self, client: RedisClient):
        self.client = client

    async def connect(self) -> None:
        await self.client.connect()

    async def disconnect(self) -> None:
        await self.client.disconnect()

    async def get(self, key: str) -> Optional[str]:
        return await self.client.get(key)

    async def set(self, key: str, value: str) -> None:
        await self.client.set(key, value)

    async def delete(self, key: str) -> None:
        await self.client.delete(key)

    async def ping(self) -> bool:
        return await self.client.ping()


def build_store(settings: Settings) -> BaseKeyValueStore:
    """Create the backend named by STORAGE_TYPE."""
    if settings.STORAGE_TYPE == "redis":
        return RedisStore(RedisClient(settings.REDIS_URL))
    return LocalFileStore(settings.STORAGE_BASE_PATH)
