"""Redis async connection configuration."""
from typing import Optional
import redis.asyncio as aioredis
from portal.core.logging import get_logger

logger = get_logger(__name__)


class RedisClient:
    """Async Redis client wrapper."""

    def __init__(self, url: str):
        self.url = url
        self._redis: Optional[aioredis.Redis] = None

    async def connect(self) -> None:
        """Establish Redis connection."""
        try:
            self._redis = aioredis.from_url(
                self.url,
                encoding="utf-8",
                decode_responses=True,
            )
            await self._redis.ping()
            logger.info("Redis connected successfully")
        except Exception as e:
            logger.error(f"Failed to connect to Redis: {str(e)}", exc_info=True)
            raise

    async def disconnect(self) -> None:
        """Close Redis connection."""
        if self._redis:
            await self._redis.aclose()
            self._redis = None
            logger.info("Redis connection closed")

    @property
    def client(self) -> aioredis.Redis:
        """Get Redis client instance."""
        if not self._redis:
            raise RuntimeError("Redis client not initialized. Call connect() first.")
        return self._redis

    async def get(self, key: str) -> Optional[str]:
        return await self.client.get(key)

    async def set(self, key: str, value: str) -> bool:
        return await self.client.set(key, value)

    async def delete(self, key: str) -> int:
        return await self.client.delete(key)

    async def ping(self) -> bool:
        """Ping Redis to check health."""
        try:
            return await self.client.ping()
        except Exception:
            return False
