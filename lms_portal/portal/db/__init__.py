"""Database module initialization."""
from portal.db.redis import RedisClient

__all__ = [
    "RedisClient",
]
