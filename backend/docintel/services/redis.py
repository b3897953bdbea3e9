"""
Redis Service Module

Provides an async Redis client for caching aggregation results.
Handles JSON serialization/deserialization and content-hash cache keys.

Key Features:
- Async Redis operations
- JSON data handling
- Configurable expiration
- Errors are logged and treated as cache misses
"""

import hashlib
import json
from datetime import timedelta
from typing import Any, Dict, Optional

from redis import asyncio as aioredis

from ..utils.config import settings
from ..utils.logger import cache_logger as logger


def build_cache_key(prefix: str, payload: Dict[str, Any]) -> str:
    """
    Build a cache key from the content of a request payload.

    The payload is serialized with sorted keys so equal content always gives
    the same key.
    """
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    digest = hashlib.sha256(canonical.encode("utf-8")).hexdigest()
    return f"{prefix}:{digest}"


class RedisService:
    """
    Async Redis service for caching.
    Provides methods for getting and setting cached data.
    """

    def __init__(self, redis_url: Optional[str] = None, client=None):
        """Initialize Redis connection pool. The connection is opened lazily on first use."""
        self.redis = client or aioredis.from_url(
            redis_url or settings.REDIS_URL,
            encoding="utf-8",
            decode_responses=True
        )

    async def get(self, key: str) -> Optional[Dict]:
        """
        Get value from Redis cache.

        Args:
            key: Cache key to retrieve

        Returns:
            Deserialized value or None if not found
        """
        try:
            data = await self.redis.get(key)
            if data:
                return json.loads(data)
            return None
        except Exception as e:
            logger.error(f"Redis get error: {str(e)}")
            return None

    async def set(self, key: str, value: Dict, expire: int = 3600) -> bool:
        """
        Set value in Redis cache.

        Args:
            key: Cache key
            value: Value to store (will be JSON serialized)
            expire: Cache expiration in seconds

        Returns:
            True if successful, False otherwise
        """
        try:
            await self.redis.setex(key, timedelta(seconds=expire), json.dumps(value))
            return True
        except Exception as e:
            logger.error(f"Redis set error: {str(e)}")
            return False

    async def close(self) -> None:
        """Close the connection pool."""
        try:
            await self.redis.aclose()
        except Exception as e:
            logger.warning(f"Redis close failed: {str(e)}")

    async def ping(self) -> bool:
        """Return True when the Redis server answers."""
        try:
            return bool(await self.redis.ping())
        except Exception as e:
            logger.warning(f"Redis ping failed: {str(e)}")
            return False


# Create global Redis instance
redis_service = RedisService()
