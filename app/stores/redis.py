"""Redis store for caching.

TTL policies:
- Post list: 60 seconds by default (posts are read-only through the API)
"""

import json
import logging
from typing import Any

import redis.asyncio as redis

from app.settings import get_settings

# Key prefixes
PREFIX_POST_LIST = "posts:list"

# Redis client (initialized on startup)
_redis: redis.Redis | None = None
logger = logging.getLogger("uvicorn.error")


async def init_redis() -> None:
    """Initialize Redis connection."""
    global _redis
    settings = get_settings()
    _redis = redis.from_url(
        settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
    )
    # Validate connectivity early (especially for `rediss://` in production).
    await _redis.ping()
    logger.info("Redis connected")


async def close_redis() -> None:
    """Close Redis connection."""
    global _redis
    if _redis:
        await _redis.aclose()
        _redis = None


def _get_redis() -> redis.Redis:
    """Get Redis client instance."""
    if _redis is None:
        raise RuntimeError("Redis not initialized. Call init_redis() first.")
    return _redis


# ============================================================
# Generic cache operations
# ============================================================


async def cache_get(key: str) -> str | None:
    """Get value from cache."""
    return await _get_redis().get(key)


async def cache_set(key: str, value: str, ttl: int) -> None:
    """Set value in cache with TTL.

    Args:
        key: Cache key.
        value: Value to cache.
        ttl: Time-to-live in seconds.
    """
    await _get_redis().setex(key, ttl, value)


async def cache_get_json(key: str) -> Any | None:
    """Get JSON value from cache.

    Returns:
        Parsed JSON value or None if not found.
    """
    value = await cache_get(key)
    if value:
        return json.loads(value)
    return None


async def cache_set_json(key: str, value: Any, ttl: int) -> None:
    """Set JSON value in cache."""
    await cache_set(key, json.dumps(value), ttl)


# ============================================================
# Post list cache
# ============================================================


async def get_post_list_cache() -> list[dict[str, Any]] | None:
    """Get cached post list ([{"id", "title"}, ...])."""
    return await cache_get_json(PREFIX_POST_LIST)


async def set_post_list_cache(posts: list[dict[str, Any]]) -> None:
    """Cache the post list using the configured TTL."""
    await cache_set_json(PREFIX_POST_LIST, posts, get_settings().post_list_cache_ttl)
