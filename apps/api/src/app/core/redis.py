"""
Redis Configuration

Optional async Redis client backing the rate limiter.
The application runs without it (outside production); the limiter then
falls back to per-process memory.
"""

from redis.asyncio import Redis, from_url

from app.core.config import settings

# Redis client instance
redis_client: Redis | None = None


async def init_redis() -> Redis:
    """
    Connect to Redis and verify the connection.

    Call this on application startup. On failure the client stays unset.
    """
    global redis_client
    client = from_url(settings.redis_url, encoding="utf-8", decode_responses=True)
    await client.ping()
    redis_client = client
    return redis_client


def get_redis_client() -> Redis | None:
    """Get the shared client, or None when Redis is unavailable."""
    return redis_client


async def close_redis() -> None:
    """Close Redis connection."""
    global redis_client
    if redis_client:
        await redis_client.aclose()
        redis_client = None
