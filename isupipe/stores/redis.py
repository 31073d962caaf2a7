"""Redis store for login sessions.

Handles:
- Session records with TTL (session id -> user id)

TTL policy:
- Login sessions: Settings.session_ttl_seconds (default 1 hour)
"""

import logging

import redis.asyncio as redis

from isupipe.settings import get_settings

# Key prefixes
PREFIX_SESSION = "session:"

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


async def set_session(session_id: str, user_id: int, ttl: int) -> None:
    """Store a session record.

    Args:
        session_id: Opaque session identifier (cookie value).
        user_id: Authenticated user.
        ttl: Time-to-live in seconds.
    """
    await _get_redis().setex(f"{PREFIX_SESSION}{session_id}", ttl, str(user_id))


async def get_session_user_id(session_id: str) -> int | None:
    """Resolve a session id to its user id.

    Returns:
        User id, or None if the session does not exist or has expired.
    """
    value = await _get_redis().get(f"{PREFIX_SESSION}{session_id}")
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning("Malformed session record for %s", session_id[:8])
        return None
