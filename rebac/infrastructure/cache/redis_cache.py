"""Redis key-value adapter for the decision cache (implements IKeyValueStore).

Millisecond expiry via PSETEX; expiry and eviction are Redis's own. Redis
errors are logged and re-raised: cache unavailability surfaces to the
caller rather than being turned into a miss.
"""

from __future__ import annotations

import redis.asyncio as redis

from rebac.core.config import get_settings
from rebac.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class RedisKeyValueStore:
    """Async Redis client wrapper with millisecond TTL writes.

    Call connect() at startup and disconnect() at shutdown; operations
    connect on first use when connect() was not called.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize the store.

        Args:
            redis_client: Optional Redis client for testing or DI.
        """
        self.redis = redis_client
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Create the client from settings and verify it with PING.

        Raises:
            redis.ConnectionError: If Redis is unreachable.
            redis.TimeoutError: If the connection attempt times out.
        """
        if self.redis is not None and self._connected:
            return
        settings = get_settings()
        self.redis = redis.Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            db=settings.redis_db,
            password=settings.redis_password.get_secret_value() if settings.redis_password else None,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_keepalive=True,
        )
        try:
            await self.redis.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed: %s", e)
            self.redis = None
            raise
        self._connected = True
        logger.info("Redis cache connected: %s:%s", settings.redis_host, settings.redis_port)

    async def disconnect(self) -> None:
        """Close the Redis connection."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    def is_available(self) -> bool:
        """Return True if Redis is connected."""
        return self._connected and self.redis is not None

    async def _client(self) -> redis.Redis:
        if not self.is_available():
            await self.connect()
        return self.redis

    async def set_with_expiry(self, key: str, value: str, ttl_ms: int) -> None:
        """Store value under key with a TTL in milliseconds (PSETEX)."""
        client = await self._client()
        try:
            await client.psetex(key, ttl_ms, value)
        except redis.RedisError:
            logger.exception("Cache set error for key %s", key)
            raise
        logger.debug("Cache SET: %s (TTL: %sms)", key, ttl_ms)

    async def get(self, key: str) -> str | None:
        """Return the stored string, or None if absent or expired."""
        client = await self._client()
        try:
            value = await client.get(key)
        except redis.RedisError:
            logger.exception("Cache get error for key %s", key)
            raise
        logger.debug("Cache %s: %s", "HIT" if value is not None else "MISS", key)
        # Clients built without decode_responses return bytes.
        if isinstance(value, bytes):
            return value.decode()
        return value

    async def delete(self, key: str) -> None:
        """Remove key from Redis."""
        client = await self._client()
        try:
            await client.delete(key)
        except redis.RedisError:
            logger.exception("Cache delete error for key %s", key)
            raise
        logger.debug("Cache DELETE: %s", key)
