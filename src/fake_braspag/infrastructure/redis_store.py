"""Redis-backed KeyValueStore."""

from urllib.parse import urlsplit

import structlog
from redis.asyncio import Redis

from fake_braspag.infrastructure.store import KeyValueStore, SetMode

logger = structlog.get_logger(__name__)


class RedisKeyValueStore(KeyValueStore):
    """
    KeyValueStore on top of redis.asyncio.

    Conditional writes map to a single SET with NX (create-only) or XX
    (update-only), so Redis decides which of two racing writers wins.
    """

    def __init__(self, client: Redis) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisKeyValueStore":
        parts = urlsplit(url)
        # Credentials in the URL stay out of the logs
        logger.info(
            "redis_store_initialized",
            redis_host=parts.hostname,
            redis_port=parts.port,
            redis_db=parts.path.lstrip("/") or "0",
        )
        return cls(Redis.from_url(url, decode_responses=True))

    async def get(self, key: str) -> str | None:
        return await self._client.get(key)

    async def set(self, key: str, value: str, mode: SetMode) -> bool:
        if mode is SetMode.CREATE_ONLY:
            result = await self._client.set(key, value, nx=True)
        else:
            result = await self._client.set(key, value, xx=True)

        # redis-py returns True on write and None when the condition fails
        return bool(result)

    async def keys(self, prefix: str) -> list[str]:
        return [key async for key in self._client.scan_iter(match=f"{prefix}*")]

    async def delete(self, *keys: str) -> int:
        if not keys:
            return 0
        return await self._client.delete(*keys)

    async def ping(self) -> bool:
        return bool(await self._client.ping())

    async def close(self) -> None:
        await self._client.aclose()
