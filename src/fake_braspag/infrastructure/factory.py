"""Configuration-based selection of the order store backend."""

import structlog

from fake_braspag.config import Settings
from fake_braspag.infrastructure.memory_store import InMemoryKeyValueStore
from fake_braspag.infrastructure.redis_store import RedisKeyValueStore
from fake_braspag.infrastructure.store import KeyValueStore

logger = structlog.get_logger(__name__)


def create_store(settings: Settings) -> KeyValueStore:
    """
    Create the key-value store named by settings.store_backend.

    Raises:
        ValueError: If the backend name is not supported
    """
    if settings.store_backend == "redis":
        return RedisKeyValueStore.from_url(settings.redis_url)
    if settings.store_backend == "memory":
        logger.info("memory_store_initialized")
        return InMemoryKeyValueStore()

    raise ValueError(f"Unknown store backend: {settings.store_backend}. Available backends: memory, redis")
