"""Infrastructure layer: key-value store adapters and order persistence."""

from fake_braspag.infrastructure.factory import create_store
from fake_braspag.infrastructure.memory_store import InMemoryKeyValueStore
from fake_braspag.infrastructure.order_repository import OrderRepository
from fake_braspag.infrastructure.redis_store import RedisKeyValueStore
from fake_braspag.infrastructure.store import KeyValueStore, SetMode

__all__ = [
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "OrderRepository",
    "RedisKeyValueStore",
    "SetMode",
    "create_store",
]
