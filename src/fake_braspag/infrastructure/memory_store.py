"""
In-memory KeyValueStore for local development and unit tests.

Implements the same conditional-write semantics as the Redis adapter so the
order repository behaves identically on both.
"""

from threading import Lock

from fake_braspag.infrastructure.store import KeyValueStore, SetMode


class InMemoryKeyValueStore(KeyValueStore):
    """
    Dict-backed key-value store.

    Limitations:
    - Single-process only (state is not shared between workers)
    - No persistence (state is lost on restart)
    """

    def __init__(self) -> None:
        self._data: dict[str, str] = {}
        self._lock = Lock()

    async def get(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(key)

    async def set(self, key: str, value: str, mode: SetMode) -> bool:
        # Check and write under one lock so concurrent creators cannot both win
        with self._lock:
            exists = key in self._data
            if mode is SetMode.CREATE_ONLY and exists:
                return False
            if mode is SetMode.UPDATE_ONLY and not exists:
                return False
            self._data[key] = value
            return True

    async def keys(self, prefix: str) -> list[str]:
        with self._lock:
            return [key for key in self._data if key.startswith(prefix)]

    async def delete(self, *keys: str) -> int:
        with self._lock:
            removed = 0
            for key in keys:
                if self._data.pop(key, None) is not None:
                    removed += 1
            return removed

    async def ping(self) -> bool:
        return True
