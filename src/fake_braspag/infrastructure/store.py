"""Key-value store port used by the order repository."""

from abc import ABC, abstractmethod
from enum import Enum


class SetMode(str, Enum):
    """Conditional write modes."""

    CREATE_ONLY = "create_only"  # write only if the key is absent (Redis NX)
    UPDATE_ONLY = "update_only"  # write only if the key exists (Redis XX)


class KeyValueStore(ABC):
    """
    Abstract key-value store.

    Contract:
    - set() MUST evaluate its existence condition and write in one atomic
      step; the store, not the caller, arbitrates concurrent writers
    - set() returns False when the condition is not met (no exception)
    - Availability errors of the backing service propagate unchanged
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    async def set(self, key: str, value: str, mode: SetMode) -> bool:
        """
        Conditionally write a value.

        Returns:
            True if the value was written, False if the mode's condition failed.
        """

    @abstractmethod
    async def keys(self, prefix: str) -> list[str]:
        """Return every key starting with prefix."""

    @abstractmethod
    async def delete(self, *keys: str) -> int:
        """Delete keys and return how many existed."""

    @abstractmethod
    async def ping(self) -> bool:
        """Return True if the store is reachable."""

    async def close(self) -> None:
        """Release connections held by the store."""
