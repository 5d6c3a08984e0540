"""
Order persistence on top of a KeyValueStore.

Each order is stored as a JSON object under ``<prefix><orderId>``. Creation
uses a create-only write so that, for any order id, at most one creator
succeeds; later saves use update-only writes so a deleted order is never
silently recreated.
"""

import json
from typing import Any, Mapping

import structlog

from fake_braspag.infrastructure.store import KeyValueStore, SetMode
from fake_braspag.models.exceptions import OrderNotFoundError
from fake_braspag.models.order import Order, OrderState

logger = structlog.get_logger(__name__)

DEFAULT_KEY_PREFIX = "fake-braspag.order."


class OrderRepository:
    """Create, find, save and capture orders."""

    def __init__(self, store: KeyValueStore, key_prefix: str = DEFAULT_KEY_PREFIX) -> None:
        self.store = store
        self.key_prefix = key_prefix

    def key_for(self, order_id: str) -> str:
        return f"{self.key_prefix}{order_id}"

    async def create(self, attributes: Mapping[str, Any]) -> Order | bool:
        """
        Build and store a new order.

        Returns:
            The persisted Order, or False if an order with the same orderId
            already exists. The existing record is left untouched.

        Raises:
            InvalidOrderError: If attributes has no orderId.
        """
        order = Order(attributes)
        if not await self.save(order):
            return False
        return order

    async def find(self, order_id: str) -> Order:
        """
        Load an order.

        Raises:
            OrderNotFoundError: If no order is stored under order_id.
        """
        return Order.restore(await self._load(order_id))

    async def find_or_none(self, order_id: str) -> Order | None:
        """Same as find() but returns None when the order does not exist."""
        try:
            return await self.find(order_id)
        except OrderNotFoundError:
            return None

    async def save(self, order: Order) -> bool:
        """
        Write the order.

        Transient orders are written create-only, persisted orders
        update-only. On success the order becomes persisted.

        Returns:
            True if written, False if the write condition failed.
        """
        mode = SetMode.UPDATE_ONLY if order.state is OrderState.PERSISTED else SetMode.CREATE_ONLY
        written = await self.store.set(
            self.key_for(order.order_id),
            json.dumps(order.to_dict()),
            mode,
        )

        if written:
            order.mark_persisted()
            logger.info("order_saved", order_id=order.order_id, mode=mode.value)
        else:
            logger.warning("order_save_conflict", order_id=order.order_id, mode=mode.value)

        return written

    async def capture(self, order: Order) -> bool:
        """Mark the order as captured and save it."""
        order.mark_captured()
        return await self.save(order)

    async def reload(self, order: Order) -> Order:
        """
        Replace the order's attributes with the stored ones.

        Raises:
            OrderNotFoundError: If the order is no longer stored.
        """
        order.replace_attributes(await self._load(order.order_id))
        return order

    async def count(self) -> int:
        """Number of stored orders."""
        return len(await self.store.keys(self.key_prefix))

    async def clear(self) -> int:
        """Delete every stored order. Returns the number of orders removed."""
        keys = await self.store.keys(self.key_prefix)
        removed = await self.store.delete(*keys)
        logger.info("orders_cleared", count=removed)
        return removed

    async def _load(self, order_id: str) -> dict[str, Any]:
        value = await self.store.get(self.key_for(order_id))
        if value is None:
            raise OrderNotFoundError(order_id)
        return json.loads(value)
