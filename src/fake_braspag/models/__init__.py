"""Order model for the Fake Braspag service."""

from fake_braspag.models.exceptions import (
    InvalidOrderError,
    OrderError,
    OrderNotFoundError,
)
from fake_braspag.models.order import Order, OrderState

__all__ = [
    "InvalidOrderError",
    "Order",
    "OrderError",
    "OrderNotFoundError",
    "OrderState",
]
