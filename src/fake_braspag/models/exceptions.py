"""Custom exceptions for the Fake Braspag order store."""


class OrderError(Exception):
    """Base exception for order-related errors."""

    pass


class OrderNotFoundError(OrderError):
    """
    Raised when no order is stored under the requested id.

    Callers that treat a missing order as a normal outcome should use
    OrderRepository.find_or_none() instead of catching this.
    """

    def __init__(self, order_id: str) -> None:
        super().__init__(f"Order not found: {order_id}")
        self.order_id = order_id


class InvalidOrderError(OrderError):
    """Raised when an order is built without an orderId."""

    pass
