"""Order entity persisted by the Fake Braspag service."""

from enum import Enum
from typing import Any, Iterator, Mapping

from fake_braspag.models.exceptions import InvalidOrderError

CARD_NUMBER_MASK = "************"
CAPTURED_STATUS = "captured"

# Pagador form fields; amount keeps the client's decimal formatting
STRING_FIELDS = ("orderId", "amount", "cardNumber")


class OrderState(str, Enum):
    """Persistence lifecycle of an Order."""

    TRANSIENT = "transient"
    PERSISTED = "persisted"


def normalize_amount(amount: str | None) -> str | None:
    """Use '.' as decimal separator."""
    if amount is None:
        return None
    return amount.replace(",", ".")


def mask_card_number(card_number: str | None) -> str | None:
    """Keep only the last 4 digits of a card number."""
    if card_number is None:
        return None
    return CARD_NUMBER_MASK + card_number[-4:]


class Order:
    """
    An order placed against the fake processor.

    Attributes are kept as a flat string mapping using the Pagador field
    names (orderId, amount, cardNumber, status) plus any passthrough fields.
    The raw card number never reaches the attribute mapping: it is masked
    while the order is being built.

    Persistence is handled by OrderRepository, which chooses create-only or
    update-only writes from the order's state.
    """

    def __init__(
        self,
        attributes: Mapping[str, Any],
        state: OrderState = OrderState.TRANSIENT,
    ) -> None:
        attributes = dict(attributes)

        if not attributes.get("orderId"):
            raise InvalidOrderError("orderId is required")
        for field in STRING_FIELDS:
            value = attributes.get(field)
            if value is not None and not isinstance(value, str):
                raise InvalidOrderError(f"{field} must be a string, got {type(value).__name__}")

        if "amount" in attributes:
            attributes["amount"] = normalize_amount(attributes["amount"])
        if "cardNumber" in attributes:
            attributes["cardNumber"] = mask_card_number(attributes["cardNumber"])

        self._attributes: dict[str, Any] = attributes
        self.state = state

    @classmethod
    def restore(cls, attributes: Mapping[str, Any]) -> "Order":
        """Build a persisted order from stored attributes without re-normalizing."""
        order = cls.__new__(cls)
        order._attributes = dict(attributes)
        order.state = OrderState.PERSISTED
        return order

    def __getitem__(self, attribute: str) -> Any:
        return self._attributes.get(attribute)

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __repr__(self) -> str:
        return f"Order(attributes={self._attributes!r}, state={self.state.value})"

    @property
    def order_id(self) -> str:
        return self._attributes["orderId"]

    @property
    def amount(self) -> str | None:
        return self._attributes.get("amount")

    @property
    def card_number(self) -> str | None:
        return self._attributes.get("cardNumber")

    @property
    def status(self) -> str | None:
        return self._attributes.get("status")

    @property
    def persisted(self) -> bool:
        return self.state is OrderState.PERSISTED

    @property
    def captured(self) -> bool:
        return self.status == CAPTURED_STATUS

    def mark_captured(self) -> None:
        """Set the status to captured. Persisting is up to the caller."""
        self._attributes["status"] = CAPTURED_STATUS

    def mark_persisted(self) -> None:
        self.state = OrderState.PERSISTED

    def replace_attributes(self, attributes: Mapping[str, Any]) -> None:
        """Replace every attribute with the stored ones."""
        self._attributes = dict(attributes)
        self.state = OrderState.PERSISTED

    def to_dict(self) -> dict[str, Any]:
        return dict(self._attributes)
