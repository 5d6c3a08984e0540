"""In-memory record of authorized and captured Pagador requests."""

from dataclasses import dataclass
from threading import Lock


@dataclass(frozen=True)
class LedgerEntry:
    """Card number and amount presented at authorize time."""

    card_number: str
    amount: str | None


class RequestLedger:
    """
    Authorized and captured requests seen by one service instance.

    One ledger is owned by the application (or a test harness) and passed to
    the DecisionEngine. Nothing expires: callers clear it between scenarios.

    Implementation notes:
    - Authorizations are keyed by order id; a repeated order id overwrites
      the previous entry (last write wins)
    - Captures are an append-only list; the same order id may appear twice
    - A single lock guards both structures because FastAPI runs sync route
      handlers on a thread pool
    """

    def __init__(self) -> None:
        self._authorized: dict[str, LedgerEntry] = {}
        self._captured: list[str] = []
        self._lock = Lock()

    def record_authorization(self, order_id: str, card_number: str, amount: str | None) -> LedgerEntry:
        entry = LedgerEntry(card_number=card_number, amount=amount)
        with self._lock:
            self._authorized[order_id] = entry
        return entry

    def lookup(self, order_id: str) -> LedgerEntry | None:
        with self._lock:
            return self._authorized.get(order_id)

    def record_capture(self, order_id: str) -> None:
        with self._lock:
            self._captured.append(order_id)

    def authorized_requests(self) -> dict[str, LedgerEntry]:
        """Snapshot of the authorized requests."""
        with self._lock:
            return dict(self._authorized)

    def captured_order_ids(self) -> list[str]:
        """Snapshot of the captured order ids, in capture order."""
        with self._lock:
            return list(self._captured)

    def clear_authorized(self) -> None:
        with self._lock:
            self._authorized.clear()

    def clear_captured(self) -> None:
        with self._lock:
            self._captured.clear()
