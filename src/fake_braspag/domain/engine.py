"""
Authorize/capture decisioning for the fake Pagador service.

The engine maps a test card (see cards.py) to an outcome and keeps the
RequestLedger in sync with successful operations:

- authorize: consults the card table, ledgers the order on success
- capture: re-classifies the card ledgered for the order, appends the order
  to the captured list on success

Only the AuthorizeAndCaptureOk card lands on the captured list at authorize
time. An order authorized with the CaptureOk card stays off that list until
an explicit capture call, so /test/captured-requests never reports a capture
the client did not ask for.

Unknown cards and unknown orders never fail loudly. An unknown card is
denied at authorize time; capturing an order that was never ledgered yields
no status at all (None) rather than a denial.
"""

from dataclasses import dataclass

import structlog

from fake_braspag.domain.cards import CardProfile, classify
from fake_braspag.domain.ledger import RequestLedger
from fake_braspag.domain.status import (
    AUTHORIZE_STATUS_BY_PROFILE,
    AUTHORIZING_PROFILES,
    CAPTURE_STATUS_BY_PROFILE,
    AuthorizeStatus,
    CaptureStatus,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AuthorizeDecision:
    """
    Outcome of an authorize call.

    status is usually an AuthorizeStatus. The authorize-and-capture cards
    report a CaptureStatus instead, and captured is True when the capture
    was completed as part of the same call.
    """

    succeeded: bool
    status: AuthorizeStatus | CaptureStatus
    captured: bool = False


@dataclass(frozen=True)
class CaptureDecision:
    """Outcome of a capture call. status is None when the outcome is unknown."""

    succeeded: bool
    status: CaptureStatus | None


def _last_four(card_number: str | None) -> str | None:
    return card_number[-4:] if card_number else None


class DecisionEngine:
    """Deterministic authorize/capture decisions backed by a RequestLedger."""

    def __init__(self, ledger: RequestLedger) -> None:
        self.ledger = ledger

    def authorize(self, card_number: str | None, order_id: str, amount: str | None) -> AuthorizeDecision:
        """
        Authorize a card for an order.

        Args:
            card_number: Raw card number as sent by the client
            order_id: Client order identifier
            amount: Amount as sent by the client (comma or dot decimal separator)

        Returns:
            AuthorizeDecision. Unknown cards are denied with AuthorizeStatus.DENIED.
        """
        profile = classify(card_number)

        if profile is None or profile not in AUTHORIZING_PROFILES:
            logger.info(
                "authorize_denied",
                order_id=order_id,
                card_last_four=_last_four(card_number),
                card_profile=profile.value if profile else None,
            )
            return AuthorizeDecision(succeeded=False, status=AuthorizeStatus.DENIED)

        self.ledger.record_authorization(order_id, card_number, amount)

        # One-step authorize-and-capture completes the capture immediately
        captured = profile is CardProfile.AUTHORIZE_AND_CAPTURE_OK
        if captured:
            self.ledger.record_capture(order_id)

        status = AUTHORIZE_STATUS_BY_PROFILE[profile]
        logger.info(
            "authorize_succeeded",
            order_id=order_id,
            card_last_four=_last_four(card_number),
            card_profile=profile.value,
            status=status.value,
            captured=captured,
        )
        return AuthorizeDecision(succeeded=True, status=status, captured=captured)

    def capture(self, order_id: str) -> CaptureDecision:
        """
        Capture a previously authorized order.

        Returns:
            CaptureDecision with status None if the order was never authorized
            or its card has no capture outcome.
        """
        entry = self.ledger.lookup(order_id)
        if entry is None:
            logger.info("capture_unknown_order", order_id=order_id)
            return CaptureDecision(succeeded=False, status=None)

        profile = classify(entry.card_number)
        status = CAPTURE_STATUS_BY_PROFILE.get(profile) if profile else None

        if status is CaptureStatus.CAPTURED:
            self.ledger.record_capture(order_id)
            logger.info(
                "capture_succeeded",
                order_id=order_id,
                card_last_four=_last_four(entry.card_number),
            )
            return CaptureDecision(succeeded=True, status=status)

        logger.info(
            "capture_not_completed",
            order_id=order_id,
            card_last_four=_last_four(entry.card_number),
            status=status.value if status else None,
        )
        return CaptureDecision(succeeded=False, status=status)

    def amount_for(self, order_id: str) -> str:
        """Return the ledgered amount with a dot decimal separator, or "" if unknown."""
        entry = self.ledger.lookup(order_id)
        if entry is None or entry.amount is None:
            return ""
        return entry.amount.replace(",", ".")
