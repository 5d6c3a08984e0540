"""
Test card enumeration for the fake Pagador service.

Each literal card number is bound to exactly one behavior. Client test suites
pick the card whose behavior they want to exercise; any other number is
unknown to the service and is treated as a denial.

SYNC POINT: client fixtures usually hard-code these numbers. Changing a value
here breaks every consumer that relies on it.
"""

from enum import Enum


class CardProfile(str, Enum):
    """Behavior variant bound to a test card number."""

    AUTHORIZE_OK = "authorize_ok"
    AUTHORIZE_DENIED = "authorize_denied"
    AUTHORIZE_AND_CAPTURE_OK = "authorize_and_capture_ok"
    AUTHORIZE_AND_CAPTURE_DENIED = "authorize_and_capture_denied"
    CAPTURE_OK = "capture_ok"
    CAPTURE_DENIED = "capture_denied"


class CreditCard:
    """Known test card numbers."""

    AUTHORIZE_OK = "5340749871433512"
    AUTHORIZE_DENIED = "5558702121154658"
    AUTHORIZE_AND_CAPTURE_OK = "5326107541057732"
    AUTHORIZE_AND_CAPTURE_DENIED = "5430442567033801"
    CAPTURE_OK = "5277253663231678"
    CAPTURE_DENIED = "5473598178407565"


TEST_CARD_PROFILES: dict[str, CardProfile] = {
    CreditCard.AUTHORIZE_OK: CardProfile.AUTHORIZE_OK,
    CreditCard.AUTHORIZE_DENIED: CardProfile.AUTHORIZE_DENIED,
    CreditCard.AUTHORIZE_AND_CAPTURE_OK: CardProfile.AUTHORIZE_AND_CAPTURE_OK,
    CreditCard.AUTHORIZE_AND_CAPTURE_DENIED: CardProfile.AUTHORIZE_AND_CAPTURE_DENIED,
    CreditCard.CAPTURE_OK: CardProfile.CAPTURE_OK,
    CreditCard.CAPTURE_DENIED: CardProfile.CAPTURE_DENIED,
}


def classify(card_number: str | None) -> CardProfile | None:
    """Return the profile for a test card, or None for unknown numbers."""
    if card_number is None:
        return None
    return TEST_CARD_PROFILES.get(card_number)
