"""Domain layer: test card table, status vocabularies and decision engine."""

from fake_braspag.domain.cards import CardProfile, CreditCard, classify
from fake_braspag.domain.engine import AuthorizeDecision, CaptureDecision, DecisionEngine
from fake_braspag.domain.ledger import LedgerEntry, RequestLedger
from fake_braspag.domain.status import AuthorizeStatus, CaptureStatus

__all__ = [
    "AuthorizeDecision",
    "AuthorizeStatus",
    "CaptureDecision",
    "CaptureStatus",
    "CardProfile",
    "CreditCard",
    "DecisionEngine",
    "LedgerEntry",
    "RequestLedger",
    "classify",
]
