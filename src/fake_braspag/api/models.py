"""Pydantic models for the JSON routes."""

from pydantic import BaseModel, Field


class OrderCountJSON(BaseModel):
    """Number of stored orders."""

    count: int = Field(..., description="Number of stored orders")


class LedgerEntryJSON(BaseModel):
    """Authorized request as recorded by the ledger."""

    order_id: str = Field(..., description="Client order id")
    card_last_four: str = Field(..., description="Last four digits of the authorized card")
    amount: str | None = Field(None, description="Amount as sent at authorize time")


class AuthorizedRequestsJSON(BaseModel):
    """Snapshot of the authorized requests."""

    authorized_requests: list[LedgerEntryJSON] = Field(default_factory=list)


class CapturedRequestsJSON(BaseModel):
    """Snapshot of the captured order ids."""

    captured_requests: list[str] = Field(default_factory=list)
