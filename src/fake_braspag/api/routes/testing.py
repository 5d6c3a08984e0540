"""
Test-control endpoints.

Client test suites call these between scenarios to inspect and reset the
state the fake processor keeps across requests.
"""

import structlog
from fastapi import APIRouter, Response, status

from fake_braspag.api.dependencies import Ledger, OrderRepo
from fake_braspag.api.models import (
    AuthorizedRequestsJSON,
    CapturedRequestsJSON,
    LedgerEntryJSON,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/test", tags=["test-control"])


@router.get("/authorized-requests", response_model=AuthorizedRequestsJSON)
async def list_authorized_requests(ledger: Ledger) -> AuthorizedRequestsJSON:
    return AuthorizedRequestsJSON(
        authorized_requests=[
            LedgerEntryJSON(
                order_id=order_id,
                card_last_four=entry.card_number[-4:],
                amount=entry.amount,
            )
            for order_id, entry in ledger.authorized_requests().items()
        ]
    )


@router.get("/captured-requests", response_model=CapturedRequestsJSON)
async def list_captured_requests(ledger: Ledger) -> CapturedRequestsJSON:
    return CapturedRequestsJSON(captured_requests=ledger.captured_order_ids())


@router.delete("/authorized-requests", status_code=status.HTTP_204_NO_CONTENT)
async def clear_authorized_requests(ledger: Ledger) -> Response:
    ledger.clear_authorized()
    logger.info("authorized_requests_cleared")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/captured-requests", status_code=status.HTTP_204_NO_CONTENT)
async def clear_captured_requests(ledger: Ledger) -> Response:
    ledger.clear_captured()
    logger.info("captured_requests_cleared")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/orders", status_code=status.HTTP_204_NO_CONTENT)
async def clear_orders(repository: OrderRepo) -> Response:
    await repository.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
