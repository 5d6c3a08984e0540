"""JSON endpoints over the order store."""

from typing import Any

import structlog
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse

from fake_braspag.api.dependencies import OrderRepo
from fake_braspag.api.models import OrderCountJSON
from fake_braspag.models import InvalidOrderError, OrderNotFoundError

logger = structlog.get_logger()

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("")
async def create_order(repository: OrderRepo, attributes: dict[str, Any]) -> JSONResponse:
    """
    Create an order.

    Returns:
        201 with the stored attributes (card number masked, amount normalized)

    Raises:
        HTTPException: 409 if the orderId already exists, 422 if it is missing
    """
    try:
        order = await repository.create(attributes)
    except InvalidOrderError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    if order is False:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Order already exists: {attributes.get('orderId')}",
        )

    return JSONResponse(status_code=status.HTTP_201_CREATED, content=order.to_dict())


@router.get("", response_model=OrderCountJSON)
async def count_orders(repository: OrderRepo) -> OrderCountJSON:
    return OrderCountJSON(count=await repository.count())


@router.get("/{order_id}")
async def get_order(order_id: str, repository: OrderRepo) -> dict[str, Any]:
    try:
        order = await repository.find(order_id)
    except OrderNotFoundError as e:
        logger.warning("order_not_found", order_id=order_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return order.to_dict()


@router.post("/{order_id}/capture")
async def capture_order(order_id: str, repository: OrderRepo) -> dict[str, Any]:
    """
    Mark an order as captured.

    Raises:
        HTTPException: 404 if the order does not exist or disappears mid-capture
    """
    order = await repository.find_or_none(order_id)
    if order is None or not await repository.capture(order):
        logger.warning("order_not_found", order_id=order_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Order not found: {order_id}")

    return order.to_dict()
