"""Pagador form-POST endpoints (Authorize, Capture, GetDadosPedido)."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Form
from fastapi.responses import Response

from fake_braspag.api.dependencies import Engine
from fake_braspag.api.responses import (
    render_authorize,
    render_capture,
    render_order_data,
    xml_response,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/webservices/pagador")

AUTHORIZE_PATH = "/Pagador.asmx/Authorize"
CAPTURE_PATH = "/Pagador.asmx/Capture"
ORDER_DATA_PATH = "/pedido.asmx/GetDadosPedido"


@router.post(AUTHORIZE_PATH)
async def post_authorize(
    engine: Engine,
    order_id: Annotated[str, Form(alias="orderId")],
    card_number: Annotated[str | None, Form(alias="cardNumber")] = None,
    amount: Annotated[str | None, Form()] = None,
) -> Response:
    """
    Authorize a payment.

    Only orderId, cardNumber and amount are read; the other Pagador fields
    (customerName, paymentMethod, numberPayments, ...) are accepted and ignored.
    """
    logger.info("authorize_request", order_id=order_id)

    decision = engine.authorize(card_number, order_id, amount)

    return xml_response(render_authorize(decision, order_id, amount))


@router.post(CAPTURE_PATH)
async def post_capture(
    engine: Engine,
    order_id: Annotated[str, Form(alias="orderId")],
) -> Response:
    """Capture a previously authorized payment."""
    logger.info("capture_request", order_id=order_id)

    decision = engine.capture(order_id)

    return xml_response(render_capture(decision, engine.amount_for(order_id)))


@router.post(ORDER_DATA_PATH)
async def post_order_data(
    engine: Engine,
    order_number: Annotated[str, Form(alias="numeroPedido")],
) -> Response:
    """Return the amount authorized for an order ("" if never authorized)."""
    return xml_response(render_order_data(order_number, engine.amount_for(order_number)))
