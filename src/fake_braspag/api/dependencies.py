"""
FastAPI dependencies for the Fake Braspag routes.

Shared state (ledger, engine, order repository) is built once in the
application lifespan and stored on app.state; these dependencies hand it to
the routes.
"""

from typing import Annotated

from fastapi import Depends, Request

from fake_braspag.domain import DecisionEngine, RequestLedger
from fake_braspag.infrastructure import OrderRepository


def get_ledger(request: Request) -> RequestLedger:
    return request.app.state.ledger


# Type alias for ledger dependency
Ledger = Annotated[RequestLedger, Depends(get_ledger)]


def get_engine(request: Request) -> DecisionEngine:
    return request.app.state.engine


# Type alias for decision engine dependency
Engine = Annotated[DecisionEngine, Depends(get_engine)]


def get_order_repository(request: Request) -> OrderRepository:
    return request.app.state.order_repository


# Type alias for order repository dependency
OrderRepo = Annotated[OrderRepository, Depends(get_order_repository)]
