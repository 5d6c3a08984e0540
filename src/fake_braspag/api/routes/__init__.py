"""API routes."""

from fake_braspag.api.routes.orders import router as orders_router
from fake_braspag.api.routes.pagador import router as pagador_router
from fake_braspag.api.routes.testing import router as testing_router

__all__ = ["orders_router", "pagador_router", "testing_router"]
