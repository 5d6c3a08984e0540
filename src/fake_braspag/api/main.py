"""FastAPI application entry point for the Fake Braspag service."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fake_braspag import __version__
from fake_braspag.api.routes import orders_router, pagador_router, testing_router
from fake_braspag.config import Settings, settings as default_settings
from fake_braspag.domain import DecisionEngine, RequestLedger
from fake_braspag.infrastructure import OrderRepository, create_store
from fake_braspag.logging_config import configure_logging

# Configure logging at module level
configure_logging()

logger = structlog.get_logger()


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Each app owns its own RequestLedger and store, so tests can run several
    apps side by side without sharing state.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Application lifespan manager.

        Handles startup and shutdown:
        - Build the order store and ledger
        - Close the store on shutdown
        """
        logger.info(
            "starting_fake_braspag",
            environment=settings.environment,
            store_backend=settings.store_backend,
        )

        store = create_store(settings)
        ledger = RequestLedger()

        app.state.settings = settings
        app.state.store = store
        app.state.ledger = ledger
        app.state.engine = DecisionEngine(ledger)
        app.state.order_repository = OrderRepository(store, key_prefix=settings.order_key_prefix)

        logger.info("fake_braspag_started")

        yield

        logger.info("shutting_down_fake_braspag")
        await store.close()
        logger.info("fake_braspag_shutdown_complete")

    app = FastAPI(
        title="Fake Braspag",
        description="Deterministic Pagador authorize/capture stand-in for integration tests",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(pagador_router)
    app.include_router(orders_router)
    app.include_router(testing_router)

    @app.get("/health")
    async def health_check(request: Request) -> JSONResponse:
        """Health check endpoint.

        Returns:
            200 OK if the order store is reachable
            503 Service Unavailable otherwise
        """
        try:
            await request.app.state.store.ping()

            return JSONResponse(
                status_code=200,
                content={
                    "status": "healthy",
                    "service": settings.service_name,
                    "environment": settings.environment,
                },
            )
        except Exception as e:
            logger.error("health_check_failed", error=str(e))
            return JSONResponse(
                status_code=503,
                content={
                    "status": "unhealthy",
                    "service": settings.service_name,
                    "error": str(e),
                },
            )

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {
            "service": "Fake Braspag",
            "version": __version__,
            "status": "running",
        }

    return app


app = create_app()
