"""Structured logging configuration using structlog."""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, Processor

from fake_braspag.config import Settings, settings as default_settings
from fake_braspag.models.order import mask_card_number

# Event keys that may carry a raw PAN
CARD_NUMBER_KEYS = ("card_number", "cardNumber")


def mask_card_numbers(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Replace card numbers in an event with their masked form."""
    for key in CARD_NUMBER_KEYS:
        value = event_dict.get(key)
        if isinstance(value, str):
            event_dict[key] = mask_card_number(value)
    return event_dict


def _renderer(settings: Settings) -> Processor:
    if settings.environment == "production":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure structlog for the service.

    Card numbers passed as event fields are masked before rendering, and
    every event carries the service name and environment.
    """
    settings = settings or default_settings
    level = logging.getLevelName(settings.log_level.upper())

    # uvicorn logs through the standard library
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            mask_card_numbers,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _renderer(settings),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        service=settings.service_name,
        environment=settings.environment,
    )
