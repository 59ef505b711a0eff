"""
Structured logging configuration using structlog.

Every ledger mutation is logged as an event with its ids and amounts.
Development gets colored console output; other environments get JSON
lines, optionally mirrored to a file in the data directory.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from goldbook.config.settings import get_settings

# Event keys holding money or grams; logged rounded so float noise stays out
ROUNDED_KEYS = frozenset(
    {
        "amount",
        "net_total",
        "remaining_balance",
        "treasury_balance",
        "work_weight",
        "cash_payment",
        "outstanding",
    }
)


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Tag events with the store and build they come from."""
    settings = get_settings()
    event_dict["app"] = settings.app_name
    event_dict["version"] = settings.app_version
    event_dict["environment"] = settings.environment
    return event_dict


def round_amounts(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    for key in ROUNDED_KEYS.intersection(event_dict):
        value = event_dict[key]
        if isinstance(value, float):
            event_dict[key] = round(value, 3)
    return event_dict


def _handlers(json_output: bool) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    settings = get_settings()
    if json_output and settings.log_file:
        log_path = settings.storage.data_dir / settings.log_file
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def configure_logging() -> None:
    """Configure structlog and the stdlib root logger it writes through."""
    settings = get_settings()
    json_output = settings.environment != "development"

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        round_amounts,
        add_app_context,
    ]

    if json_output:
        renderer: list[Processor] = [
            structlog.processors.format_exc_info,
            # Customer and trader names are mostly Arabic
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    else:
        renderer = [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=shared_processors + renderer,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, settings.log_level),
        handlers=_handlers(json_output),
        force=True,
    )

    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
