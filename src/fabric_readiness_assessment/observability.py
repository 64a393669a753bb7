"""Structured logging setup for the assessment engine.

Loggers are structlog bound loggers and take keyword context, e.g.
``logger.info("Assessment scored", overall_score=79.0, tier="good_fit")``.

Call ``setup_logging()`` once at process start to apply the
FABRIC_ASSESSMENT_LOG_* settings.
"""

import logging
import sys
from typing import Any

import structlog

from fabric_readiness_assessment.settings import Settings


def _service_name_adder(service_name: str) -> Any:
    def add_service_name(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return add_service_name


def configure_logging(
    level: str = "INFO",
    json_logs: bool = False,
    service_name: str | None = None,
) -> None:
    """Configure structlog processors and the stdlib root handler.

    Args:
        level: Minimum log level name (e.g., 'DEBUG', 'INFO').
        json_logs: Render events as JSON lines instead of console output.
        service_name: Added to every event as ``service`` when given.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    if json_logs:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if service_name:
        processors.append(_service_name_adder(service_name))
    processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ]
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=True,
    )


def setup_logging(settings: Settings | None = None) -> Settings:
    """Configure logging from service settings.

    Args:
        settings: Settings to apply. Read from the environment when omitted.

    Returns:
        The settings that were applied.
    """
    settings = settings or Settings()
    configure_logging(
        level=settings.log_level,
        json_logs=settings.log_json,
        service_name=settings.service_name,
    )
    return settings


def get_logger(name: str) -> Any:
    """Return a structlog logger for the given module name.

    Args:
        name: Logger name, typically ``__name__``.

    Returns:
        A bound logger accepting keyword context on every call.
    """
    return structlog.get_logger(name)
