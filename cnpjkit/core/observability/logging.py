"""Structured logging configuration with structlog.

The library itself only emits debug-level events through
``get_logger_for_component`` and never configures logging on import.
Applications call ``configure_structlog`` once at startup.

Usage:
    from cnpjkit.core.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output
"""

import logging
import os

import structlog
from structlog.typing import Processor

# Environment variable for log level (default: INFO)
LOG_LEVEL_ENV = "CNPJKIT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

SERVICE_NAME = "cnpjkit"


def _get_log_level() -> int:
    """Get the configured log level from environment.

    Returns:
        The logging level integer (e.g., logging.INFO).
    """
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def configure_structlog(environment: str = "production") -> None:
    """Configure structlog for the application.

    Args:
        environment: 'production' for JSON output, 'development' for console.
                    Defaults to 'production'.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_component(component: str) -> structlog.typing.FilteringBoundLogger:
    """Get a logger pre-bound with the service and component names.

    Binding happens on every call, so the logger always reflects the
    current structlog configuration.

    Args:
        component: The component emitting events (e.g. "domain").

    Returns:
        A bound logger with service and component bound.
    """
    return structlog.get_logger().bind(service=SERVICE_NAME, component=component)
