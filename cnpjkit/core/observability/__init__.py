"""Observability: structured logging configuration with structlog."""

from cnpjkit.core.observability.logging import (
    configure_structlog,
    get_logger_for_component,
)

__all__: list[str] = [
    "configure_structlog",
    "get_logger_for_component",
]
