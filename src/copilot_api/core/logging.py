"""
Logging configuration for copilot-api.

This module sets up structured logging using structlog with support for
both JSON and human-readable formats.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from structlog.types import FilteringBoundLogger

from .config import LoggingConfig, get_settings


SENSITIVE_KEYS = {
    "token", "pat", "personalaccesstoken", "access_token", "accesstoken",
    "authorization", "api_key", "secret", "password",
}


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Setup client logging configuration.

    Args:
        config: Logging configuration. If None, uses settings from environment.
    """
    if config is None:
        config = get_settings().logging

    # Configure standard library logging
    logging.basicConfig(
        level=getattr(logging, config.level),
        format="%(message)s",
        handlers=_get_handlers(config)
    )

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _filter_sensitive_data,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer() if config.format == "json"
            else structlog.dev.ConsoleRenderer(colors=True)
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.level)
        ),
        logger_factory=structlog.WriteLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _get_handlers(config: LoggingConfig) -> list[logging.Handler]:
    """Get logging handlers based on configuration."""
    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, config.level))
    handlers.append(console_handler)

    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8"
        )
        file_handler.setLevel(getattr(logging, config.level))
        handlers.append(file_handler)

    return handlers


def _filter_sensitive_data(
    logger: FilteringBoundLogger,
    method_name: str,
    event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Redact credentials from log entries."""

    def _filter(data: Any) -> Any:
        if isinstance(data, dict):
            return {
                key: "[REDACTED]" if str(key).lower() in SENSITIVE_KEYS
                else _filter(value)
                for key, value in data.items()
            }
        elif isinstance(data, list):
            return [_filter(item) for item in data]
        return data

    return _filter(event_dict)


def get_logger(name: str = __name__) -> FilteringBoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        Configured structlog logger instance.
    """
    return structlog.get_logger(name)


def log_auth_event(
    logger: FilteringBoundLogger,
    event_type: str,
    context: Optional[str] = None,
    success: bool = True,
    details: Optional[Dict[str, Any]] = None
) -> None:
    """Log authentication events."""
    logger.info(
        "Authentication event",
        event_type=event_type,
        context=context,
        success=success,
        **(details or {})
    )


def log_api_call(
    logger: FilteringBoundLogger,
    service: str,
    endpoint: str,
    method: str,
    status_code: int,
    duration_ms: float,
    request_size: Optional[int] = None,
    response_size: Optional[int] = None
) -> None:
    """Log external API calls."""
    logger.info(
        "External API call",
        service=service,
        endpoint=endpoint,
        method=method,
        status_code=status_code,
        duration_ms=duration_ms,
        request_size=request_size,
        response_size=response_size
    )


def log_error(
    logger: FilteringBoundLogger,
    error: Exception,
    context: Optional[Dict[str, Any]] = None
) -> None:
    """Log errors with context."""
    logger.error(
        "Error occurred",
        error_type=type(error).__name__,
        error_message=str(error),
        **(context or {}),
        exc_info=True
    )


# Initialize logging on module import
setup_logging()
