"""
Core modules for copilot-api.

This package contains the core infrastructure components including
configuration, exceptions and logging.
"""

from __future__ import annotations

from .config import (
    Settings,
    AuthConfig,
    APIConfig,
    ChatConfig,
    LoggingConfig,
    get_settings,
    reload_settings,
)
from .exceptions import (
    CopilotAPIError,
    AuthenticationError,
    TokenError,
    TokenRefreshError,
    InvalidResponseError,
    APIError,
    ConfigurationError,
    TimeoutError,
)
from .logging import (
    get_logger,
    setup_logging,
    log_auth_event,
    log_api_call,
    log_error,
)

__all__ = [
    # Configuration
    "Settings",
    "AuthConfig",
    "APIConfig",
    "ChatConfig",
    "LoggingConfig",
    "get_settings",
    "reload_settings",
    # Exceptions
    "CopilotAPIError",
    "AuthenticationError",
    "TokenError",
    "TokenRefreshError",
    "InvalidResponseError",
    "APIError",
    "ConfigurationError",
    "TimeoutError",
    # Logging
    "get_logger",
    "setup_logging",
    "log_auth_event",
    "log_api_call",
    "log_error",
]
