"""
Custom exceptions for copilot-api.

This module defines all custom exceptions raised by the client. Each error
carries a machine-readable type and code so host plugins can surface them.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class CopilotAPIError(Exception):
    """Base exception for all copilot-api errors."""

    def __init__(
        self,
        message: str,
        error_type: str = "copilot_api_error",
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        error_dict = {
            "message": self.message,
            "type": self.error_type,
        }

        if self.error_code:
            error_dict["code"] = self.error_code

        if self.details:
            error_dict.update(self.details)

        return {"error": error_dict}


class AuthenticationError(CopilotAPIError):
    """No personal access token on record."""

    def __init__(
        self,
        message: str = "Not authenticated. Please authenticate first using the Copilot Chat view.",
        error_code: Optional[str] = "missing_token",
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_type="authentication_error",
            error_code=error_code,
            details=details
        )


class TokenError(CopilotAPIError):
    """Token related errors."""

    def __init__(
        self,
        message: str = "Token error",
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_type="token_error",
            error_code=error_code,
            details=details
        )


class TokenRefreshError(TokenError):
    """The token exchange rejected the personal access token."""

    def __init__(
        self,
        message: str = "Failed to refresh token",
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code="token_refresh_failed",
            details=details
        )


class InvalidResponseError(CopilotAPIError):
    """The chat API returned a malformed or empty response."""

    def __init__(
        self,
        message: str = "Invalid response from Copilot API",
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_type="invalid_response_error",
            error_code="invalid_response",
            details=details
        )


class APIError(CopilotAPIError):
    """Non-success status from the chat API."""

    def __init__(
        self,
        message: str = "External API error",
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_type="api_error",
            error_code=error_code,
            details=details
        )
        self.status_code = status_code


class ConfigurationError(CopilotAPIError):
    """Configuration related errors."""

    def __init__(
        self,
        message: str = "Configuration error",
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_type="configuration_error",
            error_code=error_code,
            details=details
        )


class TimeoutError(CopilotAPIError):
    """Request timeout error."""

    def __init__(
        self,
        message: str = "Request timeout",
        error_code: Optional[str] = "timeout",
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_type="timeout_error",
            error_code=error_code,
            details=details
        )
